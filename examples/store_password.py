#!/usr/bin/env python3
#
# Copyright (c) 2026 by Ron Frederick <ronf@timeheart.net> and others.
#
# This program and the accompanying materials are made available under
# the terms of the Eclipse Public License v2.0 which accompanies this
# distribution and is available at:
#
#     http://www.eclipse.org/legal/epl-2.0/
#
# This program may also be made available under the following secondary
# licenses when the conditions for such availability set forth in the
# Eclipse Public License v2.0 are satisfied:
#
#    GNU General Public License, Version 2.0, or any later versions of
#    that license
#
# SPDX-License-Identifier: EPL-2.0 OR GPL-2.0-or-later
#
# Contributors:
#     Ron Frederick - initial implementation, API, and documentation

import getpass, hmac

import keyderive

stored = keyderive.hash_password(getpass.getpass('New password: ')).encode()
print('Stored value:', stored)

pwhash = keyderive.decode_password_hash(stored)
attempt = pwhash.rederive(getpass.getpass('Password again: '))

# Compare in constant time
if hmac.compare_digest(attempt, pwhash.value):
    print('Passwords match')
else:
    print('Passwords do not match')
