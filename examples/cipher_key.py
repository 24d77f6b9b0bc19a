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

import getpass, os, sys

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

import keyderive

# The salt needs to be stored alongside the ciphertext so the key can
# be derived again for decryption
salt = os.urandom(16)

try:
    key, nonce = keyderive.derive_cipher_key_iv(getpass.getpass(), salt,
                                                'aes256-gcm',
                                                iterations=20000)
except keyderive.KDFError as exc:
    sys.exit('Key derivation failed: ' + str(exc))

ciphertext = AESGCM(key).encrypt(nonce, b'Attack at dawn', None)

print('salt:', salt.hex())
print('ciphertext:', ciphertext.hex())
