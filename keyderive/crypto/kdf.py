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

"""A shim around PyCA for PBKDF2 key derivation"""

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..misc import PrimitiveFailure


def pbkdf2_hmac(digest, passphrase, salt, count, key_size):
    """A shim around PyCA for PBKDF2 HMAC key derivation"""

    try:
        return PBKDF2HMAC(digest.hash_alg(), key_size, salt,
                          count).derive(passphrase)
    except (InternalError, UnsupportedAlgorithm) as exc:
        raise PrimitiveFailure('PBKDF2-HMAC-%s failed: %s' %
                               (digest.name.upper(), exc)) from exc
