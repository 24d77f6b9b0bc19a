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

"""PBKDF2-HMAC password based key derivation for Python"""

from .version import __author__, __author_email__, __url__, __version__

# pylint: disable=wildcard-import

from .constants import *

# pylint: enable=wildcard-import

from .crypto import DigestAlgorithm, HMACPRF
from .crypto import get_digest_names, lookup_digest, register_digest

from .kdf import DerivationRequest, KDFOptions
from .kdf import derive, pbkdf2_hmac, pbkdf2_hmac_async

from .logging import logger, set_log_level, set_debug_level

from .misc import KDFError, ParameterError, PrimitiveFailure
from .misc import InvalidIterationCount, InvalidOutputLength
from .misc import OutputLengthTooLarge, UnknownDigestAlgorithm
from .misc import UnknownCipher, InvalidOption, PasswordHashFormatError

from .password import PasswordHash, hash_password, decode_password_hash

from .pbe import get_cipher_names, get_cipher_params
from .pbe import derive_cipher_key, derive_cipher_key_iv
