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

"""keyderive constants"""

# pylint: disable=bad-whitespace

# Error codes
KDF_INVALID_ITERATION_COUNT   = 1
KDF_INVALID_OUTPUT_LENGTH     = 2
KDF_OUTPUT_LENGTH_TOO_LARGE   = 3
KDF_UNKNOWN_DIGEST_ALGORITHM  = 4
KDF_UNKNOWN_CIPHER            = 5
KDF_INVALID_OPTION            = 6
KDF_INVALID_PASSWORD_HASH     = 7
KDF_PRIMITIVE_FAILURE         = 8

# PBKDF2 block indices are encoded as a 32-bit big-endian integer
MAX_BLOCK_COUNT               = 0xffffffff

# Option defaults
DEFAULT_DIGEST                = 'sha256'
DEFAULT_ITERATIONS            = 600000
DEFAULT_SALT_SIZE             = 16

# pylint: enable=bad-whitespace
