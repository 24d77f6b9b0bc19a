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

"""A shim around PyCA for the HMAC pseudorandom function"""

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives.hmac import HMAC

from ..misc import PrimitiveFailure
from .kdf import pbkdf2_hmac
from .misc import lookup_digest


class HMACPRF:
    """HMAC pseudorandom function backed by PyCA

       Instances hold no state, so a single instance may be shared
       between threads.

    """

    def resolve_digest(self, digest):
        """Resolve a digest name or handle to a digest algorithm"""

        # pylint: disable=no-self-use

        return lookup_digest(digest)

    def hmac(self, digest, key, message):
        """Return the HMAC of a message using the specified digest"""

        # pylint: disable=no-self-use

        try:
            mac = HMAC(key, digest.hash_alg())
            mac.update(message)
            return mac.finalize()
        except (InternalError, UnsupportedAlgorithm) as exc:
            raise PrimitiveFailure('HMAC-%s failed: %s' %
                                   (digest.name.upper(), exc)) from exc

    def pbkdf2(self, digest, password, salt, iterations, length):
        """Derive key material with PyCA's native PBKDF2 implementation

           This gives the same result as iterating :meth:`hmac`, but
           runs the iterations inside OpenSSL.

        """

        # pylint: disable=no-self-use

        return pbkdf2_hmac(digest, password, salt, iterations, length)


default_prf = HMACPRF()
