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

"""PKCS#5 v2.0 PBKDF2 key derivation using HMAC"""

import asyncio

from collections import OrderedDict

from .constants import DEFAULT_DIGEST, DEFAULT_ITERATIONS, DEFAULT_SALT_SIZE
from .constants import MAX_BLOCK_COUNT
from .crypto import HMACPRF, default_prf, lookup_digest
from .misc import Options, Record, check_int, to_bytes
from .misc import InvalidIterationCount, InvalidOutputLength, InvalidOption
from .misc import OutputLengthTooLarge, PrimitiveFailure


def _check_iterations(iterations):
    """Confirm that an iteration count is a positive integer"""

    if check_int(iterations, 'iterations') < 1:
        raise InvalidIterationCount('Iteration count must be positive, '
                                    'got %d' % iterations)

    return iterations


def _check_length(length, digest):
    """Confirm that an output length can be derived with a digest"""

    if check_int(length, 'length') < 0:
        raise InvalidOutputLength('Output length must not be negative, '
                                  'got %d' % length)

    if length > MAX_BLOCK_COUNT * digest.digest_size:
        raise OutputLengthTooLarge('Output length %d exceeds maximum of %d '
                                   'for %s' % (length, MAX_BLOCK_COUNT *
                                               digest.digest_size, digest))

    return length


class DerivationRequest(Record):
    """A validated PBKDF2 key derivation request

       All parameters are checked when the request is constructed, so
       a request which exists is one which can be derived. String
       passwords and salts are encoded as UTF-8, and bytes-like values
       are copied so that later changes to the caller's buffers have
       no effect. Fields can't be changed after construction.

       :param password:
           The password to derive a key from
       :param salt:
           The salt to mix into the derivation
       :param iterations:
           The number of HMAC iterations per output block, at least 1
       :param length:
           The number of bytes of key material to derive
       :param digest:
           The digest to use with HMAC, as a name or handle accepted
           by :func:`lookup_digest`
       :param prf: (optional)
           The pseudorandom function provider to resolve the digest with
       :type password: `str` or `bytes`
       :type salt: `str` or `bytes`
       :type iterations: `int`
       :type length: `int`

       :raises: | :exc:`UnknownDigestAlgorithm` if the digest is unknown
                | :exc:`InvalidIterationCount` if iterations is less than 1
                | :exc:`InvalidOutputLength` if length is negative
                | :exc:`OutputLengthTooLarge` if length needs more than
                  2^32 - 1 digest blocks
                | :exc:`TypeError` if a parameter has the wrong type

    """

    __slots__ = OrderedDict((('password', b''), ('salt', b''),
                             ('iterations', 1), ('length', 0),
                             ('digest', None)))

    def __init__(self, password, salt, iterations, length, digest, prf=None):
        digest = (prf or default_prf).resolve_digest(digest)

        values = (to_bytes(password, 'password'), to_bytes(salt, 'salt'),
                  _check_iterations(iterations), _check_length(length, digest),
                  digest)

        # Fields are set directly, bypassing the read-only __setattr__
        # pylint: disable=super-init-not-called

        for k, v in zip(self.__slots__, values):
            object.__setattr__(self, k, v)

    def __setattr__(self, name, value):
        raise AttributeError('%s is read-only' % type(self).__name__)

    def __delattr__(self, name):
        raise AttributeError('%s is read-only' % type(self).__name__)

    def __repr__(self):
        return '%s(digest=%s, iterations=%d, length=%d, salt=%r)' % \
            (type(self).__name__, self.digest, self.iterations,
             self.length, self.salt)

    def _format(self, k, v):
        """Format a field as a string, hiding the password"""

        return '<hidden>' if k == 'password' else str(v)

    @property
    def block_count(self):
        """The number of digest blocks needed for this request"""

        return -(-self.length // self.digest.digest_size)


def derive(request, prf=None):
    """Derive key material for a validated request

       This function implements the PBKDF2 algorithm from RFC 2898
       section 5.2, calling the PRF `iterations` times for each block
       of output. Any failure in the PRF raises :exc:`PrimitiveFailure`
       and no partial output is returned.

       With the default PyCA PRF, the iterations run inside PyCA's
       native PBKDF2 implementation instead, which gives the same
       result much faster.

    """

    # Short variable names are used here, matching names in RFC 2898
    # pylint: disable=invalid-name

    prf = prf or default_prf
    digest = request.digest

    if not request.length:
        return b''

    # Subclasses may override hmac(), so only HMACPRF itself is delegated
    if type(prf) is HMACPRF: # pylint: disable=unidiomatic-typecheck
        return prf.pbkdf2(digest, request.password, request.salt,
                          request.iterations, request.length)

    hash_size = digest.digest_size
    password = request.password

    def _prf(message):
        """Call the PRF and confirm the size of its output"""

        u = prf.hmac(digest, password, message)

        if len(u) != hash_size:
            raise PrimitiveFailure('HMAC-%s returned %d bytes, expected %d' %
                                   (digest.name.upper(), len(u), hash_size))

        return u

    key = bytearray()

    for i in range(1, request.block_count + 1):
        u = _prf(request.salt + i.to_bytes(4, 'big'))
        f = int.from_bytes(u, 'big')

        for _ in range(1, request.iterations):
            u = _prf(u)
            f ^= int.from_bytes(u, 'big')

        key += f.to_bytes(hash_size, 'big')

    return bytes(key[:request.length])


def pbkdf2_hmac(password, salt, iterations, length, digest, *, prf=None):
    """Derive a key from a password using PBKDF2 with HMAC

       This function implements PKCS#5 v2.0 PBKDF2 (RFC 2898 section
       5.2), deriving `length` bytes of key material from a password
       and salt. It can be used to generate symmetric cipher keys or
       values for password storage.

       The iteration count tunes the cost of the derivation. Higher
       counts make brute-force attacks on weak passwords slower, and
       the cost grows linearly with the count. No upper bound or
       minimum strength is enforced here.

       All parameters are validated before any HMAC is computed. The
       same inputs always produce the same output.

       .. note:: When comparing a derived value against a stored one,
                 use a constant-time comparison such as
                 `hmac.compare_digest` rather than `==`.

       :param password:
           The password to derive a key from
       :param salt:
           The salt, which should be unique and random for each password
       :param iterations:
           The number of iterations, at least 1
       :param length:
           The number of bytes of key material to return
       :param digest:
           The digest to use with HMAC, such as `'sha256'`
       :param prf: (optional)
           An alternate pseudorandom function provider with the same
           `resolve_digest()` and `hmac()` methods as :class:`HMACPRF`
       :type password: `str` or `bytes`
       :type salt: `str` or `bytes`
       :type iterations: `int`
       :type length: `int`
       :type digest: `str`, `bytes`, or a PyCA or hashlib hash

       :returns: `bytes` of exactly `length` bytes

       :raises: | :exc:`ParameterError` subclasses if a parameter is invalid
                | :exc:`PrimitiveFailure` if the HMAC implementation fails

    """

    request = DerivationRequest(password, salt, iterations, length,
                                digest, prf)

    return derive(request, prf)


async def pbkdf2_hmac_async(password, salt, iterations, length, digest, *,
                            prf=None, loop=None, executor=None):
    """Derive a key using PBKDF2 with HMAC in an executor

       This coroutine validates its arguments immediately and then runs
       the derivation in an executor, so large iteration counts don't
       block the event loop. Arguments and errors are the same as
       :func:`pbkdf2_hmac`.

       :param loop: (optional)
           The event loop to run the executor from
       :param executor: (optional)
           The executor to use, defaulting to the loop's default executor
       :type executor: :class:`concurrent.futures.Executor`

    """

    request = DerivationRequest(password, salt, iterations, length,
                                digest, prf)

    if not loop:
        loop = asyncio.get_event_loop()

    return await loop.run_in_executor(executor, derive, request, prf)


class KDFOptions(Options):
    """Key derivation options

       :param digest: (optional)
           The digest to use with HMAC, defaulting to SHA-256
       :param iterations: (optional)
           The iteration count, defaulting to 600,000
       :param length: (optional)
           The number of bytes to derive, defaulting to the digest size
       :param salt_size: (optional)
           The number of random salt bytes to generate when no salt is
           provided, defaulting to 16
       :type iterations: `int`
       :type length: `int`
       :type salt_size: `int`

    """

    def prepare(self, digest=DEFAULT_DIGEST, iterations=DEFAULT_ITERATIONS,
                length=None, salt_size=DEFAULT_SALT_SIZE):
        """Prepare key derivation options"""

        # pylint: disable=arguments-differ

        self.digest = lookup_digest(digest)
        self.iterations = _check_iterations(iterations)

        if length is None:
            self.length = self.digest.digest_size
        else:
            self.length = _check_length(length, self.digest)

        if check_int(salt_size, 'salt_size') < 0:
            raise InvalidOption('Salt size must not be negative, got %d' %
                                salt_size)

        self.salt_size = salt_size
