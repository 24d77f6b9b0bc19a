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

"""Miscellaneous utility classes and functions"""

from collections import OrderedDict

from .constants import KDF_INVALID_ITERATION_COUNT, KDF_INVALID_OUTPUT_LENGTH
from .constants import KDF_OUTPUT_LENGTH_TOO_LARGE, KDF_UNKNOWN_DIGEST_ALGORITHM
from .constants import KDF_UNKNOWN_CIPHER, KDF_INVALID_OPTION
from .constants import KDF_INVALID_PASSWORD_HASH, KDF_PRIMITIVE_FAILURE


def to_bytes(value, label):
    """Return a copy of a str or bytes-like value as bytes

       Strings are encoded as UTF-8. Any other type raises `TypeError`.

    """

    if isinstance(value, str):
        return value.encode('utf-8')
    elif isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    else:
        raise TypeError('Invalid %s, expected str or bytes, got %s' %
                        (label, type(value).__name__))


def check_int(value, label):
    """Confirm that a value is an integer, rejecting booleans"""

    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError('Invalid %s, expected int, got %s' %
                        (label, type(value).__name__))

    return value


class Options:
    """Container for configuration options"""

    def __init__(self, options=None, **kwargs):
        if options:
            if not isinstance(options, type(self)):
                raise TypeError('Invalid %s, got %s' %
                                (type(self).__name__, type(options).__name__))

            self.kwargs = options.kwargs.copy()
        else:
            self.kwargs = {}

        self.kwargs.update(kwargs)
        self.prepare(**self.kwargs)

    def prepare(self):
        """Pre-process configuration options"""

    def update(self, kwargs):
        """Update options based on keyword parameters passed in"""

        self.kwargs.update(kwargs)
        self.prepare(**self.kwargs)


class Record:
    """General-purpose record type with fixed set of fields"""

    __slots__ = OrderedDict()

    def __init__(self, *args, **kwargs):
        for k, v in self.__slots__.items():
            setattr(self, k, v)

        for k, v in zip(self.__slots__, args):
            setattr(self, k, v)

        for k, v in kwargs.items():
            setattr(self, k, v)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented

        return all(getattr(self, k) == getattr(other, k)
                   for k in self.__slots__)

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__,
                           ', '.join('%s=%r' % (k, getattr(self, k))
                                     for k in self.__slots__))

    def __str__(self):
        values = ((k, self._format(k, getattr(self, k)))
                  for k in self.__slots__)

        return ', '.join('%s: %s' % (k, v) for k, v in values if v is not None)

    def _format(self, k, v):
        """Format a field as a string"""

        # pylint: disable=no-self-use,unused-argument

        return str(v)


class KDFError(Exception):
    """General key derivation error

       This is the base class of all errors raised by keyderive. The
       `code` attribute holds one of the error codes defined in
       :mod:`keyderive.constants` and `reason` a human-readable
       description of the failure.

       :param code:
           Error code
       :param reason:
           A human-readable reason for the error
       :type code: `int`
       :type reason: `str`

    """

    def __init__(self, code, reason):
        super().__init__(reason)
        self.code = code
        self.reason = reason


class ParameterError(KDFError, ValueError):
    """Key derivation parameter error

       This exception is raised when a caller supplies a parameter which
       can't be used to derive a key. It is detected before any
       cryptographic work begins, and the request needs to be fixed
       before it is retried. See below for subclasses tied to specific
       parameters.

    """


class InvalidIterationCount(ParameterError):
    """Invalid iteration count

       This exception is raised when the iteration count is not a
       positive integer.

       :param reason:
           Details about the invalid iteration count
       :type reason: `str`

    """

    def __init__(self, reason):
        super().__init__(KDF_INVALID_ITERATION_COUNT, reason)


class InvalidOutputLength(ParameterError):
    """Invalid output length

       This exception is raised when a negative number of bytes of
       key material is requested.

       :param reason:
           Details about the invalid output length
       :type reason: `str`

    """

    def __init__(self, reason):
        super().__init__(KDF_INVALID_OUTPUT_LENGTH, reason)


class OutputLengthTooLarge(ParameterError):
    """Output length too large

       This exception is raised when the requested output length needs
       more than 2^32 - 1 blocks of the selected digest.

       :param reason:
           Details about the output length
       :type reason: `str`

    """

    def __init__(self, reason):
        super().__init__(KDF_OUTPUT_LENGTH_TOO_LARGE, reason)


class UnknownDigestAlgorithm(ParameterError):
    """Unknown digest algorithm

       This exception is raised when a digest name or handle can't be
       resolved to a supported hash algorithm.

       :param reason:
           Details about the digest which couldn't be resolved
       :type reason: `str`

    """

    def __init__(self, reason):
        super().__init__(KDF_UNKNOWN_DIGEST_ALGORITHM, reason)


class UnknownCipher(ParameterError):
    """Unknown cipher

       This exception is raised when a key is requested for a cipher
       whose key and IV sizes aren't known.

       :param reason:
           Details about the unknown cipher
       :type reason: `str`

    """

    def __init__(self, reason):
        super().__init__(KDF_UNKNOWN_CIPHER, reason)


class InvalidOption(ParameterError):
    """Invalid configuration option

       :param reason:
           Details about the invalid option
       :type reason: `str`

    """

    def __init__(self, reason):
        super().__init__(KDF_INVALID_OPTION, reason)


class PasswordHashFormatError(ParameterError):
    """Malformed password hash

       This exception is raised when an encoded password hash can't be
       parsed.

       :param reason:
           Details about the formatting problem
       :type reason: `str`

    """

    def __init__(self, reason):
        super().__init__(KDF_INVALID_PASSWORD_HASH, reason)


class PrimitiveFailure(KDFError):
    """Cryptographic primitive failure

       This exception is raised when the underlying HMAC implementation
       fails, such as when a digest is disallowed by policy in a
       FIPS-restricted build. Any partially derived key material is
       discarded. The original exception, if any, is available as
       `__cause__`.

       :param reason:
           Details about the failure
       :type reason: `str`

    """

    def __init__(self, reason):
        super().__init__(KDF_PRIMITIVE_FAILURE, reason)
