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

"""Storable password verification values"""

import base64
import binascii
import os
import re

from collections import OrderedDict

from .crypto import lookup_digest
from .kdf import KDFOptions, pbkdf2_hmac
from .logging import logger
from .misc import Record, InvalidOption, PasswordHashFormatError, to_bytes


_PREFIX = 'pbkdf2-'

_password_logger = logger.get_child('password')


def _b64encode(data):
    """Encode bytes as unpadded URL-safe base64"""

    return base64.urlsafe_b64encode(data).decode('ascii').rstrip('=')


def _b64decode(data):
    """Decode unpadded URL-safe base64"""

    data += '=' * (-len(data) % 4)
    return base64.b64decode(data.encode('ascii'), altchars=b'-_',
                            validate=True)


class PasswordHash(Record):
    """A salted PBKDF2 password verification value

       This record holds everything needed to check a password later:
       the digest, iteration count, salt, and derived value. It can be
       converted to and from a single string for storage.

    """

    __slots__ = OrderedDict((('digest', None), ('iterations', None),
                             ('salt', b''), ('value', b'')))

    def _format(self, k, v):
        """Format a field as a string"""

        return _b64encode(v) if k in ('salt', 'value') else str(v)

    def encode(self):
        """Return this password hash as a storable string

           The format is `pbkdf2-<digest>$<iterations>$<salt>$<value>`,
           with the salt and value in unpadded URL-safe base64.

        """

        return '%s%s$%d$%s$%s' % (_PREFIX, self.digest.name, self.iterations,
                                  _b64encode(self.salt),
                                  _b64encode(self.value))

    def rederive(self, password):
        """Derive a value from a password using these parameters

           The result equals `value` when the password is the one
           originally hashed. Callers should compare the two with a
           constant-time function such as `hmac.compare_digest`.

        """

        if not self.value:
            raise PasswordHashFormatError('Empty password hash value')

        return pbkdf2_hmac(password, self.salt, self.iterations,
                           len(self.value), self.digest)


def hash_password(password, salt=None, options=None, **kwargs):
    """Hash a password for storage

       This function derives a password verification value using
       PBKDF2. If no salt is provided, a random one of `salt_size`
       bytes is generated. Other parameters are taken from `options`
       or keyword arguments, as described in :class:`KDFOptions`.

       :param password:
           The password to hash
       :param salt: (optional)
           The salt to use instead of a randomly generated one
       :param options: (optional)
           Options to use when hashing
       :type password: `str` or `bytes`
       :type salt: `bytes`
       :type options: :class:`KDFOptions`

       :returns: :class:`PasswordHash`

       :raises: :exc:`InvalidOption` if the hash length is zero

    """

    options = KDFOptions(options, **kwargs)

    if not options.length:
        raise InvalidOption('Password hash length must be positive')

    if salt is None:
        salt = os.urandom(options.salt_size)
    else:
        salt = to_bytes(salt, 'salt')

    _password_logger.debug1('Hashing password using PBKDF2-HMAC-%s, '
                            '%d iterations', options.digest.name.upper(),
                            options.iterations)

    value = pbkdf2_hmac(password, salt, options.iterations,
                        options.length, options.digest)

    return PasswordHash(options.digest, options.iterations, salt, value)


def decode_password_hash(data):
    """Decode a stored password hash

       :param data:
           A string produced by :meth:`PasswordHash.encode`
       :type data: `str` or `bytes`

       :returns: :class:`PasswordHash`

       :raises: | :exc:`PasswordHashFormatError` if the string is malformed
                | :exc:`UnknownDigestAlgorithm` if the digest is unknown

    """

    if isinstance(data, bytes):
        try:
            data = data.decode('ascii')
        except UnicodeDecodeError:
            raise PasswordHashFormatError('Non-ASCII password hash') from None

    fields = data.split('$')

    if len(fields) != 4 or not fields[0].startswith(_PREFIX):
        _password_logger.debug2('Rejected password hash with %d fields',
                                len(fields))
        raise PasswordHashFormatError('Unrecognized password hash format')

    alg, iterations, salt, value = fields
    digest = lookup_digest(alg[len(_PREFIX):])

    if not re.fullmatch(r'[1-9][0-9]*', iterations):
        raise PasswordHashFormatError('Invalid iteration count: %s' %
                                      iterations)

    try:
        salt = _b64decode(salt)
        value = _b64decode(value)
    except (binascii.Error, ValueError):
        raise PasswordHashFormatError('Invalid base64 encoding') from None

    if not value:
        raise PasswordHashFormatError('Empty password hash value')

    options = KDFOptions(digest=digest, iterations=int(iterations),
                         length=len(value))

    return PasswordHash(options.digest, options.iterations, salt, value)
