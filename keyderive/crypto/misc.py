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

"""Miscellaneous PyCA utility classes and functions"""

from collections import OrderedDict
import hashlib

from cryptography.hazmat.primitives.hashes import HashAlgorithm
from cryptography.hazmat.primitives.hashes import MD5, SHA1, SHA224
from cryptography.hazmat.primitives.hashes import SHA256, SHA384, SHA512
from cryptography.hazmat.primitives.hashes import SHA512_224, SHA512_256
from cryptography.hazmat.primitives.hashes import SHA3_224, SHA3_256
from cryptography.hazmat.primitives.hashes import SHA3_384, SHA3_512

from ..misc import Record, UnknownDigestAlgorithm


_digest_names = []
_digest_algs = {}


class DigestAlgorithm(Record):
    """A hash algorithm usable as the PRF for PBKDF2

       :param name:
           The canonical name of the digest
       :param hash_alg:
           The PyCA hash algorithm class
       :param digest_size:
           The size in bytes of the digest output
       :type name: `str`
       :type hash_alg: `cryptography.hazmat.primitives.hashes.HashAlgorithm`
       :type digest_size: `int`

    """

    __slots__ = OrderedDict((('name', None), ('hash_alg', None),
                             ('digest_size', 0)))

    def __str__(self):
        return self.name


def _normalize(name):
    """Normalize a digest name for lookup"""

    for sep in '-_/ ':
        name = name.replace(sep, '')

    return name.lower()


def register_digest(name, hash_alg):
    """Register a digest algorithm"""

    digest = DigestAlgorithm(name, hash_alg, hash_alg.digest_size)

    _digest_names.append(name)
    _digest_algs[_normalize(name)] = digest


def get_digest_names():
    """Return a list of available digest algorithm names"""

    return list(_digest_names)


def _hashlib_name(constructor):
    """Return the name of a hashlib constructor, or `None`"""

    name = getattr(constructor, '__name__', None)

    if not isinstance(name, str):
        return None

    if name.startswith('openssl_'):
        name = name[8:]

    return name if getattr(hashlib, name, None) is constructor else None


def lookup_digest(digest):
    """Resolve a digest name or handle to a registered digest algorithm

       The digest may be specified as a `DigestAlgorithm`, a name as
       `str` or `bytes`, a PyCA hash algorithm class or instance, or a
       hashlib hash object or constructor. Other callables are never
       called and are rejected. Names are matched ignoring
       case and separators, so 'SHA-256', 'sha_256', and 'sha256' all
       refer to the same algorithm.

    """

    if isinstance(digest, DigestAlgorithm):
        return digest

    name = digest

    if isinstance(digest, type) and issubclass(digest, HashAlgorithm):
        name = digest.name
    elif callable(digest):
        name = _hashlib_name(digest)
    elif not isinstance(name, (str, bytes)):
        name = getattr(digest, 'name', None)

    if isinstance(name, bytes):
        name = name.decode('ascii', errors='replace')

    if isinstance(name, str):
        try:
            return _digest_algs[_normalize(name)]
        except KeyError:
            pass

    raise UnknownDigestAlgorithm('Unknown digest algorithm: %r' % (digest,))


# pylint: disable=bad-whitespace

_digest_alg_list = (
    ('md5',        MD5),
    ('sha1',       SHA1),
    ('sha224',     SHA224),
    ('sha256',     SHA256),
    ('sha384',     SHA384),
    ('sha512',     SHA512),
    ('sha512-224', SHA512_224),
    ('sha512-256', SHA512_256),
    ('sha3-224',   SHA3_224),
    ('sha3-256',   SHA3_256),
    ('sha3-384',   SHA3_384),
    ('sha3-512',   SHA3_512)
)

# pylint: enable=bad-whitespace

for _name, _hash_alg in _digest_alg_list:
    register_digest(_name, _hash_alg)
