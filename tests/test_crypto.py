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

"""Unit tests for digest lookup and the HMAC PRF"""

import functools
import hashlib
import hmac
import unittest

from unittest.mock import Mock, patch

from cryptography.exceptions import InternalError
from cryptography.hazmat.primitives.hashes import SHA1, SHA512_256

from keyderive.crypto import DigestAlgorithm, HMACPRF
from keyderive.crypto import get_digest_names, lookup_digest
from keyderive.misc import PrimitiveFailure, UnknownDigestAlgorithm


class _TestDigests(unittest.TestCase):
    """Unit tests for digest lookup"""

    def test_digest_names(self):
        """Test the list of registered digests"""

        names = get_digest_names()

        for name in ('md5', 'sha1', 'sha256', 'sha512', 'sha3-512'):
            self.assertIn(name, names)

    def test_digest_sizes(self):
        """Test the output size of each registered digest"""

        prf = HMACPRF()

        for name in get_digest_names():
            with self.subTest(digest=name):
                digest = lookup_digest(name)

                self.assertEqual(digest.name, name)
                self.assertEqual(str(digest), name)
                self.assertEqual(len(prf.hmac(digest, b'key', b'data')),
                                 digest.digest_size)

    def test_aliases(self):
        """Test digest names with different case and separators"""

        for name in ('SHA512-256', 'sha512/256', 'sha512_256', SHA512_256):
            with self.subTest(name=name):
                self.assertEqual(lookup_digest(name).hash_alg, SHA512_256)

    def test_lookup_digest_algorithm(self):
        """Test that a resolved digest resolves to itself"""

        digest = lookup_digest('sha1')

        self.assertIs(lookup_digest(digest), digest)
        self.assertEqual(digest, DigestAlgorithm('sha1', SHA1, 20))

    def test_hashlib_handles(self):
        """Test lookup of hashlib constructors and hash objects"""

        for name in ('md5', 'sha1', 'sha256', 'sha512', 'sha3_256'):
            with self.subTest(name=name):
                constructor = getattr(hashlib, name)

                self.assertEqual(lookup_digest(constructor).name,
                                 name.replace('_', '-'))
                self.assertEqual(lookup_digest(constructor()).name,
                                 name.replace('_', '-'))

    def test_callable_not_called(self):
        """Test that arbitrary callables are rejected without being called"""

        factory = Mock(return_value=hashlib.sha256())
        factory.__name__ = 'sha256'

        def sha256():
            factory()
            return hashlib.sha256()

        for handle in (factory, sha256,
                       functools.partial(hashlib.new, 'sha256')):
            with self.subTest(handle=handle):
                with self.assertRaises(UnknownDigestAlgorithm):
                    lookup_digest(handle)

        factory.assert_not_called()

    def test_unknown(self):
        """Test lookup of unknown digests"""

        for name in ('sha', 'blake2', 'sha256x', b'\xff'):
            with self.subTest(name=name):
                with self.assertRaises(UnknownDigestAlgorithm):
                    lookup_digest(name)


class _TestHMACPRF(unittest.TestCase):
    """Unit tests for the PyCA HMAC PRF"""

    def test_hmac(self):
        """Test HMAC output against the standard library"""

        prf = HMACPRF()

        for name in ('md5', 'sha1', 'sha256', 'sha384', 'sha512'):
            with self.subTest(digest=name):
                self.assertEqual(prf.hmac(lookup_digest(name), b'key', b'msg'),
                                 hmac.new(b'key', b'msg', name).digest())

    def test_internal_error(self):
        """Test that PyCA internal errors become primitive failures"""

        exc = InternalError('Unknown OpenSSL error', [])

        with patch('keyderive.crypto.prf.HMAC', side_effect=exc):
            with self.assertRaises(PrimitiveFailure) as ctx:
                HMACPRF().hmac(lookup_digest('sha256'), b'key', b'msg')

        self.assertIs(ctx.exception.__cause__, exc)
        self.assertIn('HMAC-SHA256', ctx.exception.reason)
