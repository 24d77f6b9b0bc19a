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

"""Unit tests for keyderive logging API"""

import logging
import unittest

import keyderive

from keyderive.logging import logger
from keyderive.password import hash_password
from keyderive.pbe import derive_cipher_key


class _TestLogging(unittest.TestCase):
    """Unit tests for keyderive logging API"""

    def tearDown(self):
        """Restore default log levels"""

        keyderive.set_log_level(logging.NOTSET)
        keyderive.set_debug_level(1)

    def test_logging(self):
        """Test keyderive logging"""

        keyderive.set_log_level('INFO')

        with self.assertLogs(level='INFO') as log:
            logger.info('Test')

        self.assertEqual(len(log.records), 1)
        self.assertEqual(log.records[0].msg, 'Test')
        self.assertEqual(log.records[0].name, 'keyderive')

    def test_debug_levels(self):
        """Test log debug levels"""

        keyderive.set_log_level('DEBUG')

        for debug_level in range(1, 3):
            with self.subTest(debug_level=debug_level):
                keyderive.set_debug_level(debug_level)

                with self.assertLogs(level='DEBUG') as log:
                    logger.debug1('DEBUG')
                    logger.debug2('DEBUG')

                self.assertEqual(len(log.records), debug_level)

                for record in log.records:
                    self.assertEqual(record.msg, record.levelname)

    def test_invalid_debug_level(self):
        """Test setting an invalid debug level"""

        for debug_level in (0, 3):
            with self.subTest(debug_level=debug_level):
                with self.assertRaises(ValueError):
                    keyderive.set_debug_level(debug_level)

    def test_context(self):
        """Test child loggers with added context"""

        keyderive.set_log_level('INFO')

        child = logger.get_child('test', context='alg=sha1')
        grandchild = child.get_child(context='count=2')

        with self.assertLogs(level='INFO') as log:
            grandchild.info('Test %s', 'context')

        self.assertEqual(log.records[0].name, 'keyderive.test')
        self.assertEqual(log.records[0].getMessage(),
                         '[alg=sha1, count=2] Test context')

    def test_args_unchanged(self):
        """Test that log arguments are passed through to logging as is"""

        keyderive.set_log_level('INFO')

        with self.assertLogs(level='INFO') as log:
            logger.info('Test %s', b'bytes')

        self.assertEqual(log.records[0].args, (b'bytes',))
        self.assertEqual(log.records[0].getMessage(), "Test b'bytes'")

    def test_password_logging(self):
        """Test that hashing logs parameters but never secrets"""

        keyderive.set_log_level('DEBUG')

        with self.assertLogs(level='DEBUG') as log:
            hash_password('hunter2', b'NaCl-salt', digest='sha1',
                          iterations=3)

        self.assertEqual(len(log.records), 1)
        self.assertEqual(log.records[0].name, 'keyderive.password')

        message = log.records[0].getMessage()

        self.assertIn('PBKDF2-HMAC-SHA1', message)
        self.assertIn('3 iterations', message)
        self.assertNotIn('hunter2', message)
        self.assertNotIn('NaCl', message)

    def test_cipher_key_logging(self):
        """Test logging of cipher key derivation"""

        keyderive.set_log_level('DEBUG')

        with self.assertLogs(level='DEBUG') as log:
            derive_cipher_key('hunter2', b'salt', 'aes128-ctr',
                              iterations=2)

        self.assertEqual(log.records[0].name, 'keyderive.pbe')
        self.assertIn('aes128-ctr', log.records[0].getMessage())
        self.assertNotIn('hunter2', log.records[0].getMessage())

    def test_core_does_not_log(self):
        """Test that the core derivation function doesn't log"""

        keyderive.set_log_level('DEBUG')
        keyderive.set_debug_level(2)

        with self.assertLogs(level='DEBUG') as log:
            keyderive.pbkdf2_hmac(b'password', b'salt', 2, 20, 'sha1')
            logger.debug1('Marker')

        self.assertEqual([record.msg for record in log.records], ['Marker'])
