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

"""Utility functions for unit tests"""

import asyncio
import functools
import unittest

from keyderive.crypto import HMACPRF
from keyderive.misc import PrimitiveFailure


def asynctest(coro):
    """Decorator for async tests, for use with AsyncTestCase"""

    @functools.wraps(coro)
    def async_wrapper(self, *args, **kwargs):
        """Run a coroutine and wait for it to finish"""

        return self.loop.run_until_complete(coro(self, *args, **kwargs))

    return async_wrapper


class CountingPRF(HMACPRF):
    """HMAC PRF which counts calls and can be made to fail

       If `fail_after` is set, the PRF raises :exc:`PrimitiveFailure`
       on the call after that many successful ones.

    """

    def __init__(self, fail_after=None):
        self.resolve_calls = 0
        self.calls = 0
        self._fail_after = fail_after

    def resolve_digest(self, digest):
        """Count digest lookups"""

        self.resolve_calls += 1
        return super().resolve_digest(digest)

    def hmac(self, digest, key, message):
        """Count HMAC calls, failing if requested"""

        if self._fail_after is not None and self.calls >= self._fail_after:
            raise PrimitiveFailure('Injected failure')

        self.calls += 1
        return super().hmac(digest, key, message)


class ShortPRF(HMACPRF):
    """HMAC PRF which returns truncated output"""

    def hmac(self, digest, key, message):
        """Return a truncated HMAC"""

        return super().hmac(digest, key, message)[:-1]


class AsyncTestCase(unittest.TestCase):
    """Unit test class which supports tests using asyncio"""

    loop = None

    @classmethod
    def setUpClass(cls):
        """Set up event loop to run async tests"""

        super().setUpClass()

        cls.loop = asyncio.new_event_loop()
        asyncio.set_event_loop(cls.loop)

    @classmethod
    def tearDownClass(cls):
        """Close event loop"""

        cls.loop.close()
        asyncio.set_event_loop(None)

        super().tearDownClass()
