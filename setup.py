#!/usr/bin/env python3

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

"""keyderive: PBKDF2-HMAC password based key derivation

keyderive derives keys from passwords using PKCS#5 v2.0 PBKDF2 with
HMAC, validating all parameters before any cryptographic work begins
and reporting failures through a small set of typed exceptions.

"""

from os import path
from setuptools import setup

base_dir = path.abspath(path.dirname(__file__))

doclines = __doc__.split('\n', 1)

with open(path.join(base_dir, 'keyderive', 'version.py')) as version:
    exec(version.read())

setup(name = 'keyderive',
      version = __version__,
      author = __author__,
      author_email = __author_email__,
      url = __url__,
      license = 'Eclipse Public License v2.0',
      description = doclines[0],
      long_description = doclines[1].strip(),
      platforms = 'Any',
      python_requires = '>= 3.6',
      install_requires = ['cryptography >= 3.1'],
      extras_require = {
          'test': ['pytest']
      },
      packages = ['keyderive', 'keyderive.crypto'],
      classifiers = [
          'Development Status :: 5 - Production/Stable',
          'Intended Audience :: Developers',
          'License :: OSI Approved',
          'Operating System :: MacOS :: MacOS X',
          'Operating System :: POSIX',
          'Programming Language :: Python :: 3.6',
          'Programming Language :: Python :: 3.7',
          'Programming Language :: Python :: 3.8',
          'Programming Language :: Python :: 3.9',
          'Programming Language :: Python :: 3.10',
          'Topic :: Security :: Cryptography'])
