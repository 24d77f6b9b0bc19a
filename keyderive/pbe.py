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

"""Password based symmetric cipher key derivation"""

from .kdf import KDFOptions, pbkdf2_hmac
from .logging import logger
from .misc import UnknownCipher


_cipher_names = []
_cipher_params = {}

_pbe_logger = logger.get_child('pbe')


def register_cipher(cipher_name, key_size, iv_size):
    """Register a symmetric cipher"""

    _cipher_names.append(cipher_name)
    _cipher_params[cipher_name] = (key_size, iv_size)


def get_cipher_names():
    """Return a list of ciphers keys can be derived for"""

    return list(_cipher_names)


def get_cipher_params(cipher_name):
    """Get the key and IV sizes of a symmetric cipher"""

    try:
        return _cipher_params[cipher_name]
    except KeyError:
        raise UnknownCipher('Unknown cipher: %s' % cipher_name) from None


def derive_cipher_key(passphrase, salt, cipher_name, options=None,
                      **kwargs):
    """Derive a key for a symmetric cipher from a passphrase

       This function derives a key of the size needed by the specified
       cipher. The digest and iteration count are taken from `options`
       or keyword arguments, as described in :class:`KDFOptions`. Any
       `length` set there is ignored in favor of the cipher's key size.

       :param passphrase:
           The passphrase to derive the key from
       :param salt:
           The salt to use, which should be random and stored alongside
           any data encrypted with the key
       :param cipher_name:
           The name of the cipher, such as `'aes256-ctr'`
       :param options: (optional)
           Options to use when deriving the key
       :type passphrase: `str` or `bytes`
       :type salt: `bytes`
       :type cipher_name: `str`
       :type options: :class:`KDFOptions`

       :returns: `bytes`

       :raises: :exc:`UnknownCipher` if the cipher is unknown

    """

    key_size, _ = get_cipher_params(cipher_name)
    options = KDFOptions(options, **kwargs)

    _pbe_logger.debug1('Deriving %s key using PBKDF2-HMAC-%s, %d iterations',
                       cipher_name, options.digest.name.upper(),
                       options.iterations)

    return pbkdf2_hmac(passphrase, salt, options.iterations, key_size,
                       options.digest)


def derive_cipher_key_iv(passphrase, salt, cipher_name, options=None,
                         **kwargs):
    """Derive a key and IV for a symmetric cipher from a passphrase

       This function works like :func:`derive_cipher_key`, but derives
       enough material for both the key and the initialization vector
       in a single PBKDF2 call and splits it.

       :returns: A tuple of the key and IV as `bytes`

    """

    key_size, iv_size = get_cipher_params(cipher_name)
    options = KDFOptions(options, **kwargs)

    _pbe_logger.debug1('Deriving %s key and IV using PBKDF2-HMAC-%s, '
                       '%d iterations', cipher_name,
                       options.digest.name.upper(), options.iterations)

    data = pbkdf2_hmac(passphrase, salt, options.iterations,
                       key_size + iv_size, options.digest)

    return data[:key_size], data[key_size:]


# pylint: disable=bad-whitespace

_cipher_alg_list = (
    ('aes128-cbc',        16, 16),
    ('aes192-cbc',        24, 16),
    ('aes256-cbc',        32, 16),
    ('aes128-ctr',        16, 16),
    ('aes192-ctr',        24, 16),
    ('aes256-ctr',        32, 16),
    ('aes128-gcm',        16, 12),
    ('aes256-gcm',        32, 12),
    ('blowfish-cbc',      16,  8),
    ('cast128-cbc',       16,  8),
    ('chacha20-poly1305', 32, 12),
    ('des3-cbc',          24,  8),
    ('seed-cbc',          16, 16)
)

# pylint: enable=bad-whitespace

for _cipher_name, _key_size, _iv_size in _cipher_alg_list:
    register_cipher(_cipher_name, _key_size, _iv_size)
