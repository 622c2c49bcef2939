# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/12 11:25'

Usage:
md5 based hashing shared by the continuum builder and key lookup.
MD5 keeps the point layout bit compatible with libketama and its ports; it is not used for security

>>> hash_key('12936')
3769287096
"""

import hashlib
import struct

from .constant import POINTS_PER_HASH

# four consecutive little endian uint32 chunks of a 16 byte md5 digest
_DIGEST_POINTS = struct.Struct('<' + 'I' * POINTS_PER_HASH)


def md5_digest(key):
    """
    16 byte md5 digest of a key
    :param key: str or int, int is converted with str()
    :return:
    """
    if isinstance(key, int) and not isinstance(key, bool):
        key = str(key)
    if not isinstance(key, str):
        raise TypeError('key must be str or int')
    return hashlib.md5(key.encode('utf-8')).digest()


def digest_points(key):
    """
    Ring positions of one point group: the digest of `key` split into
    four little endian uint32 values, in digest order
    :param key:
    :return: tuple of 4 ints
    """
    return _DIGEST_POINTS.unpack(md5_digest(key))


def hash_key(key):
    """
    Position of `key` on the 2^32 ring: the first four digest bytes as a little endian uint32
    :param key:
    :return:
    """
    return digest_points(key)[0]
