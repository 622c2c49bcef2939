# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/12 11:10'

Usage:

"""

import hashlib


def str2byte(_str):
    """
    str to bytes
    :param _str:
    :return:
    """
    return bytes(_str, encoding='utf8')


def byte2str(_bytes):
    """
    bytes to str
    :param _bytes:
    :return:
    """
    return str(_bytes, encoding="utf-8")


def normalize_timeout(timeout, default_timeout):
    """
    Normalize a cache ttl
    :param timeout:
    :param default_timeout: used when timeout is None
    :return: -1 for no expiry, otherwise the ttl in seconds
    """
    if timeout is None:
        timeout = default_timeout
    if timeout <= 0:
        timeout = -1
    return timeout


def md5_hex(_str):
    return hashlib.md5(str2byte(_str)).hexdigest()


def identity_key(key):
    """Default cache key strategy, stores under the key as is"""
    return key


def prefixed_key(prefix):
    """
    Build a cache key strategy namespacing every key with `prefix`,
    so that several users of one cache backend never collide
    :param prefix:
    :return:

    Usage:
    >>> strategy = prefixed_key('app1:')
    >>> strategy('continuum.abc')
    'app1:continuum.abc'
    """
    if not isinstance(prefix, str):
        raise TypeError('prefix must be a str')

    def make_key(key):
        return prefix + key

    return make_key
