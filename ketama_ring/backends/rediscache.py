# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/13 10:20'

Usage:
>>> cache = RedisCache('127.0.0.1', 6379, db=13, key_prefix='KETAMA:')
>>> cache.set('continuum.abc', b'...', 3600)
>>> cache.get('continuum.abc')
"""

from redis import Redis

from .base import BaseCache
from ..exception import CacheReadError, CacheWriteError
from ..utils import DEFAULT_CACHE_TTL, reraise_as


class RedisCache(BaseCache):
    """Uses the Redis key-value store as a cache backend.

    :param host: address of the Redis server or an object which API is
                 compatible with the official Python Redis client (redis-py).
    :param port: port number on which Redis server listens for connections.
    :param password: password authentication for the Redis server.
    :param db: db (zero-based numeric index) on Redis Server to connect.
    :param default_timeout: the default timeout that is used if no timeout is
                            specified on :meth:`set`. <=0 never expires.
    :param key_prefix: A prefix that should be added to all keys.

    Any additional keyword arguments will be passed to ``redis.Redis``.
    """

    def __init__(
            self,
            host='localhost',
            port=6379,
            password=None,
            db=0,
            default_timeout=DEFAULT_CACHE_TTL,
            key_prefix=None,
            **kwargs
    ):
        super(RedisCache, self).__init__(default_timeout)
        if host is None:
            raise ValueError('RedisCache host parameter may not be None')
        if isinstance(host, str):
            self._client = Redis(host=host, port=port, password=password, db=db, **kwargs)
        else:
            self._client = host
        self.key_prefix = key_prefix or ''

    @reraise_as(CacheReadError, 'redis get failed')
    def get(self, key):
        return self._client.get(self.key_prefix + key)

    @reraise_as(CacheWriteError, 'redis set failed')
    def set(self, key, value, timeout=None):
        timeout = self._normalize_timeout(timeout)
        if timeout == -1:
            result = self._client.set(name=self.key_prefix + key, value=value)
        else:
            result = self._client.setex(name=self.key_prefix + key, time=timeout, value=value)
        return bool(result)
