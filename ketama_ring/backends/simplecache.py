# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/13 09:40'

Usage:

"""

import time

from .base import BaseCache
from ..utils import DEFAULT_CACHE_TTL


class SimpleCache(BaseCache):
    """In process cache for a single worker, entries expire after their ttl.

    :param threshold: the maximum number of items the cache stores before
                      expired entries are pruned and then the oldest dropped
    :param default_timeout: the default timeout that is used if no timeout is
                            specified on :meth:`set`.
    """

    def __init__(self, threshold=500, default_timeout=DEFAULT_CACHE_TTL, clock=time.time):
        super(SimpleCache, self).__init__(default_timeout)
        self._cache = {}
        self._threshold = threshold
        self._clock = clock

    def _prune(self):
        if len(self._cache) < self._threshold:
            return
        now = self._clock()
        for key, (expires, _) in list(self._cache.items()):
            if expires != -1 and expires <= now:
                self._cache.pop(key, None)
        # still full: drop the entries inserted first
        while len(self._cache) >= self._threshold:
            self._cache.pop(next(iter(self._cache)), None)

    def get(self, key):
        try:
            expires, value = self._cache[key]
        except KeyError:
            return None
        if expires == -1 or expires > self._clock():
            return value
        self._cache.pop(key, None)
        return None

    def set(self, key, value, timeout=None):
        timeout = self._normalize_timeout(timeout)
        expires = -1 if timeout == -1 else self._clock() + timeout
        self._prune()
        self._cache[key] = (expires, value)
        return True

    def clear(self):
        self._cache.clear()
        return True
