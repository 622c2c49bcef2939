# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/13 09:15'

Usage:
interface of the key/value stores holding serialized continuums
"""

from ..utils import DEFAULT_CACHE_TTL, normalize_timeout


class BaseCache(object):
    """Baseclass for the cache gateways.

    :param default_timeout: ttl used when `set` gets None. <=0 never expires
    """

    def __init__(self, default_timeout=DEFAULT_CACHE_TTL):
        self.default_timeout = default_timeout

    def _normalize_timeout(self, timeout):
        return normalize_timeout(timeout, self.default_timeout)

    def get(self, key):
        """Look up key in the cache and return the value for it.

        :param key: the key to be looked up.
        :returns: the stored bytes or ``None`` if the key does not exist
        :raise CacheReadError: the backend failed
        """
        return None

    def set(self, key, value, timeout=None):
        """Add a new key/value to the cache (overwrites value, if key already
        exists in the cache).

        :param key: the key to set
        :param value: the bytes to store
        :param timeout: the cache timeout for the key in seconds (if not
                        specified, it uses the default timeout). A timeout of
                        0 or below indicates that the cache never expires.
        :returns: ``True`` if key has been updated, ``False`` for backend
                  errors.
        :raise CacheWriteError: the backend failed
        """
        return True


class NullCache(BaseCache):
    """A cache that doesn't cache. Every continuum is rebuilt on every call"""

    def set(self, key, value, timeout=None):
        return False
