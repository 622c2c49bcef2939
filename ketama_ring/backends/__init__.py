# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/13 10:55'

Usage:
cache gateways and the factories building them from config

>>> create_cache({'KETAMA_CACHE_TYPE': 'redis', 'KETAMA_REDIS_URL': 'redis://127.0.0.1:6379/13'})
"""

from ..exception import InvalidConfigException
from ..utils import DEFAULT_CACHE_TTL, k_cache_type, k_cache_ttl, k_cache_key_prefix, k_redis_host, k_redis_port, \
    k_redis_password, k_redis_db, k_redis_url
from .base import BaseCache, NullCache
from .rediscache import RedisCache
from .simplecache import SimpleCache

__all__ = (
    "BaseCache",
    "NullCache",
    "SimpleCache",
    "RedisCache",
    "null",
    "simple",
    "redis",
    "create_cache",
)


def null(config, args, kwargs):
    return NullCache(*args, **kwargs)


def simple(config, args, kwargs):
    kwargs.update(dict(default_timeout=config.get(k_cache_ttl, DEFAULT_CACHE_TTL)))
    return SimpleCache(*args, **kwargs)


def redis(config, args, kwargs):
    from redis import from_url as redis_from_url

    kwargs.update(
        dict(
            host=config.get(k_redis_host, "localhost"),
            port=int(config.get(k_redis_port) or 6379),
            default_timeout=config.get(k_cache_ttl, DEFAULT_CACHE_TTL),
        )
    )
    password = config.get(k_redis_password)
    if password:
        kwargs["password"] = password

    key_prefix = config.get(k_cache_key_prefix)
    if key_prefix:
        kwargs["key_prefix"] = key_prefix

    db_number = config.get(k_redis_db)
    if db_number:
        kwargs["db"] = int(db_number)

    redis_url = config.get(k_redis_url)
    if redis_url:
        kwargs["host"] = redis_from_url(redis_url, db=kwargs.pop("db", None))

    return RedisCache(*args, **kwargs)


_factories = {
    'null': null,
    'simple': simple,
    'redis': redis,
}


def create_cache(config, *args, **kwargs):
    """
    Build the cache gateway named by KETAMA_CACHE_TYPE (default simple)
    :param config: dict like, e.g. Flask app.config
    :return: BaseCache
    """
    cache_type = config.get(k_cache_type) or 'simple'
    factory = _factories.get(cache_type)
    if factory is None:
        raise InvalidConfigException(
            f"`{k_cache_type}` must be one of {sorted(_factories)}, got {cache_type!r}"
        )
    return factory(config, args, kwargs)
