# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/12 11:02'

Usage:

"""
from functools import wraps

from redis import RedisError


def reraise_as(exc_class, message):
    """
    Translate redis errors raised by the wrapped call into `exc_class`.
    The original error is kept as `__cause__`; nothing is retried
    :param exc_class: exception type to raise, e.g. CacheWriteError
    :param message: message prefix, the redis error text is appended
    :return:
    """

    def wrap(f):
        """

        :param f:
        :return:

        Usage:
        >>> @reraise_as(CacheReadError, 'redis get failed')
        >>> def get(self, key):
        >>>     return self._client.get(key)
        """

        @wraps(f)
        def decorator(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RedisError as e:
                raise exc_class(f'{message}: {e}') from e

        return decorator

    return wrap
