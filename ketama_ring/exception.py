# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/12 10:12'

Usage:
exceptions raised by the continuum builder, the definitions reader and the cache gateways
"""


class KetamaException(Exception):
    """Base exception of this package"""


class InvalidConfigException(KetamaException, ValueError):
    """`config` or one of its values is not usable"""


class InvalidServerInfoError(KetamaException, ValueError):
    """A server address or weight failed validation"""


class FileAccessError(KetamaException):
    """The definitions file cannot be opened or stat'ed"""

    def __init__(self, filename, reason=None):
        self.filename = filename
        self.reason = reason
        message = f'Failed opening {filename}'
        if reason:
            message = f'{message}: {reason}'
        super(FileAccessError, self).__init__(message)


class DefinitionParseError(KetamaException):
    """A non-comment line of the definitions file is malformed"""

    def __init__(self, line, content, message=None):
        self.line = line
        self.content = content
        super(DefinitionParseError, self).__init__(
            message or f"Failed parsing line {line}: '{content}'"
        )


class EmptyServerListError(KetamaException):
    """No servers to build a continuum from"""


class ZeroTotalWeightError(KetamaException):
    """Server weights sum to zero"""


class CorruptPayloadError(KetamaException):
    """A cached continuum payload cannot be decoded"""


class CacheError(KetamaException):
    """Base class of cache gateway failures"""


class CacheReadError(CacheError):
    """Reading from the cache gateway failed"""


class CacheWriteError(CacheError):
    """Writing to the cache gateway failed"""
