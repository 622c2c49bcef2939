# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/12 14:02'

Usage:
immutable sorted ring of (position, address) points and its byte codec

>>> continuum = RingBuilder.build([ServerInfo('10.0.1.1:11211', 1)], built_at=1600000000)
>>> continuum.lookup('user:42')
'10.0.1.1:11211'
>>> Continuum.deserialize(continuum.serialize()) == continuum
True
"""

import struct
from bisect import bisect_left
from collections import namedtuple

from .exception import CorruptPayloadError
from .utils import hash_key, str2byte, byte2str

RingPoint = namedtuple('RingPoint', ['position', 'address'])

MAGIC = b'KTM1'
_HEADER = struct.Struct('>4sqI')
_ADDRESS_LEN = struct.Struct('>I')
_COUNT = struct.Struct('>I')
_POINT = struct.Struct('>II')

UINT32_MAX = 0xFFFFFFFF


class Continuum(object):
    """
    Sorted, non-empty ring of RingPoint.
    built_at is the modification time of the definitions the ring was built from;
    it only decides cache freshness and never changes lookups
    """
    __slots__ = ('_points', '_positions', '_built_at')

    def __init__(self, points, built_at=0):
        """

        :param points: RingPoint sequence sorted ascending by position
        :param built_at: int timestamp
        """
        points = tuple(RingPoint(*point) for point in points)
        if not points:
            raise ValueError('a continuum needs at least one point')
        if isinstance(built_at, bool) or not isinstance(built_at, int):
            raise ValueError(f'built_at must be an int, got {built_at!r}')

        positions = [point.position for point in points]
        for position in positions:
            if not isinstance(position, int) or not 0 <= position <= UINT32_MAX:
                raise ValueError(f'position must be an uint32, got {position!r}')
        if any(a > b for a, b in zip(positions, positions[1:])):
            raise ValueError('points must be sorted ascending by position')

        self._points = points
        self._positions = positions
        self._built_at = built_at

    @property
    def points(self):
        return self._points

    @property
    def built_at(self):
        return self._built_at

    def lookup_point(self, key):
        """
        First point at or after the position of `key`, wrapping around to the first point
        :param key: str or int
        :return: RingPoint
        """
        index = bisect_left(self._positions, hash_key(key))
        if index == len(self._points):
            index = 0
        return self._points[index]

    def lookup(self, key):
        """
        Address of the server owning `key`
        :param key: str or int
        :return: str
        """
        return self.lookup_point(key).address

    def addresses(self):
        """Distinct addresses in order of their first point on the ring"""
        seen = {}
        for point in self._points:
            seen.setdefault(point.address, None)
        return list(seen)

    def serialize(self):
        """
        Encode built_at and the ordered points.
        Addresses go to a table once, points refer to it by index
        :return: bytes
        """
        index_of = {}
        for point in self._points:
            index_of.setdefault(point.address, len(index_of))

        chunks = [_HEADER.pack(MAGIC, self._built_at, len(index_of))]
        for address in index_of:
            encoded = str2byte(address)
            chunks.append(_ADDRESS_LEN.pack(len(encoded)))
            chunks.append(encoded)
        chunks.append(_COUNT.pack(len(self._points)))
        chunks.extend(_POINT.pack(point.position, index_of[point.address]) for point in self._points)
        return b''.join(chunks)

    @classmethod
    def deserialize(cls, payload):
        """
        The reversal of :meth:`serialize`
        :param payload: bytes
        :return: Continuum
        :raise CorruptPayloadError: on anything that is not a complete serialized continuum
        """
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise CorruptPayloadError(f'payload must be bytes, got {type(payload).__name__}')
        payload = bytes(payload)

        try:
            magic, built_at, address_count = _HEADER.unpack_from(payload, 0)
            if magic != MAGIC:
                raise CorruptPayloadError(f'bad magic {magic!r}')
            offset = _HEADER.size

            addresses = []
            for _ in range(address_count):
                (length,) = _ADDRESS_LEN.unpack_from(payload, offset)
                offset += _ADDRESS_LEN.size
                raw = payload[offset:offset + length]
                if len(raw) != length:
                    raise CorruptPayloadError('truncated address table')
                addresses.append(byte2str(raw))
                offset += length

            (point_count,) = _COUNT.unpack_from(payload, offset)
            offset += _COUNT.size
            if len(payload) - offset != point_count * _POINT.size:
                raise CorruptPayloadError(
                    f'expected {point_count} points, got {len(payload) - offset} bytes'
                )

            points = []
            for position, index in _POINT.iter_unpack(payload[offset:]):
                if index >= address_count:
                    raise CorruptPayloadError(f'address index {index} out of range')
                points.append(RingPoint(position, addresses[index]))
        except struct.error as e:
            raise CorruptPayloadError(f'truncated payload: {e}') from e
        except UnicodeDecodeError as e:
            raise CorruptPayloadError(f'address is not utf-8: {e}') from e

        try:
            return cls(points, built_at)
        except ValueError as e:
            raise CorruptPayloadError(str(e)) from e

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __eq__(self, other):
        if not isinstance(other, Continuum):
            return NotImplemented
        return self._built_at == other._built_at and self._points == other._points

    def __repr__(self):
        return f'<Continuum points={len(self._points)} servers={len(self.addresses())} built_at={self._built_at}>'
