# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/12 13:30'

Usage:
>>> ServerInfo('10.0.1.1:11211', 600)
ServerInfo(address='10.0.1.1:11211', weight=600)
"""

from collections import namedtuple

from .exception import InvalidServerInfoError


class ServerInfo(namedtuple('ServerInfo', ['address', 'weight'])):
    """One backend server and its relative capacity (weight)"""
    __slots__ = ()

    def __new__(cls, address, weight):
        if not isinstance(address, str) or not address:
            raise InvalidServerInfoError(f'address must be a non-empty str, got {address!r}')
        if address != address.strip() or any(c in address for c in ' \t\r\n'):
            raise InvalidServerInfoError(f'address must not contain whitespace, got {address!r}')
        # bool is an int subclass, reject it explicitly
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidServerInfoError(f'weight must be an int, got {weight!r}')
        if weight <= 0:
            raise InvalidServerInfoError(f'weight must be > 0, got {weight}')
        return super(ServerInfo, cls).__new__(cls, address, weight)

    @classmethod
    def coerce(cls, server):
        """
        Accept a ServerInfo or an (address, weight) pair
        :param server:
        :return:
        """
        if isinstance(server, cls):
            return server
        try:
            address, weight = server
        except (TypeError, ValueError):
            raise InvalidServerInfoError(f'expected ServerInfo or (address, weight), got {server!r}')
        return cls(address, weight)
