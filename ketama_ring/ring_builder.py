# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/12 15:18'

Usage:
builds the libketama weighted continuum

>>> continuum = RingBuilder.build([ServerInfo('a:11211', 600), ServerInfo('b:11211', 400)])
>>> len(continuum)
320
"""

import math
from operator import attrgetter

from .continuum import Continuum, RingPoint
from .exception import EmptyServerListError, ZeroTotalWeightError
from .utils import POINTS_PER_SERVER, POINTS_PER_HASH, digest_points


class RingBuilder(object):
    """Pure builder: same servers in the same order always give the same continuum"""

    POINTS_PER_SERVER = POINTS_PER_SERVER
    POINTS_PER_HASH = POINTS_PER_HASH

    @classmethod
    def point_groups(cls, weight, total_weight, server_count):
        """
        Number of digests computed for one server.
        The float expression and its evaluation order match libketama,
        changing either moves points on rings shared with other clients
        :param weight:
        :param total_weight:
        :param server_count:
        :return:
        """
        share = weight / total_weight
        return int(math.floor(share * cls.POINTS_PER_SERVER * server_count))

    @classmethod
    def iter_points(cls, servers):
        """
        Unsorted ring points in emission order: server index, then k, then digest chunk
        :param servers: list of ServerInfo
        :return:
        """
        total_weight = sum(server.weight for server in servers)
        if total_weight == 0:
            raise ZeroTotalWeightError('total weight of the servers is zero')

        server_count = len(servers)
        for server in servers:
            for k in range(cls.point_groups(server.weight, total_weight, server_count)):
                for position in digest_points(f'{server.address}-{k}'):
                    yield RingPoint(position, server.address)

    @staticmethod
    def sort_points(points):
        """
        Sort ascending by position. sorted() is stable, so points sharing a position
        keep their emission order; this is the tie-break rule of the ring
        :param points:
        :return: list of RingPoint
        """
        return sorted(points, key=attrgetter('position'))

    @classmethod
    def build(cls, servers, built_at=0):
        """
        Build the continuum of `servers`
        :param servers: list of ServerInfo, or objects with address and weight attributes
        :param built_at: modification time of the definitions the servers came from
        :return: Continuum
        :raise EmptyServerListError:
        :raise ZeroTotalWeightError:
        """
        servers = list(servers)
        if not servers:
            raise EmptyServerListError('no servers to build a continuum from')

        points = cls.sort_points(cls.iter_points(servers))
        if not points:
            # only reachable with duck typed servers carrying tiny or negative weights
            raise ZeroTotalWeightError('server weights produced no ring points')
        return Continuum(points, built_at)
