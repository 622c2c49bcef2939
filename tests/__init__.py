# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/14 09:30'

Usage:

"""


class TestBase:

    @classmethod
    def check_result(cls, resp, data):
        """
        Check a test client response body
        :param resp:
        :param data:
        :return:
        """
        print('response:', resp.data)
        assert resp.data == data

    @classmethod
    def check_sorted(cls, continuum):
        """
        Ring points ascend by position
        :param continuum:
        :return:
        """
        positions = [point.position for point in continuum]
        assert all(a <= b for a, b in zip(positions, positions[1:]))
