# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/12 10:05'

Usage:

"""

__title__ = 'ketama_ring'
__description__ = 'Weighted consistent hashing (ketama) continuum with a cached ring for caching clients.'
__url__ = 'https://github.com/Rgcsh/ketama_ring'
__version__ = '1.0.0'
__author__ = 'Rgc'
__author_email__ = '2020956572@qq.com'
__license__ = 'MIT'
