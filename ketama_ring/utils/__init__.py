# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/12 11:40'

Usage:

"""

from .constant import *
from .consistency_hash import md5_digest, digest_points, hash_key
from .decorator import reraise_as
from .transform import str2byte, byte2str, normalize_timeout, md5_hex, identity_key, prefixed_key
