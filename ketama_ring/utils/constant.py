# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/12 10:26'

Usage:

"""

# namespace of the cache keys holding serialized continuums
CONTINUUM_KEY_NAMESPACE = 'continuum.'

# libketama layout: 40 digests per server (scaled by weight share and server count), 4 points per digest
POINTS_PER_SERVER = 40
POINTS_PER_HASH = 4

# cached continuum lifetime in seconds when none is configured
DEFAULT_CACHE_TTL = 3600

# config keys, read from Flask app.config or a plain dict
# cache backend: simple, null or redis; default simple
k_cache_type = 'KETAMA_CACHE_TYPE'
# cached continuum lifetime, <=0 never expires
k_cache_ttl = 'KETAMA_CACHE_TTL'
# prefix prepended by the cache backend to every key it stores
k_cache_key_prefix = 'KETAMA_CACHE_KEY_PREFIX'
# redis backend connection, KETAMA_REDIS_URL wins over host/port/db/password
k_redis_host = 'KETAMA_REDIS_HOST'
k_redis_port = 'KETAMA_REDIS_PORT'
k_redis_password = 'KETAMA_REDIS_PASSWORD'
k_redis_db = 'KETAMA_REDIS_DB'
k_redis_url = 'KETAMA_REDIS_URL'
# server definitions file used by Ketama.get_server
k_definitions_file = 'KETAMA_DEFINITIONS_FILE'
