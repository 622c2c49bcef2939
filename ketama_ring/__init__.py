# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/13 14:10'

Usage:
maps keys onto weighted servers with a ketama continuum, the built continuum is cached
and only rebuilt when the server definitions change

>>> ketama = Ketama(cache=SimpleCache())
>>> ketama.create_continuum('/etc/ketama/servers').lookup('user:42')
'10.0.1.3:11211'

as a Flask extension:

>>> app.config['KETAMA_DEFINITIONS_FILE'] = '/etc/ketama/servers'
>>> ketama = Ketama(app)
>>> ketama.get_server('user:42')
'10.0.1.3:11211'
"""

import os

from .__version__ import __version__
from .backends import BaseCache, NullCache, SimpleCache, RedisCache, create_cache
from .continuum import Continuum, RingPoint
from .definitions import read_definitions, parse_definitions
from .exception import KetamaException, InvalidConfigException, InvalidServerInfoError, FileAccessError, \
    DefinitionParseError, EmptyServerListError, ZeroTotalWeightError, CorruptPayloadError, CacheError, \
    CacheReadError, CacheWriteError
from .log_obj import log
from .ring_builder import RingBuilder
from .server_info import ServerInfo
from .utils import CONTINUUM_KEY_NAMESPACE, DEFAULT_CACHE_TTL, k_cache_ttl, k_definitions_file, md5_hex, \
    identity_key, prefixed_key, hash_key, byte2str


class Ketama(object):
    """Continuum factory with a cache in front of RingBuilder"""

    def __init__(self, app=None, config=None, cache=None, key_strategy=None, definition_reader=None):
        """
        :param app: Flask app, configured lazily through init_app when given
        :param config: dict of KETAMA_* settings, overrides app.config
        :param cache: cache gateway with get(key) and set(key, value, ttl); built from config when None
        :param key_strategy: callable mapping a cache key to the key actually stored, identity when None.
                             Fixed for the lifetime of this object
        :param definition_reader: callable mapping a source id to a list of ServerInfo,
                                  defaults to reading a definitions file
        """
        if not (config is None or isinstance(config, dict)):
            raise InvalidConfigException("`config` must be an instance of dict or None")
        if key_strategy is not None and not callable(key_strategy):
            raise InvalidConfigException("`key_strategy` must be callable")
        if definition_reader is not None and not callable(definition_reader):
            raise InvalidConfigException("`definition_reader` must be callable")

        self.config = config
        self.cache = cache
        # a cache passed in survives init_app, one built from config is rebuilt by it
        self._cache_from_config = cache is None
        self._key_strategy = key_strategy or identity_key
        self.definition_reader = definition_reader or read_definitions
        self.ttl = DEFAULT_CACHE_TTL
        self.definitions_file = None
        self.app = None

        if app is not None:
            self.init_app(app, config)
        else:
            self._configure(config or {})

    def init_app(self, app, config=None):
        """ Flask extension lazy loading """

        if not (config is None or isinstance(config, dict)):
            raise InvalidConfigException("`config` must be an instance of dict or None")

        # app.config, then the constructor config, then this call's config
        basic_config = app.config.copy()
        if self.config:
            basic_config.update(self.config)
        if config:
            basic_config.update(config)

        self._configure(basic_config)
        self.app = app
        app.extensions["ketama"] = self
        log.info("Registered ketama continuum extension")

    def _configure(self, config):
        ttl = config.get(k_cache_ttl, DEFAULT_CACHE_TTL)
        if isinstance(ttl, bool) or not isinstance(ttl, int):
            raise InvalidConfigException(f"`{k_cache_ttl}` must be an int, got {ttl!r}")
        self.ttl = ttl
        self.definitions_file = config.get(k_definitions_file) or self.definitions_file
        if self._cache_from_config:
            self.cache = create_cache(config)

    @property
    def key_strategy(self):
        return self._key_strategy

    def cache_key(self, source_id):
        """
        Storage key of the continuum built from `source_id`
        :param source_id: definitions file name or any unique identifier
        :return:
        """
        return self._key_strategy(CONTINUUM_KEY_NAMESPACE + md5_hex(source_id))

    def _load_from_cache(self, cache_key, modification_time):
        """
        Cached continuum built at `modification_time`, None on a miss.
        Read failures and corrupt payloads count as a miss
        """
        try:
            payload = self.cache.get(cache_key)
        except Exception as e:
            log.warning(f'cache read failed for {cache_key}, rebuilding: {e!r}')
            return None
        if payload is None or payload is False:
            return None

        try:
            continuum = Continuum.deserialize(payload)
        except CorruptPayloadError as e:
            log.warning(f'corrupt continuum in cache under {cache_key}, rebuilding: {e}')
            return None

        if continuum.built_at != modification_time:
            log.info(f'stale continuum under {cache_key}: built at {continuum.built_at}, '
                     f'definitions modified at {modification_time}')
            return None
        return continuum

    def _store_cache(self, cache_key, continuum):
        """A failed write only costs a rebuild on the next call"""
        try:
            self.cache.set(cache_key, continuum.serialize(), self.ttl)
        except Exception:
            log.exception(f'cache write failed for {cache_key}, continuum returned uncached')

    def _build(self, cache_key, modification_time, load_servers):
        continuum = self._load_from_cache(cache_key, modification_time)
        if continuum is not None:
            return continuum

        servers = load_servers()
        continuum = RingBuilder.build(servers, built_at=modification_time)
        log.info(f'built continuum of {len(continuum)} points for {len(servers)} servers '
                 f'(built_at={modification_time})')
        self._store_cache(cache_key, continuum)
        return continuum

    def get_continuum(self, source_id, current_mod_time):
        """
        Continuum of the servers defined by `source_id`, from cache while it is fresh
        :param source_id: passed to definition_reader and hashed into the cache key
        :param current_mod_time: int modification time of the definitions;
                                 a cached continuum built at another time is rebuilt
        :return: Continuum
        :raise: whatever definition_reader raises, and RingBuilder errors
        """
        return self._build(
            self.cache_key(source_id),
            current_mod_time,
            lambda: list(self.definition_reader(source_id)),
        )

    def create_continuum(self, filename):
        """
        Continuum of a definitions file, rebuilt when the file's mtime changes
        :param filename:
        :return: Continuum
        :raise FileAccessError:
        """
        filename = os.fspath(filename)
        try:
            modification_time = int(os.stat(filename).st_mtime)
        except OSError as e:
            raise FileAccessError(filename, e) from e
        return self.get_continuum(filename, modification_time)

    def create_continuum_from_list(self, servers, unique_cache_key, modification_time):
        """
        Continuum of an in memory server list
        :param servers: list of ServerInfo or (address, weight) pairs
        :param unique_cache_key: identifies this server list in the cache
        :param modification_time: int version of the list, a change forces a rebuild
        :return: Continuum

        Usage:
        >>> ketama.create_continuum_from_list([('10.0.1.1:11211', 600), ('10.0.1.2:11211', 300)], 'pool-a', 1)
        """
        return self._build(
            self.cache_key(unique_cache_key),
            modification_time,
            lambda: [ServerInfo.coerce(server) for server in servers],
        )

    def get_server(self, key):
        """
        Address owning `key` according to the configured definitions file
        :param key: str or int
        :return: str
        """
        if not self.definitions_file:
            raise InvalidConfigException(f"`{k_definitions_file}` is not configured")
        return self.create_continuum(self.definitions_file).lookup(key)
