# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/14 14:10'

Usage:

"""
import hashlib
import os

import pytest

from ketama_ring import Ketama, Continuum, SimpleCache, NullCache, RingBuilder, ServerInfo, prefixed_key, \
    FileAccessError, DefinitionParseError, InvalidConfigException, CacheReadError, CacheWriteError
from tests.conftest import REFERENCE_LOOKUPS, REFERENCE_SERVERS, write_definitions


class FailingCache(SimpleCache):
    """SimpleCache whose reads and/or writes blow up"""

    def __init__(self, fail_get=False, fail_set=False):
        super(FailingCache, self).__init__()
        self.fail_get = fail_get
        self.fail_set = fail_set

    def get(self, key):
        if self.fail_get:
            raise CacheReadError('connection refused')
        return super(FailingCache, self).get(key)

    def set(self, key, value, timeout=None):
        if self.fail_set:
            raise CacheWriteError('connection refused')
        return super(FailingCache, self).set(key, value, timeout)


class RecordingCache(SimpleCache):

    def __init__(self):
        super(RecordingCache, self).__init__()
        self.writes = []

    def set(self, key, value, timeout=None):
        self.writes.append((key, timeout))
        return super(RecordingCache, self).set(key, value, timeout)


class TestGetContinuum:

    def test_cache_hit(self, cache, reader):
        ketama = Ketama(cache=cache, definition_reader=reader)
        first = ketama.get_continuum('pool-a', 100)
        second = ketama.get_continuum('pool-a', 100)
        assert reader.calls == ['pool-a']
        assert first == second
        assert second.built_at == 100

    def test_rebuild_when_modified(self, cache, reader):
        ketama = Ketama(cache=cache, definition_reader=reader)
        ketama.get_continuum('pool-a', 100)
        continuum = ketama.get_continuum('pool-a', 101)
        assert reader.calls == ['pool-a', 'pool-a']
        assert continuum.built_at == 101
        # the rebuilt continuum replaced the cached one
        assert Continuum.deserialize(cache.get(ketama.cache_key('pool-a'))).built_at == 101

    def test_cached_continuum_returned_unchanged(self, cache, reader):
        ketama = Ketama(cache=cache, definition_reader=reader)
        cached = RingBuilder.build([ServerInfo('cached:11211', 1)], built_at=100)
        cache.set(ketama.cache_key('pool-a'), cached.serialize())
        assert ketama.get_continuum('pool-a', 100) == cached
        assert reader.calls == []

    def test_corrupt_payload_rebuilds(self, cache, reader):
        ketama = Ketama(cache=cache, definition_reader=reader)
        cache.set(ketama.cache_key('pool-a'), b'garbage')
        continuum = ketama.get_continuum('pool-a', 100)
        assert reader.calls == ['pool-a']
        assert Continuum.deserialize(cache.get(ketama.cache_key('pool-a'))) == continuum

    def test_read_failure_rebuilds(self, reader):
        ketama = Ketama(cache=FailingCache(fail_get=True), definition_reader=reader)
        continuum = ketama.get_continuum('pool-a', 100)
        assert continuum.lookup('12936') == REFERENCE_LOOKUPS['12936'][1]
        assert reader.calls == ['pool-a']

    def test_write_failure_still_returns(self, reader, caplog):
        ketama = Ketama(cache=FailingCache(fail_set=True), definition_reader=reader)
        continuum = ketama.get_continuum('pool-a', 100)
        assert continuum.built_at == 100
        assert 'cache write failed' in caplog.text

    def test_reader_errors_propagate(self, cache):
        def reader(source_id):
            raise DefinitionParseError(3, 'bad-line')

        ketama = Ketama(cache=cache, definition_reader=reader)
        with pytest.raises(DefinitionParseError):
            ketama.get_continuum('pool-a', 100)
        assert cache.get(ketama.cache_key('pool-a')) is None

    def test_ttl(self, reader):
        cache = RecordingCache()
        ketama = Ketama(config={'KETAMA_CACHE_TTL': 30}, cache=cache, definition_reader=reader)
        ketama.get_continuum('pool-a', 100)
        assert cache.writes == [(ketama.cache_key('pool-a'), 30)]

    def test_null_cache_always_rebuilds(self, reader):
        ketama = Ketama(config={'KETAMA_CACHE_TYPE': 'null'}, definition_reader=reader)
        assert isinstance(ketama.cache, NullCache)
        ketama.get_continuum('pool-a', 100)
        ketama.get_continuum('pool-a', 100)
        assert len(reader.calls) == 2


class TestCacheKey:

    def test_default(self, cache):
        ketama = Ketama(cache=cache)
        expected = 'continuum.' + hashlib.md5(b'/etc/ketama/servers').hexdigest()
        assert ketama.cache_key('/etc/ketama/servers') == expected

    def test_strategy(self, cache, reader):
        ketama = Ketama(cache=cache, definition_reader=reader, key_strategy=prefixed_key('app1:'))
        ketama.get_continuum('pool-a', 100)
        key = 'app1:continuum.' + hashlib.md5(b'pool-a').hexdigest()
        assert ketama.cache_key('pool-a') == key
        assert cache.get(key) is not None

    def test_strategies_do_not_collide(self, cache):
        first = Ketama(cache=cache, key_strategy=prefixed_key('app1:'))
        second = Ketama(cache=cache, key_strategy=prefixed_key('app2:'))
        first.create_continuum_from_list([('a', 1)], 'pool', 1)
        second.create_continuum_from_list([('b', 1)], 'pool', 1)
        assert first.create_continuum_from_list([('a', 1)], 'pool', 1).addresses() == ['a']
        assert second.create_continuum_from_list([('b', 1)], 'pool', 1).addresses() == ['b']

    def test_strategy_is_read_only(self, cache):
        ketama = Ketama(cache=cache)
        with pytest.raises(AttributeError):
            ketama.key_strategy = prefixed_key('x')

    def test_strategy_must_be_callable(self, cache):
        with pytest.raises(InvalidConfigException):
            Ketama(cache=cache, key_strategy='app1:')


class TestCreateContinuum:

    def test_file(self, cache, servers_file):
        ketama = Ketama(cache=cache)
        continuum = ketama.create_continuum(servers_file)
        assert continuum.built_at == int(os.stat(servers_file).st_mtime)
        for key, (_, address) in REFERENCE_LOOKUPS.items():
            assert continuum.lookup(key) == address

    def test_file_modified(self, cache, tmp_path):
        path = write_definitions(tmp_path / 'servers', [('a:11211', 1)])
        os.utime(path, (1600000000, 1600000000))
        ketama = Ketama(cache=cache)
        assert ketama.create_continuum(path).addresses() == ['a:11211']

        write_definitions(tmp_path / 'servers', [('b:11211', 1)])
        os.utime(path, (1600000100, 1600000100))
        continuum = ketama.create_continuum(path)
        assert continuum.addresses() == ['b:11211']
        assert continuum.built_at == 1600000100

    def test_missing_file(self, cache, tmp_path):
        with pytest.raises(FileAccessError):
            Ketama(cache=cache).create_continuum(str(tmp_path / 'missing'))

    def test_from_list(self, cache):
        ketama = Ketama(cache=cache)
        continuum = ketama.create_continuum_from_list(REFERENCE_SERVERS, 'reference', 5)
        assert continuum.built_at == 5
        assert continuum.lookup('27804') == REFERENCE_LOOKUPS['27804'][1]
        assert continuum == ketama.create_continuum_from_list([], 'reference', 5)


class TestConfig:

    def test_config_type(self):
        with pytest.raises(InvalidConfigException):
            Ketama(config='KETAMA_CACHE_TTL=3')

    def test_ttl_type(self):
        with pytest.raises(InvalidConfigException):
            Ketama(config={'KETAMA_CACHE_TTL': '3600'})

    def test_default_cache(self):
        ketama = Ketama()
        assert isinstance(ketama.cache, SimpleCache)
        assert ketama.ttl == 3600

    def test_get_server_without_file(self, cache):
        with pytest.raises(InvalidConfigException):
            Ketama(cache=cache).get_server('12936')

    def test_get_server(self, cache, servers_file):
        ketama = Ketama(config={'KETAMA_DEFINITIONS_FILE': servers_file}, cache=cache)
        assert ketama.get_server('50829') == REFERENCE_LOOKUPS['50829'][1]
