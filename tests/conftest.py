# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/14 09:42'

Usage:

"""
import json

import pytest
from flask import Flask, make_response

from ketama_ring import Ketama, ServerInfo, SimpleCache, byte2str

# server list shipped with libketama, ports of it agree on the keys below
REFERENCE_SERVERS = [
    ('10.0.1.1:11211', 600),
    ('10.0.1.2:11211', 300),
    ('10.0.1.3:11211', 200),
    ('10.0.1.4:11211', 350),
    ('10.0.1.5:11211', 1000),
    ('10.0.1.6:11211', 800),
    ('10.0.1.7:11211', 950),
    ('10.0.1.8:11211', 100),
]

# key: (position, owner) on the reference continuum
REFERENCE_LOOKUPS = {
    '12936': (3769287096, '10.0.1.7:11211'),
    '27804': (435768809, '10.0.1.5:11211'),
    '37045': (1996655674, '10.0.1.2:11211'),
    '50829': (2954822664, '10.0.1.1:11211'),
    '65422': (1423001712, '10.0.1.6:11211'),
    '74912': (3809055594, '10.0.1.6:11211'),
}


def write_definitions(path, servers, header='# ketama servers\n'):
    lines = [header] + [f'{address}\t{weight}\n' for address, weight in servers]
    path.write_text(''.join(lines), encoding='utf-8')
    return str(path)


class RecordingReader:
    """definition_reader double counting how often the definitions are read"""

    def __init__(self, servers):
        self.servers = [ServerInfo(address, weight) for address, weight in servers]
        self.calls = []

    def __call__(self, source_id):
        self.calls.append(source_id)
        return list(self.servers)


@pytest.fixture
def reference_servers():
    return [ServerInfo(address, weight) for address, weight in REFERENCE_SERVERS]


@pytest.fixture
def servers_file(tmp_path):
    return write_definitions(tmp_path / 'servers', REFERENCE_SERVERS)


@pytest.fixture
def reader():
    return RecordingReader(REFERENCE_SERVERS)


@pytest.fixture
def cache():
    return SimpleCache()


def json_resp(result):
    if isinstance(result, bytes):
        result = byte2str(result)
    result = json.dumps(result)
    resp = make_response(result)
    resp.headers['Content-Type'] = 'application/json'
    return resp


@pytest.fixture
def app(servers_file):
    app = Flask(__name__)
    app.config.update(
        TESTING=True,
        KETAMA_CACHE_TYPE='simple',
        KETAMA_CACHE_TTL=60,
        KETAMA_DEFINITIONS_FILE=servers_file,
    )
    ketama = Ketama(app)

    @app.route("/api/lookup/<string:key>")
    def api_lookup(key):
        """
        Server owning `key`
        :return:
        """
        return json_resp(ketama.get_server(key))

    @app.route("/api/servers")
    def api_servers():
        """
        Servers on the continuum
        :return:
        """
        continuum = ketama.create_continuum(app.config['KETAMA_DEFINITIONS_FILE'])
        return json_resp(sorted(continuum.addresses()))

    return app


@pytest.fixture
def client(app):
    """ test client of the lookup app
    """
    return app.test_client()
