# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/12 16:40'

Usage:
reads server definition files, one `<address> <weight>` per line

    # comment
    10.0.1.1:11211  600
    10.0.1.2:11211  300   anything after the weight is ignored

>>> read_definitions('/etc/ketama/servers')
[ServerInfo(address='10.0.1.1:11211', weight=600), ServerInfo(address='10.0.1.2:11211', weight=300)]
"""

import re

from .exception import FileAccessError, DefinitionParseError, EmptyServerListError, ZeroTotalWeightError, \
    InvalidServerInfoError
from .server_info import ServerInfo

DEFINITION_LINE = re.compile(r'^([^ \t]+)[ \t]+([0-9]+)')


def parse_definitions(lines, source='<definitions>'):
    """
    Parse server definitions
    :param lines: iterable of text lines, line endings optional
    :param source: name used in error messages
    :return: list of ServerInfo, in file order
    :raise DefinitionParseError: malformed line, or a line whose server is invalid
    :raise EmptyServerListError: no server definition at all
    :raise ZeroTotalWeightError: every weight is zero
    """
    records = []
    for lineno, line in enumerate(lines, 1):
        if not line.strip() or line.startswith('#'):
            continue

        match = DEFINITION_LINE.match(line)
        if not match:
            raise DefinitionParseError(lineno, line.strip())
        records.append((lineno, line.strip(), match.group(1), int(match.group(2))))

    if not records:
        raise EmptyServerListError(f'No valid server definitions in {source}')
    if sum(weight for _, _, _, weight in records) == 0:
        raise ZeroTotalWeightError(f'Total weight of the server definitions in {source} is zero')

    servers = []
    for lineno, content, address, weight in records:
        try:
            servers.append(ServerInfo(address, weight))
        except InvalidServerInfoError as e:
            raise DefinitionParseError(
                lineno, content, f"Invalid server definition at line {lineno}: '{content}' ({e})"
            ) from e
    return servers


def read_definitions(filename):
    """
    Read and parse a definitions file (utf-8)
    :param filename:
    :return: list of ServerInfo
    :raise FileAccessError: the file cannot be opened or decoded
    """
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(filename, e) from e
    return parse_definitions(lines, source=f'file {filename}')
