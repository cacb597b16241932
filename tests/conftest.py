import configparser

import pytest

from dnman import util

CONFIG = """\
[global]
base = dc=example,dc=com

[user]
base = ou=People,dc=example,dc=com
filter = uid=%s

[group]
base = ou=Group,dc=example,dc=com

[automount]
base = ou=Automount,dc=example,dc=com
filter = automountKey=%s

[host]
"""


@pytest.fixture
def config():
    parser = configparser.ConfigParser(interpolation=None)
    parser.read_string(CONFIG)
    return parser


@pytest.fixture
def objconf(config):
    return util.LDAPConfig(config)
