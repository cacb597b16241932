import pytest

from dnman.dn import DistinguishedName, split_rdns
from dnman.errors import InvalidDNError

USER = 'cn=John,ou=Users,dc=example,dc=com'


def test_make():
    dn = DistinguishedName(USER)
    assert DistinguishedName.make(dn) is dn
    assert str(DistinguishedName.make(USER)) == USER
    assert str(DistinguishedName.make(None)) == ''


def test_get():
    dn = DistinguishedName(' ' + USER + ' ')
    assert dn.get() == USER
    assert str(dn) == USER
    assert repr(dn) == "DistinguishedName('%s')" % USER


def test_components():
    dn = DistinguishedName('cn=Smith\\, John,dc=example')
    assert dn.components() == ['cn=Smith\\, John', 'dc=example']
    assert len(dn) == 2


def test_components_as_written():
    dn = DistinguishedName('cn=Smith\\2C John, ou=a\\+b ,dc=example')
    assert dn.components() == ['cn=Smith\\2C John', 'ou=a\\+b', 'dc=example']
    assert dn.parent() == 'ou=a\\+b,dc=example'


@pytest.mark.parametrize('value, expected', [
    ('cn=A,ou=B', ['cn=A', 'ou=B']),
    ('cn=a\\,b,ou=B', ['cn=a\\,b', 'ou=B']),
    ('cn=a\\\\,ou=B', ['cn=a\\\\', 'ou=B']),
    ('cn=a\\ , ou=B', ['cn=a\\ ', 'ou=B']),
    ('cn="a,b",ou=B', ['cn="a,b"', 'ou=B']),
    ('cn=a+sn=b;ou=B', ['cn=a+sn=b', 'ou=B']),
])
def test_split_rdns(value, expected):
    assert split_rdns(value) == expected


def test_bool():
    assert DistinguishedName(USER)
    assert not DistinguishedName()
    # Truthiness does not parse
    assert DistinguishedName('not a dn')


def test_empty():
    dn = DistinguishedName()
    assert dn.is_empty()
    assert dn.components() == []
    assert dn.rdns() == []
    assert len(dn) == 0
    assert dn.name() is None
    assert dn.head() is None
    assert dn.relative() is None
    assert dn.parent() is None


def test_invalid():
    dn = DistinguishedName('not a dn')
    with pytest.raises(InvalidDNError) as excinfo:
        dn.components()
    assert excinfo.value.dn == 'not a dn'
    with pytest.raises(InvalidDNError):
        dn.rdns()


def test_accessors():
    dn = DistinguishedName('cn=Smith\\, John,ou=Users,dc=example')
    assert dn.name() == 'Smith, John'
    assert dn.head() == 'cn'
    assert dn.relative() == 'cn=Smith\\, John'
    assert dn.parent() == 'ou=Users,dc=example'
    assert dn.values() == ['Smith, John', 'Users', 'example']
    assert dn.attributes() == ['cn', 'ou', 'dc']
    assert dn.rdns() == [('cn', 'Smith, John'), ('ou', 'Users'), ('dc', 'example')]


def test_parent_of_single_rdn():
    assert DistinguishedName('dc=com').parent() is None


def test_assoc():
    dn = DistinguishedName('CN=John,dc=example,DC=com')
    assert dn.assoc() == {'cn': ['John'], 'dc': ['example', 'com']}


def test_normalize():
    assert DistinguishedName('CN=John, DC=Example').normalize() == 'cn=john,dc=example'


def test_equality():
    dn = DistinguishedName('CN=John,DC=Example')
    assert dn == DistinguishedName('cn=john,dc=example')
    assert dn == 'cn=john, dc=example'
    assert dn != 'cn=jane,dc=example'
    assert hash(dn) == hash(DistinguishedName('cn=john,dc=example'))
    assert dn != 42


def test_equality_of_invalid():
    assert DistinguishedName('not a dn') == DistinguishedName('NOT A DN')
    assert DistinguishedName('not a dn') != DistinguishedName(USER)


def test_child_and_parent():
    dn = DistinguishedName(USER)
    assert dn.is_child_of('ou=Users,dc=example,dc=com')
    assert dn.is_child_of('OU=users,DC=example,DC=com')
    assert not dn.is_child_of('dc=example,dc=com')
    assert DistinguishedName('ou=Users,dc=example,dc=com').is_parent_of(dn)
    assert not DistinguishedName('dc=com').is_parent_of(dn)


def test_ancestor_and_descendant():
    dn = DistinguishedName(USER)
    assert dn.is_descendant_of('dc=com')
    assert dn.is_descendant_of('ou=Users,dc=example,dc=com')
    assert not dn.is_descendant_of(USER)
    assert not dn.is_descendant_of('dc=org')
    assert DistinguishedName('dc=example,dc=com').is_ancestor_of(dn)
    assert not DistinguishedName('ou=Groups,dc=example,dc=com').is_ancestor_of(dn)


def test_sibling():
    dn = DistinguishedName(USER)
    assert dn.is_sibling_of('cn=Jane,ou=Users,dc=example,dc=com')
    assert not dn.is_sibling_of('cn=Jane,ou=Staff,dc=example,dc=com')
    assert not DistinguishedName('dc=com').is_sibling_of('dc=org')


def test_empty_is_unrelated():
    empty = DistinguishedName()
    dn = DistinguishedName(USER)
    assert not empty.is_child_of(dn)
    assert not dn.is_child_of(empty)
    assert not dn.is_descendant_of(empty)
    assert not empty.is_ancestor_of(dn)
    assert not empty.is_sibling_of(dn)
