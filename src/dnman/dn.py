"""Immutable distinguished name values.

Parsing is done by python-ldap (ldap.dn). RDN strings are cut from the DN text
itself, so values keep the escaping they were written with, hex pairs included.
"""

import ldap
import ldap.dn

from .errors import InvalidDNError


def split_rdns(value):
    """Split DN text on the separators between its RDNs.

    Escaped and quoted characters are kept as written. Unescaped spaces around
    each RDN are dropped.
    """
    rdns = []
    current = []
    pending = []
    escaped = quoted = False
    for char in value:
        if escaped:
            escaped = False
        elif char == '\\':
            escaped = True
        elif char == '"':
            quoted = not quoted
        elif char in ',;' and not quoted:
            rdns.append(''.join(current))
            current, pending = [], []
            continue
        elif char == ' ' and not quoted:
            if current:
                pending.append(char)
            continue
        current.extend(pending)
        pending = []
        current.append(char)
    rdns.append(''.join(current))
    return rdns


class DistinguishedName(object):
    """A DN string with accessors for its RDNs and its place in the tree."""

    def __init__(self, value=None):
        if isinstance(value, DistinguishedName):
            value = value.value
        self.value = (value or '').strip()

    @classmethod
    def make(cls, value=None):
        """Return value as a DistinguishedName, wrapping it if required."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @staticmethod
    def build(value=None):
        """Start a DistinguishedNameBuilder from value."""
        from .builder import DistinguishedNameBuilder
        return DistinguishedNameBuilder(value)

    def __str__(self):
        return self.value

    def __repr__(self):
        return "{0}({1!r})".format(self.__class__.__name__, self.value)

    def __len__(self):
        return len(self.components())

    def __bool__(self):
        return not self.is_empty()

    def __eq__(self, other):
        if isinstance(other, str):
            other = DistinguishedName(other)
        if not isinstance(other, DistinguishedName):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._key())

    def get(self):
        """Return the DN string."""
        return self.value

    def is_empty(self):
        return not self.value

    def _parse(self):
        try:
            return ldap.dn.str2dn(self.value)
        except ldap.DECODING_ERROR:
            raise InvalidDNError(self.value)

    def components(self):
        """Return the RDN strings, most specific first, escaping intact."""
        if self.is_empty():
            return []
        # Validate only; the RDNs come from the text as written
        self._parse()
        return split_rdns(self.value)

    def rdns(self):
        """Return (attribute, value) pairs with the values unescaped.

        Multi-valued RDNs are represented by their first attribute.
        """
        return [(rdn[0][0], rdn[0][1]) for rdn in self._parse()]

    def values(self):
        return [value for _, value in self.rdns()]

    def attributes(self):
        return [attr for attr, _ in self.rdns()]

    def assoc(self):
        """Map lower-cased attribute names to their values, in DN order."""
        result = {}
        for attr, value in self.rdns():
            result.setdefault(attr.lower(), []).append(value)
        return result

    def name(self):
        """Return the unescaped value of the first RDN."""
        rdns = self.rdns()
        return rdns[0][1] if rdns else None

    def head(self):
        """Return the attribute of the first RDN."""
        rdns = self.rdns()
        return rdns[0][0] if rdns else None

    def relative(self):
        """Return the first RDN string."""
        components = self.components()
        return components[0] if components else None

    def parent(self):
        """Return the DN string of the parent entry."""
        components = self.components()
        if len(components) < 2:
            return None
        return ','.join(components[1:])

    def normalize(self):
        """Return the DN with lower-cased attributes and values."""
        return ldap.dn.dn2str([[(attr.lower(), value.lower(), flags)
                                for attr, value, flags in rdn]
                               for rdn in self._parse()])

    def _key(self):
        try:
            return self.normalize()
        except InvalidDNError:
            return self.value.lower()

    def _normalized_components(self):
        if self.is_empty():
            return []
        return ldap.dn.explode_dn(self.normalize())

    def is_child_of(self, parent):
        """True if parent is the direct parent of this DN."""
        parent = DistinguishedName.make(parent)
        mine = self._normalized_components()
        theirs = parent._normalized_components()
        if not mine or not theirs:
            return False
        return mine[1:] == theirs

    def is_parent_of(self, child):
        return DistinguishedName.make(child).is_child_of(self)

    def is_descendant_of(self, ancestor):
        """True if this DN sits anywhere below ancestor."""
        ancestor = DistinguishedName.make(ancestor)
        mine = self._normalized_components()
        theirs = ancestor._normalized_components()
        if not theirs or len(mine) <= len(theirs):
            return False
        return mine[-len(theirs):] == theirs

    def is_ancestor_of(self, descendant):
        return DistinguishedName.make(descendant).is_descendant_of(self)

    def is_sibling_of(self, sibling):
        """True if both DNs have the same parent."""
        sibling = DistinguishedName.make(sibling)
        mine = self._normalized_components()
        theirs = sibling._normalized_components()
        if len(mine) < 2 or len(theirs) < 2:
            return False
        return mine[1:] == theirs[1:]
