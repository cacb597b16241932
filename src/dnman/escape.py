"""Escape raw values for use in DNs and search filters.

    >>> escape('Smith, John').dn().get()
    'Smith\\\\, John'
    >>> str(escape('a*b').filter())
    'a\\\\2ab'

"""

import re

from ldap.dn import escape_dn_chars
from ldap.filter import escape_filter_chars

ESCAPE_DN = 0x01
ESCAPE_FILTER = 0x02

# A hex pair (one UTF-8 byte) or a single escaped character
_ESCAPED = re.compile(r'\\([0-9A-Fa-f]{2}|.)', re.DOTALL)


class EscapedValue(object):
    """A raw value together with the escaping rules to apply to it.

    Nothing is trimmed: leading and trailing spaces are part of the value and
    are escaped where the rules require it.

    """

    def __init__(self, value, flags=0):
        self.value = '' if value is None else str(value)
        self.flags = flags

    def __str__(self):
        return self.get()

    def __repr__(self):
        return "{0}({1!r}, flags={2})".format(self.__class__.__name__,
                                              self.value, self.flags)

    def dn(self):
        """Use the RFC 4514 rules for attribute values in a DN."""
        self.flags = ESCAPE_DN
        return self

    def filter(self):
        """Use the RFC 4515 rules for assertion values in a search filter."""
        self.flags = ESCAPE_FILTER
        return self

    def both(self):
        """Escape for a DN, then for a filter."""
        self.flags = ESCAPE_DN | ESCAPE_FILTER
        return self

    def get(self):
        """Return the escaped string."""
        if not self.flags:
            # No rules chosen: hex escape everything
            return ''.join('\\{0:02x}'.format(byte)
                           for byte in self.value.encode('utf-8'))

        value = self.value
        if self.flags & ESCAPE_DN:
            value = escape_dn_chars(value)
        if self.flags & ESCAPE_FILTER:
            value = escape_filter_chars(value)
        return value


def escape(value):
    """Wrap value in an EscapedValue, ready for .dn(), .filter() or .both()."""
    return EscapedValue(value)


def unescape(value):
    """Reverse DN or filter escaping, decoding hex pairs as UTF-8."""

    result = bytearray()
    pos = 0
    for match in _ESCAPED.finditer(value):
        result += value[pos:match.start()].encode('utf-8')
        token = match.group(1)
        if len(token) == 2:
            result.append(int(token, 16))
        else:
            result += token.encode('utf-8')
        pos = match.end()
    result += value[pos:].encode('utf-8')
    return result.decode('utf-8', 'replace')
