"""Chainable construction of distinguished names.

    >>> builder = DistinguishedNameBuilder('ou=Users,dc=example,dc=com')
    >>> str(builder.prepend('cn', 'Smith, John'))
    'cn=Smith\\\\, John,ou=Users,dc=example,dc=com'
    >>> builder, removed = builder.pop(2)
    >>> removed
    ['dc=example', 'dc=com']

"""

import logging

from .dn import DistinguishedName
from .errors import MalformedRDNError
from .escape import escape

logger = logging.getLogger(__name__)


def explode_rdn(rdn):
    """Split an RDN string on the first '=' into (attribute, value)."""
    attribute, sep, value = rdn.partition('=')
    if not sep:
        raise MalformedRDNError(rdn)
    return attribute, value


def make_rdn(component):
    """Join an (attribute, value) pair into an RDN string."""
    return '='.join(component)


class DistinguishedNameBuilder(object):
    """Edit the RDNs of a DN, then get() the result.

    Values are escaped once, when they are added. RDNs read from the initial
    DN are already escaped and are kept as they are.

    """

    def __init__(self, dn=None):
        self._components = [explode_rdn(rdn) for rdn in
                            DistinguishedName.make(dn).components()]
        self._reverse = False

    def __str__(self):
        return str(self.get())

    def __repr__(self):
        return "{0}({1!r})".format(self.__class__.__name__, str(self))

    def __len__(self):
        return len(self._components)

    @property
    def components(self):
        """A copy of the stored (attribute, value) pairs."""
        return list(self._components)

    def prepend(self, attribute, value):
        """Insert a single RDN at the start of the DN."""
        self._components[:0] = [self._make_component(attribute, value)]
        logger.debug("Prepended %s=%s", *self._components[0])
        return self

    def prepend_rdns(self, rdns):
        """Insert 'attribute=value' strings, in order, at the start of the DN."""
        components = self._componentize(rdns)
        self._components[:0] = components
        logger.debug("Prepended %d RDN(s)", len(components))
        return self

    def append(self, attribute, value):
        """Add a single RDN to the end of the DN."""
        self._components.append(self._make_component(attribute, value))
        logger.debug("Appended %s=%s", *self._components[-1])
        return self

    def append_rdns(self, rdns):
        """Add 'attribute=value' strings, in order, to the end of the DN."""
        components = self._componentize(rdns)
        self._components.extend(components)
        logger.debug("Appended %d RDN(s)", len(components))
        return self

    def pop(self, amount=1):
        """Remove up to amount RDNs from the end of the DN.

        Returns (builder, removed) where removed holds the RDN strings.
        """
        amount = max(amount, 0)
        start = max(len(self._components) - amount, 0)
        removed = [make_rdn(c) for c in self._components[start:]]
        del self._components[start:]
        logger.debug("Popped %r", removed)
        return self, removed

    def shift(self, amount=1):
        """Remove up to amount RDNs from the start of the DN.

        Returns (builder, removed) where removed holds the RDN strings.
        """
        amount = max(amount, 0)
        removed = [make_rdn(c) for c in self._components[:amount]]
        del self._components[:amount]
        logger.debug("Shifted %r", removed)
        return self, removed

    def reverse(self):
        """Output the RDNs in reverse order. Storage order is unchanged."""
        self._reverse = True
        return self

    def get(self):
        """Return the DistinguishedName for the current RDNs."""
        return DistinguishedName(self._build())

    to_distinguished_name = get

    def _build(self):
        components = self._components
        if self._reverse:
            components = reversed(components)
        return ','.join(make_rdn(c) for c in components)

    def _componentize(self, rdns):
        if isinstance(rdns, str):
            rdns = [rdns]
        return [self._make_component(*explode_rdn(rdn)) for rdn in rdns]

    @staticmethod
    def _make_component(attribute, value):
        return attribute.strip(), escape(value.strip()).dn().get()
