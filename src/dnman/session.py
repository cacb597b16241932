"""Context manager that holds the DN being edited in a dnman shell.

Provides 'high-level' methods which take shell argument strings and apply
them to a DistinguishedNameBuilder.
"""

import logging
import shlex

from .builder import DistinguishedNameBuilder

logger = logging.getLogger(__name__)


class BuilderSession(object):
    """Container object for a DN under construction."""

    def __init__(self, conf, dn=None):
        self.conf = conf
        self.initial = dn
        self.builder = None

    def open(self):
        """Start building from the initial DN."""
        self.builder = DistinguishedNameBuilder(self.initial)

    def close(self):
        """Discard the builder, if one exists."""
        if self.builder is not None:
            logger.debug("Closing session at DN %s", self.builder)
            self.builder = None

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False  # we do not handle exceptions.

    def __enter__(self):
        self.open()
        return self

    @staticmethod
    def split_rdns(args):
        """Split 'attr=val attr="v a l"' into a list of RDN strings."""
        return shlex.split(args)

    @staticmethod
    def parse_amount(args):
        """Parse the optional count given to pop and shift."""
        args = args.strip()
        if not args:
            return 1
        try:
            return int(args)
        except ValueError:
            raise ValueError("Invalid count '{0}' (a number is required).".format(args))

    def show(self):
        return str(self.builder)

    def reset(self, dn=""):
        """Throw away all edits and start again from dn."""
        logger.debug("Resetting session to %r", dn)
        self.builder = DistinguishedNameBuilder(dn.strip() or None)
        return self.show()

    def prepend(self, args):
        self.builder.prepend_rdns(self.split_rdns(args))
        return self.show()

    def append(self, args):
        self.builder.append_rdns(self.split_rdns(args))
        return self.show()

    def pop(self, args=""):
        """Remove RDNs from the end, returning the removed RDN strings."""
        _, removed = self.builder.pop(self.parse_amount(args))
        return removed

    def shift(self, args=""):
        """Remove RDNs from the start, returning the removed RDN strings."""
        _, removed = self.builder.shift(self.parse_amount(args))
        return removed

    def reverse(self):
        self.builder.reverse()
        return self.show()

    def base(self, objtype):
        """Start again from the base DN of an object type."""
        return self.reset(self.conf.base_dn(objtype.strip()))

    def entry(self, args):
        """Start again from the DN of a named object. args is 'objtype name'."""
        objtype, name = args.split(None, 1)
        return self.reset(self.conf.build_dn(name, child=objtype))

    def parent(self):
        return self.builder.get().parent()

    def explode(self):
        """Return the (attribute, unescaped value) pairs of the current DN."""
        return self.builder.get().rdns()
