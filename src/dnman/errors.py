"""dnman.errors

Provides exceptions used by the dnman modules."""


class BuildDNError(Exception):
    """Errors when constructing a DN."""

    def __init__(self, args="Error building a DN from supplied arguments."):
        Exception.__init__(self, args)


class MalformedRDNError(BuildDNError):
    """An RDN string which has no attribute=value separator."""

    def __init__(self, rdn=""):
        BuildDNError.__init__(
            self, "Malformed RDN (attribute=value required): {0!r}".format(rdn))
        self.rdn = rdn


class InvalidDNError(BuildDNError):
    """A DN string which could not be parsed."""

    def __init__(self, dn=""):
        BuildDNError.__init__(self, "Invalid DN: {0!r}".format(dn))
        self.dn = dn
