import configparser
import logging
import os
from functools import wraps
from optparse import OptionParser

from .builder import DistinguishedNameBuilder
from .errors import BuildDNError

logger = logging.getLogger(__name__)

DEFAULT_FILTER = 'cn=%s'

# Example config shipped with the package
DEFAULT_CONFIG = os.path.join(os.path.dirname(__file__), 'dnman.conf')


class LDAPConfig(dict):
    """Store the per-object-type config data for the dnman shell.

    These data come from the config file: every section other than 'global'
    describes one type of object, with the base DN its entries live under and
    the filter whose attribute names them.

    Include a convenient method, build_dn, to create a DN given an object name,
    an object type and an optional extra RDN.

    """

    def __init__(self, config):
        super(LDAPConfig, self).__init__()
        self.globalconf = config
        self.defaults = {}
        if config.has_section('global'):
            self.defaults = dict(config.items('global'))
        for section in config.sections():
            if section != 'global':
                self[section] = dict(config.items(section))

                # Sections without their own base live under the global one
                self[section].setdefault('base', self.defaults.get('base', ''))
                self[section].setdefault('filter', DEFAULT_FILTER)

    def section(self, child=None):
        """Return the config for child, or the global config if None."""
        if child is None:
            return self.defaults
        try:
            return self[child]
        except KeyError:
            # Raise as BuildDNError to allow better handling
            raise BuildDNError("No config section for object type '{0}'.".format(child))

    def naming_attribute(self, child=None):
        """Return the attribute from the filter, e.g. uid from uid=%s."""
        return self.section(child).get('filter', DEFAULT_FILTER).partition('=')[0]

    def base_dn(self, child=None):
        return self.section(child).get('base', '')

    def build_dn(self, obj, child=None, rdn=""):
        """Return a DN constructed from a filter, rdn, and base DN.

        rdn is DN text, one or more RDNs already escaped, placed between the
        object's RDN and the base DN.
        """
        builder = DistinguishedNameBuilder(
            ','.join(x for x in (rdn, self.base_dn(child)) if x))
        builder.prepend(self.naming_attribute(child), obj)
        logger.debug("Built DN %s for %r (%s)", builder, obj, child)
        return str(builder)


def parse_config(options):
    """Read in a config file"""

    config = configparser.ConfigParser(interpolation=None)
    if options.config:
        config.read(options.config)
    elif not config.read('dnman.conf'):
        config.read(DEFAULT_CONFIG)
    return config


def parse_opts(args=None):
    """Handle command-line arguments"""

    parser = OptionParser(usage="%prog [options] [command]")
    parser.add_option("-c", "--config", dest="config",
                      help="Path to configuration file (default: ./dnman.conf, "
                           "then the example shipped with dnman)")
    parser.add_option("-b", "--dn", dest="dn", default=None,
                      help="DN to start building from")
    parser.add_option("-d", "--debug", dest="debug",
                      action="store_true", default=False,
                      help="Log debugging output and raise all errors")
    parser.add_option("-f", "--force", dest="force",
                      action="store_true", default=False,
                      help="Don't prompt for confirmation for operations")
    return parser.parse_args(args)


def setup_logging(options):
    """Configure the root logger from the command-line options."""
    logging.basicConfig(
        level=logging.DEBUG if options.debug else logging.WARNING,
        format="%(levelname)s:%(name)s: %(message)s")


def printexceptions(func):
    """Decorate the given function so that errors are printed, not raised.

    Unexpected errors are re-raised, as is everything in debugging mode.

    """

    @wraps(func)
    def new_func(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        # Certain errors should be reported, but not raised
        # This gives an error message, but remains in the shell
        except (configparser.Error, BuildDNError, ValueError) as exc:
            print(exc)
            if logger.isEnabledFor(logging.DEBUG):
                raise
        # Otherwise, print and raise
        except Exception as exc:
            print(exc)
            raise
    return new_func
