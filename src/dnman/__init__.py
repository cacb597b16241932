"""DNMan: a command-line shell for building LDAP distinguished names."""

from . import errors, session, util
from .builder import DistinguishedNameBuilder
from .dn import DistinguishedName
from .escape import EscapedValue, escape, unescape

import atexit
import os
import shellac

__all__ = ['DistinguishedName', 'DistinguishedNameBuilder', 'EscapedValue',
           'escape', 'unescape', 'errors', 'main', 'shell_factory']


def shell_factory(dnsession, options, objconf):
    """Factory to generate dnman shells."""

    def safe_to_continue():
        """Returns true if force set, or interactive and 'y' pressed."""
        if options.force or (options.interactive and input(
                "Are you sure? (y/n):").lower().startswith('y')):
            return True

    def safety_check(func):
        """A decorator to abort "unsafe" operations without explicit permission."""

        def new_func(*args, **kwargs):
            """function returned by the decorator."""

            if safe_to_continue():
                return func(*args, **kwargs)
        return new_func

    def complete_objtype(token=""):
        """Complete on the object types named in the config file."""
        return shellac.complete_list(sorted(objconf.keys()), token)

    def complete_attrs(token=""):
        """Complete on the naming attributes of the configured object types."""
        attrs = set(objconf.naming_attribute(x) for x in objconf)
        return shellac.complete_list(sorted(attrs), token, append_character="=")

    class DNMan(shellac.Shellac):
        """
DNMan Shell
-----------

Build and edit an LDAP distinguished name.

- Press <TAB> to see possible command-line completions.
- Type 'help <TAB>' to see which commands have help documentation.
- Type 'exit' or ctrl-d to quit.

        """

        def __init__(self):
            super(DNMan, self).__init__()
            if self.stdin.isatty():
                self.prompt = "%s> " % (self.__class__.__name__)

        @staticmethod
        @util.printexceptions
        def do_show(args):
            """Show the DN being built."""
            print(dnsession.show())

        @staticmethod
        def help_show(args):
            """help method for do_show."""
            return """\
Show the DN being built.

Usage: show"""

        @staticmethod
        @util.printexceptions
        @safety_check
        def do_reset(args):
            """Discard all edits and start again."""
            print(dnsession.reset(args))

        @staticmethod
        def help_reset(args):
            """help method for do_reset."""
            return """\
Discard the DN being built and start again, optionally from another DN.

Usage: reset [dn]
Example: reset ou=People,dc=example,dc=com"""

        @staticmethod
        @shellac.completer(complete_attrs)
        @util.printexceptions
        def do_prepend(args):
            """Add RDNs to the start of the DN."""
            print(dnsession.prepend(args))

        @staticmethod
        def help_prepend(args):
            """help method for do_prepend."""
            return """\
Add one or more RDNs to the start of the DN. Values are escaped.
Quote values which contain spaces.

Usage: prepend attr=x [attr=y...]
Example: prepend cn="Smith, John" ou=Staff"""

        @staticmethod
        @shellac.completer(complete_attrs)
        @util.printexceptions
        def do_append(args):
            """Add RDNs to the end of the DN."""
            print(dnsession.append(args))

        @staticmethod
        def help_append(args):
            """help method for do_append."""
            return """\
Add one or more RDNs to the end of the DN. Values are escaped.
Quote values which contain spaces.

Usage: append attr=x [attr=y...]
Example: append dc=example dc=com"""

        @staticmethod
        @util.printexceptions
        def do_pop(args):
            """Remove RDNs from the end of the DN."""
            for rdn in dnsession.pop(args):
                print(rdn)

        @staticmethod
        def help_pop(args):
            """help method for do_pop."""
            return """\
Remove RDNs from the end of the DN and print them.

Usage: pop [count]"""

        @staticmethod
        @util.printexceptions
        def do_shift(args):
            """Remove RDNs from the start of the DN."""
            for rdn in dnsession.shift(args):
                print(rdn)

        @staticmethod
        def help_shift(args):
            """help method for do_shift."""
            return """\
Remove RDNs from the start of the DN and print them.

Usage: shift [count]"""

        @staticmethod
        @util.printexceptions
        def do_reverse(args):
            """Output the DN in reverse order."""
            print(dnsession.reverse())

        @staticmethod
        def help_reverse(args):
            """help method for do_reverse."""
            return """\
Output the RDNs of the DN in reverse order, least specific first.
Use 'reset' to undo.

Usage: reverse"""

        @staticmethod
        @shellac.completer(complete_objtype)
        @util.printexceptions
        @safety_check
        def do_base(args):
            """Start again from the base DN of an object type."""
            print(dnsession.base(args))

        @staticmethod
        def help_base(args):
            """help method for do_base."""
            return """\
Discard the DN being built and start again from the base DN of an object type.

Object types: {0}

Usage: base objtype""".format(', '.join(sorted(objconf.keys())))

        @staticmethod
        @shellac.completer(complete_objtype)
        @util.printexceptions
        @safety_check
        def do_entry(args):
            """Start again from the DN of a named object."""
            try:
                print(dnsession.entry(args))
            except ValueError:
                print("Wrong number of arguments supplied. See help for more information.")

        @staticmethod
        def help_entry(args):
            """help method for do_entry."""
            return """\
Discard the DN being built and start again from the DN of a named object.

Usage: entry objtype name
Example: entry user josoap"""

        @staticmethod
        @util.printexceptions
        def do_parent(args):
            """Show the parent of the DN."""
            print(dnsession.parent() or "No parent.")

        @staticmethod
        @util.printexceptions
        def do_explode(args):
            """Show the attributes and unescaped values of the DN."""
            for attr, value in dnsession.explode():
                print("{0}: {1}".format(attr, value))

    return DNMan()


def main(argv=None):
    """Start here."""
    options, args = util.parse_opts(argv)
    util.setup_logging(options)
    config = util.parse_config(options)

    options.interactive = len(args) == 0

    # Alter readline's set of completion delim characters to better match
    # what LDAP treats as 'special' characters
    # Best-guess based on: https://www.ietf.org/rfc/rfc4514.txt 2.4
    shellac.readline.set_completer_delims(' \t\n#=+\\",<>')

    # Try to read the dnman history file
    try:
        hist_file = os.environ['HOME'] + '/.dnman_history'
        shellac.readline.read_history_file(hist_file)
        atexit.register(shellac.readline.write_history_file, hist_file)
    except (KeyError, IOError):
        pass

    # Create the objconf dict
    objconf = util.LDAPConfig(config)

    with session.BuilderSession(objconf, dn=options.dn) as dnsession:
        shell = shell_factory(dnsession, options, objconf)

        if options.interactive:
            shell.onecmd('help')
            shell.cmdloop()
        else:
            shell.onecmd(' '.join(args))
