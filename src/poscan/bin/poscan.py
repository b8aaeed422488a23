# Copyright (C) 2026 by the poscan developers.
#
# This file is part of poscan.
#
# poscan is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option)
# any later version.
#
# poscan is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for
# more details.
#
# You should have received a copy of the GNU General Public License along with
# poscan.  If not, see <http://www.gnu.org/licenses/>.

"""The 'poscan' command."""

__all__ = [
    'main',
    ]


import os
import argparse

from zope.interface.verify import verifyObject

from poscan.app.finder import find_components
from poscan.core.i18n import _
from poscan.core.initialize import initialize
from poscan.interfaces.command import ICLISubCommand
from poscan.version import POSCAN_VERSION_FULL




def _subcommands():
    commands = []
    for command_class in find_components('poscan.commands', ICLISubCommand):
        command = command_class()
        verifyObject(ICLISubCommand, command)
        commands.append(command)
    return sorted(commands, key=lambda command: command.name)


def make_parser():
    """Build the argument parser, with one subparser per subcommand.

    :rtype: `argparse.ArgumentParser`
    """
    parser = argparse.ArgumentParser(
        prog='poscan',
        description=_("""\
        Scan and inspect gettext PO translation files.
        """),
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        '-v', '--version',
        action='version', version=POSCAN_VERSION_FULL,
        help=_('Print the poscan version and exit'))
    parser.add_argument(
        '-C', '--config',
        help=_("""\
        The configuration file to use.  When omitted, the file named by
        $$POSCAN_CONFIG_FILE is used, then poscan.cfg in the current
        directory, ~/.poscan.cfg and /etc/poscan.cfg."""))
    subparser = parser.add_subparsers(title='Commands')
    for command in _subcommands():
        command_parser = subparser.add_parser(
            command.name, help=_(command.__doc__))
        command.add(parser, command_parser)
        command_parser.set_defaults(func=command.process)
    return parser


def main(argv=None):
    """bin/poscan"""
    parser = make_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, 'func'):
        parser.print_help()
        parser.exit()
    # The subcommands read PO files, so the configuration and the logs must
    # be set up first.
    config_file = None
    if args.config is not None:
        config_file = os.path.abspath(os.path.expanduser(args.config))
    initialize(config_file)
    args.func(args)
