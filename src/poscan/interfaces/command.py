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

"""The interface of the poscan command's subcommands."""

__all__ = [
    'ICLISubCommand',
    ]


from zope.interface import Interface, Attribute



class ICLISubCommand(Interface):
    """A subcommand of the poscan command.

    Implementations in the poscan.commands package are found and added to
    the command line automatically.
    """

    name = Attribute('The subcommand name, as typed on the command line.')

    __doc__ = Attribute('The one line help shown in the command list.')

    def add(parser, command_parser):
        """Add the subcommand's arguments.

        :param parser: The argument parser.
        :type parser: `argparse.ArgumentParser`
        :param command_parser: The command subparser.
        :type command_parser: `argparse.ArgumentParser`
        """

    def process(args):
        """Run the subcommand.

        :param args: The namespace, as passed in by argparse.
        :type args: `argparse.Namespace`
        """
