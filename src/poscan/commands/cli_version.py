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

"""Print the poscan version."""

__all__ = [
    'Version',
    ]


import sys

from zope.interface import implementer

from poscan.core.i18n import _
from poscan.interfaces.command import ICLISubCommand
from poscan.version import POSCAN_VERSION_FULL




@implementer(ICLISubCommand)
class Version:
    """Print the poscan version."""

    name = 'version'

    def add(self, parser, command_parser):
        """See `ICLISubCommand`."""
        command_parser.add_argument(
            '--python',
            default=False, action='store_true',
            help=_('Also print the version of the Python interpreter.'))

    def process(self, args):
        """See `ICLISubCommand`."""
        print(POSCAN_VERSION_FULL)
        if args.python:
            python = sys.version.split()[0]
            print(_('Python $python'))
