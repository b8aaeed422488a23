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

"""Check that PO files can be scanned."""

__all__ = [
    'Check',
    ]


import sys
import logging

from zope.interface import implementer

from poscan.app.catalogs import load_catalog_file
from poscan.core.i18n import _
from poscan.interfaces.command import ICLISubCommand
from poscan.interfaces.errors import POScanError
from poscan.interfaces.scanner import QuotedStringError


log = logging.getLogger('poscan.cli')




@implementer(ICLISubCommand)
class Check:
    """Check that PO files can be scanned."""

    name = 'check'

    def add(self, parser, command_parser):
        """See `ICLISubCommand`."""
        self.parser = parser
        command_parser.add_argument(
            '-e', '--encoding',
            help=_("""\
            The encoding of the files.  By default the charset named in each
            file's header is used."""))
        command_parser.add_argument(
            '-q', '--quiet',
            default=False, action='store_true',
            help=_('Only report the files with errors.'))
        command_parser.add_argument(
            'files', metavar='FILE', nargs='+',
            help=_('The PO files to check.'))

    def process(self, args):
        """See `ICLISubCommand`."""
        failures = 0
        for path in args.files:
            try:
                load_catalog_file(path, args.encoding)
            except QuotedStringError as error:
                failures += 1
                print('{0}:{1}: {2}: {3}'.format(
                    path, error.lineno, error.reason, error.text))
            except (POScanError, OSError) as error:
                failures += 1
                print('{0}: {1}'.format(path, error))
            else:
                if not args.quiet:
                    print(_('$path: ok'))
        log.info('Checked %d files, %d failed', len(args.files), failures)
        if failures > 0:
            sys.exit(1)
