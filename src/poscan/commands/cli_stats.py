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

"""Translation statistics."""

__all__ = [
    'Stats',
    ]


import sys

from zope.interface import implementer

from poscan.app.catalogs import load_catalog_file
from poscan.core.i18n import _
from poscan.interfaces.command import ICLISubCommand
from poscan.interfaces.errors import POScanError




@implementer(ICLISubCommand)
class Stats:
    """Count the translated, fuzzy and untranslated messages."""

    name = 'stats'

    def add(self, parser, command_parser):
        """See `ICLISubCommand`."""
        self.parser = parser
        command_parser.add_argument(
            '-e', '--encoding',
            help=_("""\
            The encoding of the files.  By default the charset named in each
            file's header is used."""))
        command_parser.add_argument(
            '-o', '--output',
            action='store', help=_("""\
            File to send the output to.  If not given, standard output is
            used."""))
        command_parser.add_argument(
            'files', metavar='FILE', nargs='+',
            help=_('The PO files to count.'))

    def process(self, args):
        """See `ICLISubCommand`."""
        if args.output is None:
            self._print_stats(args.files, args.encoding, sys.stdout)
        else:
            with open(args.output, 'w', encoding='utf-8') as output:
                self._print_stats(args.files, args.encoding, output)

    def _print_stats(self, paths, encoding, output):
        for path in paths:
            try:
                catalog = load_catalog_file(path, encoding)
            except (POScanError, OSError) as error:
                self.parser.error(_('Cannot read $path: $error'))
            translated, fuzzy, untranslated = catalog.stats()
            print(_('$path: $translated translated, $fuzzy fuzzy, '
                    '$untranslated untranslated'), file=output)
