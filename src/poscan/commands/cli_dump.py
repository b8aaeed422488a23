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

"""Print the messages of a PO file."""

__all__ = [
    'Dump',
    ]


import sys
import json

from zope.interface import implementer

from poscan.app.catalogs import load_catalog_file
from poscan.core.i18n import _
from poscan.interfaces.command import ICLISubCommand
from poscan.interfaces.errors import POScanError


FIELDS = (
    'translator_comments',
    'extracted_comments',
    'references',
    'flags',
    'previous',
    'msgctxt',
    'msgid',
    'msgid_plural',
    'msgstr',
    )




def message_to_dict(message):
    """Return the fields of a message as a JSON compatible dictionary."""
    return {field: getattr(message, field) for field in FIELDS}




@implementer(ICLISubCommand)
class Dump:
    """Print the messages of a PO file."""

    name = 'dump'

    def add(self, parser, command_parser):
        """See `ICLISubCommand`."""
        self.parser = parser
        command_parser.add_argument(
            '-e', '--encoding',
            help=_("""\
            The encoding of the files.  By default the charset named in each
            file's header is used."""))
        command_parser.add_argument(
            '-j', '--json',
            default=False, action='store_true',
            help=_('Print the messages as a JSON document.'))
        command_parser.add_argument(
            '--header',
            default=False, action='store_true',
            help=_('Include the header message.'))
        command_parser.add_argument(
            'file', metavar='FILE',
            help=_('The PO file to print.'))

    def process(self, args):
        """See `ICLISubCommand`."""
        path = args.file
        try:
            catalog = load_catalog_file(path, args.encoding)
        except (POScanError, OSError) as error:
            self.parser.error(_('Cannot read $path: $error'))
        messages = list(catalog)
        if args.header and catalog.header is not None:
            messages.insert(0, catalog.header)
        if args.json:
            json.dump([message_to_dict(message) for message in messages],
                      sys.stdout, indent=2, sort_keys=True,
                      ensure_ascii=False)
            print()
            return
        for index, message in enumerate(messages):
            if index > 0:
                print()
            for field in FIELDS:
                value = getattr(message, field)
                if value:
                    print('{0}: {1!r}'.format(field, value))
