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

"""Various test helpers."""

__all__ = [
    'FailingStream',
    'catalog_from_string',
    'scanner_from_string',
    ]


import io

from textwrap import dedent

from poscan.app.catalogs import load_catalog
from poscan.core.scanner import Scanner




def scanner_from_string(text, binary=False):
    """Return a scanner over dedented PO text.

    :param text: The PO text, usually an indented triple quoted string.
    :type text: string
    :param binary: When true, the scanner reads UTF-8 bytes.
    :type binary: bool
    :rtype: `Scanner`
    """
    text = dedent(text)
    if binary:
        return Scanner(io.BytesIO(text.encode('utf-8')))
    return Scanner(io.StringIO(text))


def catalog_from_string(text):
    """Return the catalog read from dedented PO text."""
    return load_catalog(io.StringIO(dedent(text)))




class FailingStream:
    """A stream that fails after returning some lines."""

    def __init__(self, lines, error=None):
        self._lines = list(lines)
        self._error = (error if error is not None
                       else OSError('Input/output error'))

    def readline(self):
        if self._lines:
            return self._lines.pop(0)
        raise self._error
