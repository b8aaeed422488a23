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

"""The PO line scanner.

A PO file is a sequence of records separated by blank lines.  The scanner
keeps one line of lookahead and offers one extraction method per kind of
field; the caller calls them in the order the PO grammar dictates.
"""

__all__ = [
    'Scanner',
    ]


import logging

from zope.interface import implementer

from poscan.config import config
from poscan.interfaces.scanner import IScanner, QuotedStringError, ScannerState
from poscan.utilities.string import unquote


QUOTE = '"'

log = logging.getLogger('poscan.scanner')




@implementer(IScanner)
class Scanner:
    """Scan the message fields of a PO file."""

    def __init__(self, fp, encoding=None):
        """Create a scanner.

        :param fp: The stream to read.  Anything with a `readline()` method
            returning text or bytes will do; the scanner only reads forward.
        :param encoding: The encoding of byte lines and byte escapes.
            Defaults to the `default_encoding` configuration setting.
        :type encoding: string
        """
        self._fp = fp
        self.encoding = (encoding
                         if encoding is not None
                         else config.poscan.default_encoding)
        self.line = ''
        self.lineno = 0
        self.has_more = True
        self.state = ScannerState.skipping
        self._decode_error = None
        self._read_error = None

    @property
    def error(self):
        """See `IScanner`."""
        if self._decode_error is not None:
            return self._decode_error
        return self._read_error

    def next_record(self):
        """See `IScanner`."""
        self.state = ScannerState.skipping
        while self.error is None and self._fetch():
            # Skip empty lines and lines that are precisely "#".
            if len(self.line.strip()) > 1:
                self.state = ScannerState.in_record
                return True
        self.state = ScannerState.end
        return False

    def repeated(self, prefix):
        """See `IScanner`."""
        values = []
        while self._matches(prefix):
            values.append(self._text(prefix))
            if not self._fetch():
                break
        return values

    def tokens(self, prefix):
        """See `IScanner`."""
        if not self._matches(prefix):
            return []
        values = self._text(prefix).split()
        self._fetch()
        return values

    def single(self, prefix):
        """See `IScanner`."""
        if not self._matches(prefix):
            return ''
        value = self._text(prefix)
        self._fetch()
        return value

    def quoted(self, prefix):
        """See `IScanner`."""
        if not self._matches(prefix):
            return ''
        value = self._unquote(self._text(prefix))
        # Long strings continue on following lines, each one a complete
        # quoted string of its own.
        while self._fetch():
            if not self.line.startswith(QUOTE):
                break
            value += self._unquote(self.line)
        return value

    def msgstr(self):
        """See `IScanner`."""
        if self._matches('msgstr '):
            return [self.quoted('msgstr ')]
        values = []
        while True:
            prefix = 'msgstr[{0}] '.format(len(values))
            if not self._matches(prefix):
                return values
            values.append(self.quoted(prefix))

    def _fetch(self):
        """Make the next line of the stream current.

        :return: False at end of input, or when reading fails.
        :rtype: bool
        """
        if not self.has_more:
            return False
        try:
            line = self._fp.readline()
            if isinstance(line, bytes):
                line = line.decode(self.encoding)
        except (OSError, LookupError, UnicodeDecodeError, ValueError) as error:
            log.error('Cannot read past line %d: %s', self.lineno, error)
            self._read_error = error
            line = ''
        if not line:
            self.line = ''
            self.has_more = False
            return False
        if line.endswith('\n'):
            line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
        self.line = line
        self.lineno += 1
        return True

    def _matches(self, prefix):
        return self.line.startswith(prefix)

    def _text(self, prefix):
        return self.line[len(prefix):].strip()

    def _unquote(self, text):
        try:
            return unquote(text, self.encoding)
        except QuotedStringError as error:
            error.lineno = self.lineno
            log.error('Malformed string, %s', error)
            # Only the first failure is kept.
            if self._decode_error is None:
                self._decode_error = error
            return ''
