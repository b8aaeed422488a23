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

"""Interfaces for the PO line scanner."""

__all__ = [
    'IScanner',
    'QuotedStringError',
    'ScannerState',
    ]


from flufl.enum import Enum
from zope.interface import Interface, Attribute

from poscan.interfaces.errors import POScanError



class QuotedStringError(POScanError, ValueError):
    """A PO string literal could not be decoded."""

    def __init__(self, reason, text, lineno=None):
        super().__init__(reason)
        self.reason = reason
        self.text = text
        self.lineno = lineno

    def __str__(self):
        if self.lineno is None:
            return '{0}: {1}'.format(self.reason, self.text)
        return 'line {0}: {1}: {2}'.format(self.lineno, self.reason, self.text)



class ScannerState(Enum):
    """Where the scanner is with respect to the record structure."""
    # Between records, fetching past blank lines.
    skipping = 1
    # Positioned on a line belonging to the current record.
    in_record = 2
    # End of input, or an error was recorded.
    end = 3



class IScanner(Interface):
    """A line scanner over the records of a PO file.

    The scanner holds exactly one line of lookahead.  Every extraction
    method tests the current line against a literal prefix and consumes only
    the lines it recognizes, leaving the first unrecognized line current.
    Extraction never raises; decode and read failures are recorded in
    `error` instead.
    """

    line = Attribute(
        """The current (lookahead) line, without its line terminator.  This
        is the empty string before the first fetch and at end of input.""")

    lineno = Attribute(
        'The 1-based physical line number of `line`; 0 before any fetch.')

    has_more = Attribute(
        'False once the underlying stream is exhausted or failed.')

    state = Attribute('The current `ScannerState`.')

    encoding = Attribute(
        """The encoding of byte lines and of octal and hex byte escapes.  It
        may be changed between records, e.g. once the header names the
        charset of the file.""")

    error = Attribute(
        """The first recorded `QuotedStringError`, or failing that the
        exception raised while reading the stream, or None.  Once set, it is
        never cleared.""")

    def next_record():
        """Advance to the first line of the next record.

        At least one new line is always fetched, then blank lines are
        skipped.  A line is blank when it is one character or less after
        stripping whitespace, so a lone '#' separates records too.

        :return: True when positioned at the start of a record, False at end
            of input or when an error has been recorded.
        :rtype: bool
        """

    def repeated(prefix):
        """Consume every consecutive line starting with `prefix`.

        :param prefix: The literal line prefix, e.g. '#. '.
        :type prefix: string
        :return: The remainder of each matching line, stripped, in order.
        :rtype: list of strings
        """

    def tokens(prefix):
        """Consume one line starting with `prefix`, split on whitespace.

        :param prefix: The literal line prefix, e.g. '#, '.
        :type prefix: string
        :return: The whitespace separated tokens of the remainder, or the
            empty list when the current line does not match.
        :rtype: list of strings
        """

    def single(prefix):
        """Consume one line starting with `prefix`.

        :param prefix: The literal line prefix.
        :type prefix: string
        :return: The stripped remainder, or the empty string when the
            current line does not match.
        :rtype: string
        """

    def quoted(prefix):
        """Consume a quoted field and its continuation lines.

        :param prefix: The literal line prefix, e.g. 'msgid '.
        :type prefix: string
        :return: The decoded value of the first line concatenated with the
            decoded value of every following line that starts with a double
            quote, or the empty string when the current line does not match.
        :rtype: string
        """

    def msgstr():
        """Consume the translation of a record.

        :return: A one element list for the 'msgstr ' form, otherwise the
            values of 'msgstr[0] ', 'msgstr[1] ', ... in order, stopping at
            the first missing index.
        :rtype: list of strings
        """
