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

"""Reading PO files into catalogs."""

__all__ = [
    'load_catalog',
    'load_catalog_file',
    'read_messages',
    ]


import codecs
import logging

from poscan.core.scanner import Scanner
from poscan.interfaces.catalog import CatalogReadError
from poscan.interfaces.scanner import QuotedStringError
from poscan.model.catalog import Catalog, parse_charset, parse_headers
from poscan.model.message import Message


log = logging.getLogger('poscan.catalog')




def read_messages(scanner, follow_charset=False):
    """Assemble the records of a scanner into messages.

    :param scanner: The scanner to drive, positioned before a record.
    :type scanner: `IScanner`
    :param follow_charset: When true, the scanner switches to the charset
        named by the first header message for the records after it.
    :type follow_charset: bool
    :return: The messages, in file order.  The scanner's `error` must be
        checked once the iteration is finished.
    :rtype: iterator of `Message`
    """
    while scanner.next_record():
        # The order of these calls is the order of the fields in a record.
        translator_comments = scanner.repeated('# ')
        extracted_comments = scanner.repeated('#. ')
        references = [
            reference
            for line in scanner.repeated('#: ')
            for reference in line.split()
            ]
        flags = [
            flag for flag in
            (token.rstrip(',') for token in scanner.tokens('#, '))
            if flag
            ]
        previous = scanner.repeated('#| ')
        msgctxt = scanner.quoted('msgctxt ')
        msgid = scanner.quoted('msgid ')
        msgid_plural = scanner.quoted('msgid_plural ')
        msgstr = scanner.msgstr()
        message = Message(
            translator_comments=translator_comments,
            extracted_comments=extracted_comments,
            references=references,
            flags=flags,
            previous=previous,
            msgctxt=msgctxt,
            msgid=msgid,
            msgid_plural=msgid_plural,
            msgstr=msgstr)
        if follow_charset and message.is_header:
            _switch_charset(scanner, message)
            follow_charset = False
        yield message


def _switch_charset(scanner, header):
    charset = parse_charset(parse_headers(header.msgstr[0]))
    if charset is None:
        return
    try:
        codec = codecs.lookup(charset)
    except LookupError:
        log.warning('Unknown charset %s, reading on as %s',
                    charset, scanner.encoding)
        return
    try:
        if codec.name == codecs.lookup(scanner.encoding).name:
            return
    except LookupError:
        # The earlier encoding was bogus; the header charset replaces it.
        pass
    log.debug('Switching from %s to charset %s', scanner.encoding, charset)
    scanner.encoding = charset


def load_catalog(fp, encoding=None):
    """Read a PO file into a catalog.

    :param fp: The stream to read, in text or binary mode.
    :param encoding: The encoding of a binary stream and of byte escapes.
        When not given, the `default_encoding` configuration setting is
        used up to the header, and the charset the header names after it.
    :type encoding: string
    :return: The catalog.
    :rtype: `Catalog`
    :raises QuotedStringError: for the first malformed string in the file.
    :raises CatalogReadError: when the stream cannot be read.
    :raises BadPluralExpressionError: when the Plural-Forms header is bad.
    """
    scanner = Scanner(fp, encoding)
    messages = list(read_messages(scanner, follow_charset=encoding is None))
    error = scanner.error
    if isinstance(error, QuotedStringError):
        raise error
    if error is not None:
        raise CatalogReadError(
            'Cannot read past line {0}: {1}'.format(scanner.lineno, error)
            ) from error
    log.debug('Read %d messages', len(messages))
    return Catalog(messages)


def load_catalog_file(path, encoding=None):
    """Read the PO file at `path` into a catalog.

    :param path: The file system path of the PO file.
    :type path: string
    :param encoding: See `load_catalog()`.
    :return: The catalog.
    :rtype: `Catalog`
    """
    log.debug('Loading %s', path)
    with open(path, 'rb') as fp:
        return load_catalog(fp, encoding)
