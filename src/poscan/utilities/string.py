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

"""String utilities."""

__all__ = [
    'unquote',
    ]


from string import hexdigits, octdigits

from poscan.interfaces.scanner import QuotedStringError


EMPTYSTRING = ''
QUOTE = '"'
BACKSLASH = '\\'

# Single character escapes, mapped to the character they stand for.
ESCAPES = {
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
    '\\': '\\',
    '"': '"',
    }




def _is_number(digits, width, alphabet):
    return len(digits) == width and all(c in alphabet for c in digits)


def _flush_bytes(output, pending, encoding, literal):
    """Decode the pending byte escapes onto the output, then clear them."""
    if not pending:
        return
    try:
        output.append(pending.decode(encoding))
    except UnicodeDecodeError as error:
        raise QuotedStringError(
            'could not decode escaped bytes as ' + encoding, literal
            ) from error
    except LookupError as error:
        raise QuotedStringError('unknown encoding ' + encoding, literal
                                ) from error
    del pending[:]


def unquote(literal, encoding='utf-8'):
    r"""Decode a double quoted C string literal, as found in PO files.

    The literal must begin and end with a double quote, and may not contain
    an unescaped double quote in between.  The recognized escapes are
    \a \b \f \n \r \t \v \\ \", three digit octal escapes, two digit \x
    escapes, and \u or \U followed by four or eight hex digits.  Octal and
    \x escapes stand for bytes; a run of them is decoded with `encoding`.

    :param literal: The quoted literal, including the quotes.
    :type literal: string
    :param encoding: The encoding of the bytes given by octal and \x
        escapes, normally the encoding of the PO file.
    :type encoding: string
    :return: The decoded string.
    :rtype: string
    :raises QuotedStringError: when the literal is malformed.
    """
    if len(literal) < 2 or literal[0] != QUOTE or literal[-1] != QUOTE:
        raise QuotedStringError('string is not quoted', literal)
    body = literal[1:-1]
    output = []
    # Byte escapes waiting to be decoded together.
    pending = bytearray()
    i = 0
    while i < len(body):
        char = body[i]
        if char == QUOTE:
            raise QuotedStringError('unescaped quote in string', literal)
        if char != BACKSLASH:
            _flush_bytes(output, pending, encoding, literal)
            output.append(char)
            i += 1
            continue
        code = body[i + 1:i + 2]
        if code == EMPTYSTRING:
            raise QuotedStringError('string not terminated', literal)
        if code in ESCAPES:
            _flush_bytes(output, pending, encoding, literal)
            output.append(ESCAPES[code])
            i += 2
        elif code in octdigits:
            digits = body[i + 1:i + 4]
            if not _is_number(digits, 3, octdigits) or int(digits, 8) > 0xff:
                raise QuotedStringError(
                    'invalid octal escape \\' + digits, literal)
            pending.append(int(digits, 8))
            i += 4
        elif code == 'x':
            digits = body[i + 2:i + 4]
            if not _is_number(digits, 2, hexdigits):
                raise QuotedStringError(
                    'invalid hex escape \\x' + digits, literal)
            pending.append(int(digits, 16))
            i += 4
        elif code in ('u', 'U'):
            width = (4 if code == 'u' else 8)
            digits = body[i + 2:i + 2 + width]
            if not _is_number(digits, width, hexdigits):
                raise QuotedStringError(
                    'invalid unicode escape \\' + code + digits, literal)
            value = int(digits, 16)
            if 0xd800 <= value <= 0xdfff or value > 0x10ffff:
                raise QuotedStringError(
                    'invalid code point \\' + code + digits, literal)
            _flush_bytes(output, pending, encoding, literal)
            output.append(chr(value))
            i += 2 + width
        else:
            raise QuotedStringError(
                'unknown escape sequence \\' + code, literal)
    _flush_bytes(output, pending, encoding, literal)
    return EMPTYSTRING.join(output)
