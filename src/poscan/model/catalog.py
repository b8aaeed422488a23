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

"""PO catalogs and their plural forms."""

__all__ = [
    'Catalog',
    'PluralForms',
    'parse_charset',
    'parse_headers',
    ]


import re
import gettext

from zope.interface import implementer

from poscan.interfaces.catalog import (
    BadPluralExpressionError, ICatalog, IPluralForms)


NL = '\n'
DEFAULT_CHARSET = 'utf-8'

# The characters GNU gettext allows in a plural expression.
PLURAL_CHARACTERS = re.compile(r'^[0-9 \t()n|&?:!=<>+%*/-]*$')
# The longest expressions found in the wild are around 120 characters.
MAX_PLURAL_LENGTH = 500

CHARSET_RE = re.compile(r'charset\s*=\s*([^\s;]+)', re.IGNORECASE)




def parse_headers(text):
    """Parse the header fields stored in the msgstr of the header message.

    :param text: 'Key: value' lines separated by newlines.
    :type text: string
    :return: The header fields, in file order.  Lines without a colon are
        ignored.
    :rtype: dict
    """
    headers = {}
    for line in text.split(NL):
        key, colon, value = line.partition(':')
        if colon and key.strip():
            headers[key.strip()] = value.strip()
    return headers


def parse_charset(headers):
    """Return the charset named by the Content-Type header field.

    :param headers: The header fields, as returned by `parse_headers()`.
    :type headers: dict
    :return: The lower-cased charset, or None when there is none.
    :rtype: string
    """
    mo = CHARSET_RE.search(headers.get('Content-Type', ''))
    return (mo.group(1).lower() if mo else None)




@implementer(IPluralForms)
class PluralForms:
    """A plural selection rule, as given by the Plural-Forms header."""

    def __init__(self, nplurals, expression):
        """Compile a plural rule.

        :param nplurals: The number of plural forms.
        :type nplurals: int
        :param expression: The C expression selecting a form for `n`.
        :type expression: string
        :raises BadPluralExpressionError: when the expression is unusable.
        """
        if nplurals < 1:
            raise BadPluralExpressionError(
                'nplurals must be positive: {0}'.format(nplurals))
        if (len(expression) > MAX_PLURAL_LENGTH
                or '**' in expression
                or PLURAL_CHARACTERS.match(expression) is None):
            raise BadPluralExpressionError(
                'Bad plural expression: {0}'.format(expression))
        try:
            self._function = gettext.c2py(expression)
        except (ValueError, SyntaxError, RecursionError) as error:
            raise BadPluralExpressionError(
                'Bad plural expression: {0}'.format(expression)) from error
        self.nplurals = nplurals
        self.expression = expression

    @classmethod
    def parse(cls, text):
        """Parse the value of a Plural-Forms header.

        :param text: e.g. 'nplurals=2; plural=(n != 1);'
        :type text: string
        :return: The plural rule.
        :rtype: `PluralForms`
        :raises BadPluralExpressionError: when the header is malformed.
        """
        assignments = {}
        for assignment in text.split(';'):
            name, equals, value = assignment.partition('=')
            if equals:
                assignments[name.strip()] = value.strip()
        if 'nplurals' not in assignments or 'plural' not in assignments:
            raise BadPluralExpressionError(
                'Incomplete Plural-Forms header: {0}'.format(text))
        try:
            nplurals = int(assignments['nplurals'])
        except ValueError:
            raise BadPluralExpressionError(
                'Bad nplurals: {0}'.format(assignments['nplurals']))
        return cls(nplurals, assignments['plural'])

    def __call__(self, n):
        """See `IPluralForms`."""
        return int(self._function(n))

    def __repr__(self):
        return ('<PluralForms nplurals={0.nplurals}; '
                'plural={0.expression}>').format(self)




@implementer(ICatalog)
class Catalog:
    """The messages of one PO file."""

    def __init__(self, messages=()):
        """Collect messages into a catalog.

        The first header message is taken out of the message list; its
        translation provides the header fields.  Comment-only records are
        kept apart in `comments`.

        :param messages: The messages, in file order.
        :type messages: iterable of `IMessage`
        """
        self.header = None
        self.messages = []
        self.comments = []
        for message in messages:
            if message.is_comment_only:
                self.comments.append(message)
            elif self.header is None and message.is_header:
                self.header = message
            else:
                self.messages.append(message)
        self._index = {}
        for message in self.messages:
            self._index.setdefault(message.key, message)
        if self.header is not None and len(self.header.msgstr) > 0:
            self.headers = parse_headers(self.header.msgstr[0])
        else:
            self.headers = {}
        self.charset = parse_charset(self.headers) or DEFAULT_CHARSET
        plural_header = self.headers.get('Plural-Forms')
        self.plural_forms = (PluralForms.parse(plural_header)
                             if plural_header
                             else None)

    def __len__(self):
        return len(self.messages)

    def __iter__(self):
        return iter(self.messages)

    def __contains__(self, key):
        if isinstance(key, str):
            key = ('', key)
        return key in self._index

    def get(self, msgid, msgctxt=''):
        """See `ICatalog`."""
        return self._index.get((msgctxt, msgid))

    def stats(self):
        """See `ICatalog`."""
        translated = fuzzy = untranslated = 0
        for message in self.messages:
            if len(message.msgstr) == 0 or not all(message.msgstr):
                untranslated += 1
            elif message.fuzzy:
                fuzzy += 1
            else:
                translated += 1
        return (translated, fuzzy, untranslated)

    def translate(self, msgid, msgctxt=''):
        """See `ICatalog`."""
        message = self.get(msgid, msgctxt)
        if message is None or not message.translated:
            return msgid
        return message.msgstr[0]

    def translate_plural(self, msgid, msgid_plural, n, msgctxt=''):
        """See `ICatalog`."""
        # Without a rule, fall back to the germanic plural.
        if self.plural_forms is None:
            index = (0 if n == 1 else 1)
        else:
            index = self.plural_forms(n)
        message = self.get(msgid, msgctxt)
        if (message is None
                or message.fuzzy
                or not 0 <= index < len(message.msgstr)
                or message.msgstr[index] == ''):
            return (msgid if n == 1 else msgid_plural)
        return message.msgstr[index]

    def __repr__(self):
        return '<Catalog {0} messages, charset {1}>'.format(
            len(self.messages), self.charset)
