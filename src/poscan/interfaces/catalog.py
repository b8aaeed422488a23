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

"""Interfaces for PO messages and catalogs."""

__all__ = [
    'BadPluralExpressionError',
    'CatalogReadError',
    'ICatalog',
    'IMessage',
    'IPluralForms',
    ]


from zope.interface import Interface, Attribute

from poscan.interfaces.errors import POScanError



class CatalogReadError(POScanError):
    """The PO stream could not be read."""


class BadPluralExpressionError(POScanError):
    """A Plural-Forms header could not be understood."""




class IMessage(Interface):
    """One translation record of a PO file."""

    translator_comments = Attribute("Lines of '# ' translator comments.")

    extracted_comments = Attribute("Lines of '#. ' extracted comments.")

    references = Attribute("Source references from the '#: ' lines.")

    flags = Attribute("Flags from the '#, ' line, e.g. 'fuzzy'.")

    previous = Attribute("Raw '#| ' lines describing the previous msgid.")

    msgctxt = Attribute('The message context, or the empty string.')

    msgid = Attribute('The source string.')

    msgid_plural = Attribute('The plural source string, or the empty string.')

    msgstr = Attribute('The list of translated strings.')

    fuzzy = Attribute('True when the message carries the fuzzy flag.')

    is_plural = Attribute('True when the message has a plural source form.')

    is_header = Attribute(
        """True for the catalog header, the translated message with an empty
        msgid and no context.""")

    is_comment_only = Attribute(
        """True for a record without any msgctxt, msgid or msgstr lines.  A
        lone '#' line splits the comments above a message off into such a
        record.""")

    translated = Attribute(
        'True when every translated string is non-empty and not fuzzy.')

    key = Attribute('The (msgctxt, msgid) pair identifying the message.')




class IPluralForms(Interface):
    """The plural selection rule of a catalog."""

    nplurals = Attribute('The number of plural forms.')

    expression = Attribute('The C expression selecting a plural form.')

    def __call__(n):
        """Return the plural form index to use for the count `n`.

        :param n: The count.
        :type n: int
        :return: The msgstr index.
        :rtype: int
        """




class ICatalog(Interface):
    """The messages of a PO file."""

    messages = Attribute('The non-header messages, in file order.')

    header = Attribute('The header message, or None.')

    comments = Attribute('The comment-only records, in file order.')

    headers = Attribute('An ordered dictionary of the header fields.')

    charset = Attribute('The charset named by the Content-Type header.')

    plural_forms = Attribute('The `IPluralForms` of the catalog, or None.')

    def get(msgid, msgctxt=''):
        """Return the message with the given msgid and context.

        :param msgid: The source string.
        :type msgid: string
        :param msgctxt: The message context.
        :type msgctxt: string
        :return: The message, or None if the catalog does not contain it.
        :rtype: `IMessage` or None
        """

    def stats():
        """Count the messages by translation status.

        :return: The number of translated, fuzzy and untranslated messages.
            The header is not counted.
        :rtype: 3-tuple of ints
        """

    def translate(msgid, msgctxt=''):
        """Translate a singular string.

        :param msgid: The source string.
        :type msgid: string
        :param msgctxt: The message context.
        :type msgctxt: string
        :return: The translation, or `msgid` when the message is missing,
            fuzzy or untranslated.
        :rtype: string
        """

    def translate_plural(msgid, msgid_plural, n, msgctxt=''):
        """Translate a string with plural forms.

        :param msgid: The singular source string.
        :type msgid: string
        :param msgid_plural: The plural source string.
        :type msgid_plural: string
        :param n: The count selecting the plural form.
        :type n: int
        :param msgctxt: The message context.
        :type msgctxt: string
        :return: The translation for `n`, or `msgid` when `n` is 1 and
            `msgid_plural` otherwise if no usable translation exists.
        :rtype: string
        """
