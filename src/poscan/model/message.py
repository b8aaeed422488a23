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

"""PO messages."""

__all__ = [
    'Message',
    ]


from zope.interface import implementer

from poscan.interfaces.catalog import IMessage



@implementer(IMessage)
class Message:
    """One translation record."""

    def __init__(self, translator_comments=(), extracted_comments=(),
                 references=(), flags=(), previous=(),
                 msgctxt='', msgid='', msgid_plural='', msgstr=()):
        self.translator_comments = list(translator_comments)
        self.extracted_comments = list(extracted_comments)
        self.references = list(references)
        self.flags = list(flags)
        self.previous = list(previous)
        self.msgctxt = msgctxt
        self.msgid = msgid
        self.msgid_plural = msgid_plural
        self.msgstr = list(msgstr)

    @property
    def fuzzy(self):
        """See `IMessage`."""
        return 'fuzzy' in self.flags

    @property
    def is_plural(self):
        """See `IMessage`."""
        return self.msgid_plural != ''

    @property
    def is_header(self):
        """See `IMessage`."""
        return (self.msgid == ''
                and self.msgctxt == ''
                and len(self.msgstr) > 0)

    @property
    def is_comment_only(self):
        """See `IMessage`."""
        return (self.msgid == ''
                and self.msgctxt == ''
                and self.msgid_plural == ''
                and len(self.msgstr) == 0)

    @property
    def translated(self):
        """See `IMessage`."""
        return (not self.fuzzy
                and len(self.msgstr) > 0
                and all(self.msgstr))

    @property
    def key(self):
        """See `IMessage`."""
        return (self.msgctxt, self.msgid)

    def _fields(self):
        return (self.translator_comments, self.extracted_comments,
                self.references, self.flags, self.previous,
                self.msgctxt, self.msgid, self.msgid_plural, self.msgstr)

    def __eq__(self, other):
        if not isinstance(other, Message):
            return NotImplemented
        return self._fields() == other._fields()

    def __repr__(self):
        """repr(a_message)"""
        if self.msgctxt:
            return ('<Message {0.msgctxt!r}|{0.msgid!r}: '
                    '{0.msgstr!r}>').format(self)
        return '<Message {0.msgid!r}: {0.msgstr!r}>'.format(self)
