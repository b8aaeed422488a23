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

"""Test reading PO files into catalogs."""

__all__ = [
    'TestLoadCatalog',
    'TestReadMessages',
    ]


import io
import os
import shutil
import tempfile
import unittest

from poscan.app.catalogs import (
    load_catalog, load_catalog_file, read_messages)
from poscan.core.scanner import Scanner
from poscan.interfaces.catalog import CatalogReadError
from poscan.interfaces.scanner import QuotedStringError
from poscan.model.message import Message
from poscan.testing.helpers import (
    FailingStream, catalog_from_string, scanner_from_string)


SAMPLE = r"""
# Polish translation of demo.
# Copyright (C) 2026 the demo authors.
#
msgid ""
msgstr ""
"Project-Id-Version: demo 1.0\n"
"Content-Type: text/plain; charset=UTF-8\n"
"Plural-Forms: nplurals=3; plural=(n==1 ? 0 : n%10>=2 && n%10<=4 && "
"(n%100<10 || n%100>=20) ? 1 : 2);\n"

# Shown in the toolbar.
#. TRANSLATORS: keep it short
#: src/window.c:12 src/menu.c:40
#: src/app.c:7
#, fuzzy, c-format
#| msgid "Open %s"
msgctxt "toolbar"
msgid "Open %s"
msgstr "Otwórz %s"

#: src/files.c:3
msgid "%d file"
msgid_plural "%d files"
msgstr[0] "%d plik"
msgstr[1] "%d pliki"
msgstr[2] "%d plików"

msgid ""
"A long message "
"on two lines"
msgstr ""
"Długi komunikat "
"w dwóch liniach"
"""


LATIN_1 = r"""
msgid ""
msgstr "Content-Type: text/plain; charset=ISO-8859-1\n"

msgid "yes"
msgstr "oui, très"

msgid "coffee"
msgstr "caf\351"
"""




class TestReadMessages(unittest.TestCase):
    """Test assembling scanner records into messages."""

    def test_full_record(self):
        messages = list(read_messages(scanner_from_string(SAMPLE)))
        self.assertEqual(len(messages), 5)
        self.assertEqual(messages[2], Message(
            translator_comments=['Shown in the toolbar.'],
            extracted_comments=['TRANSLATORS: keep it short'],
            references=['src/window.c:12', 'src/menu.c:40', 'src/app.c:7'],
            flags=['fuzzy', 'c-format'],
            previous=['msgid "Open %s"'],
            msgctxt='toolbar',
            msgid='Open %s',
            msgstr=['Otwórz %s']))

    def test_header_comments(self):
        messages = list(read_messages(scanner_from_string(SAMPLE)))
        # The lone '#' line separates the comments from the header.
        self.assertEqual(messages[0].translator_comments, [
            'Polish translation of demo.',
            'Copyright (C) 2026 the demo authors.',
            ])
        self.assertTrue(messages[0].is_comment_only)
        self.assertTrue(messages[1].is_header)
        self.assertEqual(messages[1].translator_comments, [])

    def test_plural_record(self):
        messages = list(read_messages(scanner_from_string(SAMPLE)))
        self.assertEqual(messages[3].msgid_plural, '%d files')
        self.assertEqual(messages[3].msgstr,
                         ['%d plik', '%d pliki', '%d plików'])

    def test_multiline_record(self):
        messages = list(read_messages(scanner_from_string(SAMPLE)))
        self.assertEqual(messages[4].msgid, 'A long message on two lines')
        self.assertEqual(messages[4].msgstr,
                         ['Długi komunikat w dwóch liniach'])

    def test_out_of_order_field_is_skipped(self):
        # Flags come after references; a reference after the flags is not
        # consumed, and the next record advance skips it.
        scanner = scanner_from_string("""\
            #, fuzzy
            #: a.c:1
            msgid "x"
            msgstr "y"
            """)
        messages = list(read_messages(scanner))
        self.assertEqual(len(messages), 2)
        self.assertEqual(messages[0].flags, ['fuzzy'])
        self.assertEqual(messages[0].msgid, '')
        self.assertEqual(messages[1].msgid, 'x')
        self.assertEqual(messages[1].references, [])
        self.assertIsNone(scanner.error)

    def test_header_charset_replaces_unknown_encoding(self):
        scanner = Scanner(io.StringIO(LATIN_1), 'bogus')
        messages = list(read_messages(scanner, follow_charset=True))
        self.assertEqual(scanner.encoding, 'iso-8859-1')
        self.assertEqual(messages[2].msgstr, ['café'])
        self.assertIsNone(scanner.error)




class TestLoadCatalog(unittest.TestCase):
    """Test loading catalogs."""

    def setUp(self):
        self.tempdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tempdir)

    def test_catalog(self):
        catalog = catalog_from_string(SAMPLE)
        self.assertEqual(len(catalog), 3)
        self.assertEqual(len(catalog.comments), 1)
        self.assertEqual(catalog.headers['Project-Id-Version'], 'demo 1.0')
        self.assertEqual(catalog.plural_forms.nplurals, 3)
        self.assertEqual(catalog.stats(), (2, 1, 0))
        self.assertEqual(catalog.translate_plural('%d file', '%d files', 4),
                         '%d pliki')
        self.assertEqual(catalog.get('Open %s', 'toolbar').msgstr,
                         ['Otwórz %s'])

    def test_file(self):
        path = os.path.join(self.tempdir, 'pl.po')
        with open(path, 'w', encoding='utf-8') as fp:
            fp.write(SAMPLE)
        catalog = load_catalog_file(path)
        self.assertEqual(len(catalog), 3)
        self.assertEqual(catalog.translate('A long message on two lines'),
                         'Długi komunikat w dwóch liniach')

    def test_file_with_encoding(self):
        path = os.path.join(self.tempdir, 'fr.po')
        with open(path, 'wb') as fp:
            fp.write('msgid "yes"\nmsgstr "oui, très"\n'.encode('iso-8859-1'))
        catalog = load_catalog_file(path, 'iso-8859-1')
        self.assertEqual(catalog.translate('yes'), 'oui, très')

    def test_file_follows_header_charset(self):
        path = os.path.join(self.tempdir, 'fr.po')
        with open(path, 'wb') as fp:
            fp.write(LATIN_1.encode('iso-8859-1'))
        catalog = load_catalog_file(path)
        self.assertEqual(catalog.charset, 'iso-8859-1')
        self.assertEqual(catalog.translate('yes'), 'oui, très')
        self.assertEqual(catalog.translate('coffee'), 'café')

    def test_explicit_encoding_wins_over_header(self):
        stream = io.BytesIO(LATIN_1.encode('iso-8859-1'))
        with self.assertRaises(CatalogReadError) as cm:
            load_catalog(stream, 'utf-8')
        self.assertIsInstance(cm.exception.__cause__, UnicodeDecodeError)

    def test_unknown_header_charset(self):
        catalog = catalog_from_string(r"""
            msgid ""
            msgstr "Content-Type: text/plain; charset=CHARSET\n"

            msgid "caf\303\251"
            msgstr ""
            """)
        self.assertEqual(catalog.charset, 'charset')
        self.assertIn('café', catalog)

    def test_missing_file(self):
        self.assertRaises(OSError, load_catalog_file,
                          os.path.join(self.tempdir, 'missing.po'))

    def test_malformed_string(self):
        with self.assertRaises(QuotedStringError) as cm:
            catalog_from_string(r"""
                msgid "one"
                msgstr "jeden"

                msgid "bad\q"
                msgstr ""
                """)
        self.assertEqual(cm.exception.lineno, 5)

    def test_read_error(self):
        stream = FailingStream(['msgid "a"\n', 'msgstr "b"\n'])
        with self.assertRaises(CatalogReadError) as cm:
            load_catalog(stream)
        self.assertIsInstance(cm.exception.__cause__, OSError)
