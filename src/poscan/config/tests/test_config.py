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

"""Test the configuration system."""

__all__ = [
    'TestConfiguration',
    'TestSearchForConfiguration',
    ]


import os
import shutil
import tempfile
import unittest

from unittest import mock

from zope.interface.verify import verifyObject

from poscan.config import config
from poscan.config.config import Configuration, IConfiguration
from poscan.core.initialize import (
    INHIBIT_CONFIG_FILE, initialize, search_for_configuration_file)
from poscan.testing.helpers import scanner_from_string




class TestConfiguration(unittest.TestCase):
    """Test loading and layering configurations."""

    def setUp(self):
        self.tempdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tempdir)
        config.load()

    def test_verify_interface(self):
        self.assertTrue(verifyObject(IConfiguration, config))

    def test_defaults(self):
        self.assertEqual(config.poscan.default_encoding, 'utf-8')
        self.assertEqual(config.poscan.log_dir, '.')
        self.assertEqual(config.logging.scanner.level, 'error')
        self.assertEqual(config.logging.cli.level, 'warning')
        self.assertIsNone(config.filename)

    def test_logger_configs(self):
        names = sorted(section.name for section in config.logger_configs)
        self.assertEqual(names, [
            'logging.catalog',
            'logging.cli',
            'logging.root',
            'logging.scanner',
            ])

    def test_push_and_pop(self):
        config.push('test config', """\
[poscan]
default_encoding: iso-8859-1
""")
        self.assertEqual(config.poscan.default_encoding, 'iso-8859-1')
        config.pop('test config')
        self.assertEqual(config.poscan.default_encoding, 'utf-8')

    def test_scanner_uses_default_encoding(self):
        config.push('test config', """\
[poscan]
default_encoding: iso-8859-2
""")
        try:
            scanner = scanner_from_string('msgid "a"\n', binary=True)
        finally:
            config.pop('test config')
        self.assertEqual(scanner.encoding, 'iso-8859-2')

    def test_load_user_file(self):
        path = os.path.join(self.tempdir, 'poscan.cfg')
        with open(path, 'w', encoding='utf-8') as fp:
            fp.write('[logging.cli]\nlevel: debug\n')
        configuration = Configuration()
        configuration.load(path)
        self.assertEqual(configuration.filename, path)
        self.assertEqual(configuration.logging.cli.level, 'debug')
        # The in-package defaults are still there.
        self.assertEqual(configuration.logging.scanner.level, 'error')

    def test_private_names_are_not_delegated(self):
        self.assertRaises(AttributeError, getattr, Configuration(), '_missing')

    def test_initialize_inhibits_config_file(self):
        with mock.patch.dict(os.environ,
                             {'POSCAN_CONFIG_FILE': '/does/not/matter'}):
            initialize(INHIBIT_CONFIG_FILE)
        self.assertIsNone(config.filename)




class TestSearchForConfiguration(unittest.TestCase):
    """Test the configuration file search path."""

    def setUp(self):
        self.tempdir = tempfile.mkdtemp()
        self.cwd = os.getcwd()
        os.chdir(self.tempdir)

    def tearDown(self):
        os.chdir(self.cwd)
        shutil.rmtree(self.tempdir)

    def test_environment_variable(self):
        path = os.path.join(self.tempdir, 'site.cfg')
        with open(path, 'w', encoding='utf-8') as fp:
            fp.write('')
        with mock.patch.dict(os.environ, {'POSCAN_CONFIG_FILE': path}):
            self.assertEqual(search_for_configuration_file(), path)

    def test_current_directory(self):
        with open('poscan.cfg', 'w', encoding='utf-8') as fp:
            fp.write('')
        with mock.patch.dict(os.environ, {'POSCAN_CONFIG_FILE': ''}):
            self.assertEqual(search_for_configuration_file(),
                             os.path.abspath('poscan.cfg'))

    def test_missing_environment_file_is_skipped(self):
        with open('poscan.cfg', 'w', encoding='utf-8') as fp:
            fp.write('')
        missing = os.path.join(self.tempdir, 'missing.cfg')
        with mock.patch.dict(os.environ, {'POSCAN_CONFIG_FILE': missing}):
            self.assertEqual(search_for_configuration_file(),
                             os.path.abspath('poscan.cfg'))
