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

"""Test the subcommand finder."""

__all__ = [
    'TestFinder',
    ]


import types
import unittest

from poscan.app.finder import find_components, scan_module
from poscan.interfaces.command import ICLISubCommand




class TestFinder(unittest.TestCase):
    """Test finding interface implementations in packages."""

    def test_find_subcommands(self):
        names = [component.name
                 for component in find_components(
                     'poscan.commands', ICLISubCommand)]
        self.assertEqual(names, ['check', 'dump', 'stats', 'version'])

    def test_bad_all(self):
        module = types.ModuleType('broken')
        module.__all__ = ['missing']
        self.assertRaises(AttributeError, list,
                          scan_module(module, ICLISubCommand))

    def test_only_implementers(self):
        module = types.ModuleType('plain')
        module.__all__ = ['Plain']
        module.Plain = type('Plain', (), {})
        self.assertEqual(list(scan_module(module, ICLISubCommand)), [])
