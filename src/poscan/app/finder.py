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

"""Discover the subcommand classes of the poscan command."""

__all__ = [
    'find_components',
    'scan_module',
    ]


import os

from importlib import import_module
from importlib.resources import files




def scan_module(module, interface):
    """Yield the public names of `module` that implement `interface`.

    Only the names listed in the module's `__all__` are considered, and
    every one of them must exist.

    :param module: The module to scan.
    :type module: module
    :param interface: The interface the classes must declare.
    :type interface: `Interface`
    :rtype: iterator of classes
    """
    for name in module.__all__:
        if not hasattr(module, name):
            raise AttributeError(
                '{0} lists a missing name in __all__: {1}'.format(
                    module.__name__, name))
        component = getattr(module, name)
        if interface.implementedBy(component):
            yield component


def find_components(package, interface):
    """Yield the classes implementing `interface` throughout `package`.

    The package's modules are imported in name order, so subcommands are
    discovered the same way on every run.  Subpackages and `__init__` are
    skipped.

    :param package: The dotted name of the package.
    :type package: string
    :param interface: The interface the classes must declare.
    :type interface: `Interface`
    :rtype: iterator of classes
    """
    for resource in sorted(files(package).iterdir(), key=lambda r: r.name):
        basename, extension = os.path.splitext(resource.name)
        if extension != '.py' or basename == '__init__':
            continue
        module = import_module('{0}.{1}'.format(package, basename))
        if hasattr(module, '__all__'):
            yield from scan_module(module, interface)
