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

"""Configuration file loading and management."""

__all__ = [
    'Configuration',
    'IConfiguration',
    ]


from importlib.resources import files

from lazr.config import ConfigSchema
from zope.interface import Interface, implementer



class IConfiguration(Interface):
    """Marker interface for the global configuration object."""




@implementer(IConfiguration)
class Configuration:
    """The core global configuration object."""

    def __init__(self):
        self._config = None
        self.filename = None

    def __getattr__(self, name):
        """Delegate to the configuration object."""
        # Private names are never delegated.
        if name.startswith('_'):
            raise AttributeError(name)
        return getattr(self._config, name)

    def load(self, filename=None):
        """Load the configuration from the schema and config files.

        :param filename: An optional user configuration file, pushed on top
            of the in-package defaults.
        :type filename: string
        """
        resources = files('poscan.config')
        with (resources / 'schema.cfg').open(encoding='utf-8') as schema_file:
            schema = ConfigSchema('schema.cfg', schema_file)
        # First load the in-package defaults, then push the user's file on
        # top of them.
        with (resources / 'poscan.cfg').open(encoding='utf-8') as config_file:
            self._config = schema.loadFile(config_file, 'poscan.cfg')
        self.filename = None
        if filename is not None:
            self.filename = filename
            with open(filename, encoding='utf-8') as user_config:
                self._config.push(filename, user_config.read())

    def push(self, config_name, config_string):
        """Push a new configuration onto the stack."""
        self._config.push(config_name, config_string)

    def pop(self, config_name):
        """Pop a configuration from the stack."""
        self._config.pop(config_name)

    @property
    def logger_configs(self):
        """Return all log config sections."""
        return self._config.getByCategory('logging', [])
