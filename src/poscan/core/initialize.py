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

"""Initialize all global state.

The command line entry point calls `initialize()` after argument parsing,
since the configuration file to load may be given on the command line.
Library users only need it to pick up a site configuration file or to set up
the log files; the in-package defaults are loaded on import.
"""

__all__ = [
    'INHIBIT_CONFIG_FILE',
    'initialize',
    'search_for_configuration_file',
    ]


import os

import poscan.core.logging

from poscan.config import config

# The test infrastructure uses this to prevent the search and loading of any
# existing configuration file.  Otherwise the existence of say a
# ~/.poscan.cfg file can break tests.
INHIBIT_CONFIG_FILE = object()




def search_for_configuration_file():
    """Search the file system for a configuration file to use.

    This is only called if the -C command line argument was not given.

    :return: The absolute path of the first configuration file found, or
        None.
    :rtype: string
    """
    candidates = [
        os.getenv('POSCAN_CONFIG_FILE'),
        'poscan.cfg',
        os.path.join(os.path.expanduser('~'), '.poscan.cfg'),
        '/etc/poscan.cfg',
        ]
    for config_path in candidates:
        # Both None and the empty string are considered "missing".
        if config_path and os.path.exists(config_path):
            return os.path.abspath(config_path)
    return None




def initialize(config_path=None, propagate_logs=None):
    """Load the configuration and set up the logs.

    :param config_path: The path to the configuration file, or
        `INHIBIT_CONFIG_FILE` to load only the defaults.  When not given,
        the file system is searched.
    :type config_path: string
    :param propagate_logs: Should the log output propagate to stderr?
    :type propagate_logs: boolean or None
    """
    if config_path is None:
        config_path = search_for_configuration_file()
    elif config_path is INHIBIT_CONFIG_FILE:
        config_path = None
    config.load(config_path)
    poscan.core.logging.initialize(propagate_logs)
