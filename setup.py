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

import re
import sys

from setuptools import setup, find_packages
from string import Template

if sys.hexversion < 0x30900f0:
    print('poscan requires at least Python 3.9')
    sys.exit(1)


# Calculate the version number without importing the poscan package.
with open('src/poscan/version.py') as fp:
    for line in fp:
        mo = re.match("VERSION = '(?P<version>[^']+?)'", line)
        if mo:
            __version__ = mo.group('version')
            break
    else:
        print('No version number found')
        sys.exit(1)



template = Template('$script = poscan.bin.$script:main')
scripts = set(
    template.substitute(script=script)
    for script in ('poscan',)
    )



setup(
    name            = 'poscan',
    version         = __version__,
    description     = 'poscan -- a line scanner for gettext PO files',
    long_description= """\
poscan reads gettext PO translation files.  A line scanner with one line of
lookahead extracts comments, references, flags and quoted strings record by
record; on top of it, PO files are read into catalogs that answer lookups,
plural form selection and translation statistics.""",
    author          = 'The poscan Developers',
    license         = 'GPLv3',
    keywords        = 'gettext i18n po',
    packages        = find_packages('src'),
    package_dir     = {'': 'src'},
    package_data    = {
        'poscan.config': ['*.cfg'],
        },
    entry_points    = {
        'console_scripts' : list(scripts),
        },
    install_requires = [
        'flufl.enum',
        'flufl.i18n',
        'lazr.config',
        'zope.interface',
        ],
    extras_require  = {
        'test': ['pytest'],
        },
    )
