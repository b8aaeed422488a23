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

"""Translation of poscan's own user-facing strings.

`_()` translates a string and then fills in its `$name` placeholders from
the caller's local and global variables.
"""

__all__ = [
    '_',
    'initialize',
    ]


from flufl.i18n import PackageStrategy, registry

import poscan.messages


# Bound by `initialize()`, which runs when the poscan package is imported.
_ = None




def initialize(application=None):
    """Bind `_` to the translations of an application.

    :param application: The `flufl.i18n.Application` to translate with.  By
        default the catalogs in the `poscan.messages` package are
        registered and used.
    :type application: `flufl.i18n.Application`
    """
    global _
    if application is None:
        application = registry.register(
            PackageStrategy('poscan', poscan.messages))
    _ = application._
