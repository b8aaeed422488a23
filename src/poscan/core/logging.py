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

"""Set up the poscan loggers from the [logging.*] configuration sections.

Every section other than `logging.root` configures the logger of the same
sub-name under `poscan.`, e.g. `[logging.scanner]` configures the
`poscan.scanner` logger.  A section with a non-empty `path` also gets a log
file, which can be reopened after log rotation.
"""

__all__ = [
    'ReopenableFileHandler',
    'get_handler',
    'initialize',
    'reopen',
    ]


import os
import sys
import logging

from lazr.config import as_boolean, as_log_level

from poscan.config import config


# Maps logger sub-names to their file handlers.
_handlers = {}




class ReopenableFileHandler(logging.StreamHandler):
    """A UTF-8 log file that can be reopened, possibly under a new name."""

    def __init__(self, name, filename):
        self.filename = filename
        super().__init__(self._open())
        self.name = name

    def _open(self):
        return open(self.filename, 'a', encoding='utf-8')

    def close(self):
        self.acquire()
        try:
            if self.stream is not None:
                self.flush()
                if self.stream is not sys.stderr:
                    self.stream.close()
                self.stream = None
        finally:
            self.release()
        super().close()

    def emit(self, record):
        # Records arriving after close() go to stderr.
        if self.stream is None:
            self.stream = sys.stderr
        super().emit(record)

    def reopen(self, filename=None):
        """Close the log file and open it again.

        :param filename: The new file to log to; by default the current file
            name is opened again.
        :type filename: string
        """
        if filename is not None:
            self.filename = filename
        self.acquire()
        try:
            if self.stream is not None and self.stream is not sys.stderr:
                self.stream.close()
            self.stream = self._open()
        finally:
            self.release()




def _configure(log, sub_name, section, propagate):
    log.propagate = (as_boolean(section.propagate)
                     if propagate is None
                     else propagate)
    log.setLevel(as_log_level(section.level))
    old_handler = _handlers.pop(sub_name, None)
    if old_handler is not None:
        log.removeHandler(old_handler)
        old_handler.close()
    if not section.path:
        return
    log_dir = os.path.expanduser(config.poscan.log_dir)
    filename = os.path.normpath(
        os.path.join(log_dir, os.path.expanduser(section.path)))
    handler = ReopenableFileHandler(sub_name, filename)
    handler.setFormatter(logging.Formatter(fmt=section.format,
                                           datefmt=section.datefmt))
    log.addHandler(handler)
    _handlers[sub_name] = handler


def initialize(propagate=None):
    """Configure the root logger and every poscan logger.

    This may be called again after the configuration changed; file handlers
    from the previous call are closed and replaced.

    :param propagate: Whether the poscan loggers pass their records on to
        the root logger, which writes to stderr.  When None, each logger's
        `propagate` setting decides.
    :type propagate: bool or None
    """
    root = config.logging.root
    logging.basicConfig(format=root.format,
                        datefmt=root.datefmt,
                        level=as_log_level(root.level),
                        stream=sys.stderr)
    for section in config.logger_configs:
        sub_name = section.name.split('.')[-1]
        if sub_name != 'root':
            _configure(logging.getLogger('poscan.' + sub_name),
                       sub_name, section, propagate)


def reopen():
    """Reopen every log file, e.g. after rotation."""
    for handler in _handlers.values():
        handler.reopen()


def get_handler(sub_name):
    """Return the file handler of a poscan logger.

    :param sub_name: The logger name without the 'poscan.' prefix.
    :type sub_name: string
    :rtype: `ReopenableFileHandler`
    :raises KeyError: when the logger has no log file.
    """
    return _handlers[sub_name]
