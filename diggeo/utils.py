#! /usr/bin/env python

# This file is part of diggeo.
# Copyright 2025 The diggeo authors
#
# diggeo is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# diggeo is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public
# License for more details.
#
# You should have received a copy of the GNU General Public License
# along with diggeo. If not, see <http://www.gnu.org/licenses/>.


"""This sub-module contains functions that might be useful to any other
sub-module or script.

"""


import logging
import socket
from typing import AnyStr, Set


from diggeo import config


LOGGER = logging.getLogger("diggeo")


logging.basicConfig()


def is_valid_ip(ipstr: AnyStr) -> bool:
    """Return True iff `ipstr` is a valid IP address."""
    if isinstance(ipstr, bytes):
        data = ipstr.decode()
    else:
        data = ipstr
    try:
        socket.inet_aton(data)
    except (socket.error, ValueError):
        pass
    else:
        return True
    try:
        socket.inet_pton(socket.AF_INET6, data)
    except (socket.error, ValueError):
        return False
    return True


class LogFilter(logging.Filter):
    """A logging filter that prevents duplicate warnings and only reports
    messages with level lower than INFO when config.DEBUG is True.

    """

    MAX_WARNINGS_STORED = 100

    def __init__(self) -> None:
        super().__init__()
        self.warnings: Set[str] = set()

    def filter(self, record: logging.LogRecord) -> bool:
        """Decides whether we should log a record"""
        if record.levelno < logging.INFO:
            return config.DEBUG
        if record.levelno != logging.WARNING:
            return True
        msg = record.getMessage()
        if msg in self.warnings:
            return False
        if len(self.warnings) > self.MAX_WARNINGS_STORED:
            self.warnings = set()
        self.warnings.add(msg)
        return True


LOGGER.addFilter(LogFilter())
LOGGER.setLevel(1)
