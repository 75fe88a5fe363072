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

"""This sub-module handles configuration values.

It contains the (hard-coded) default values and the reader for the
configuration file, /etc/diggeo.conf (or the file named by the
DIGGEO_CONF environment variable).

The configuration file holds `key = value` lines; everything after a
`#` is a comment. Only the `api_key` entry is used:

    # ipgeolocation.io credentials
    api_key = 0123456789abcdef

"""


import os
from typing import NamedTuple, Optional


# Default values:
DEBUG = False
CONFIG_PATH = os.environ.get("DIGGEO_CONF", "/etc/diggeo.conf")
# Begin provider
API_URL = "https://api.ipgeolocation.io/ipgeo"
# None means no timeout: a stalled request blocks until the server
# gives up.
HTTP_TIMEOUT: Optional[float] = None
UNKNOWN_COUNTRY = "Unknown"
# End provider
# Only used to satisfy getaddrinfo(), stripped from the results
RESOLVE_PORT = 80


class ConfigError(Exception):
    """Base class for configuration loading errors."""


class ConfigUnreadableError(ConfigError):
    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__("Failed to read config %s: %s" % (path, cause))
        self.path = path
        self.cause = cause


class ApiKeyNotFoundError(ConfigError):
    def __init__(self, path: str) -> None:
        super().__init__("api_key not found in config file %s" % path)
        self.path = path


class Config(NamedTuple):
    api_key: str


def read_api_key(path: Optional[str] = None) -> str:
    """Returns the first non-empty `api_key` value found in the
    configuration file `path` (defaults to CONFIG_PATH).

    Raises ConfigUnreadableError when the file cannot be read, and
    ApiKeyNotFoundError when it has no usable `api_key` line.

    """
    if path is None:
        path = CONFIG_PATH
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as fdesc:
            content = fdesc.read()
    except OSError as exc:
        raise ConfigUnreadableError(path, exc) from exc
    # only "\n" ends a line, a trailing "\r" is stripped below
    for line in content.split("\n"):
        line = line.split("#", 1)[0].strip()
        if not line or "=" not in line:
            continue
        key, value = (elt.strip() for elt in line.split("=", 1))
        if key == "api_key" and value:
            return value
    raise ApiKeyNotFoundError(path)


def load_config(path: Optional[str] = None) -> Config:
    return Config(api_key=read_api_key(path))
