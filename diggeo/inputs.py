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


"""Build the list of IP addresses to look up, from a domain name, from
the command line or from a pipe.

"""


from typing import Iterable, List, Optional, TextIO


from diggeo.resolver import resolve_domain


class InputError(Exception):
    """Base class for errors that leave us without addresses to look
    up.

    """


class NoAddressError(InputError):
    def __init__(self, domain: str) -> None:
        super().__init__("No IPv4 addresses found for domain: %s" % domain)
        self.domain = domain


class InputReadError(InputError):
    def __init__(self, cause: Exception) -> None:
        super().__init__("Error reading piped input: %s" % cause)
        self.cause = cause


class NoInputError(InputError):
    def __init__(self) -> None:
        super().__init__("No domain, IP address or piped input")


def read_lines(stdin: Optional[TextIO]) -> List[str]:
    if stdin is None:
        # closed at startup (e.g., `diggeo <&-`)
        raise InputReadError(OSError("standard input is closed"))
    ips = []
    try:
        for line in stdin:
            line = line.strip()
            if line:
                ips.append(line)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(exc) from exc
    return ips


def collect_ips(
    domain: Optional[str],
    ips: Optional[Iterable[str]],
    stdin: Optional[TextIO],
    stdin_is_tty: bool,
) -> List[str]:
    """Returns the addresses to look up, from the first available
    source: `domain` resolution, then `ips`, then `stdin` when it is
    not a terminal. Raises NoInputError when none is available.

    """
    if domain is not None:
        resolved = resolve_domain(domain)
        if not resolved:
            raise NoAddressError(domain)
        return resolved
    if ips:
        return list(ips)
    if not stdin_is_tty:
        return read_lines(stdin)
    raise NoInputError()
