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


"""Resolve domain names to their (IPv4) addresses."""


import socket
from typing import List, Optional, Set


from diggeo import config, utils


class ResolutionError(Exception):
    def __init__(self, domain: str, cause: Exception) -> None:
        super().__init__(str(cause))
        self.domain = domain
        self.cause = cause


def resolve_domain(domain: str, port: Optional[int] = None) -> List[str]:
    """Returns the IPv4 addresses `domain` resolves to, as dotted-quad
    strings, without duplicates and in no particular order. IPv6
    results are ignored.

    """
    if port is None:
        port = config.RESOLVE_PORT
    try:
        infos = socket.getaddrinfo(domain, port)
    except (OSError, UnicodeError) as exc:
        raise ResolutionError(domain, exc) from exc
    # AF_INET results are canonical dotted-quads: string equality is
    # address equality
    addrs: Set[str] = set()
    for family, _, _, _, sockaddr in infos:
        if family != socket.AF_INET:
            continue
        addrs.add(sockaddr[0])
    utils.LOGGER.debug(
        "%s resolves to %d IPv4 address(es) (%d results)",
        domain,
        len(addrs),
        len(infos),
    )
    return list(addrs)
