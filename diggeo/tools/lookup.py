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


"""Display the country of IP addresses, given as arguments, piped on
the standard input or resolved from a domain name (--dig).

"""


from argparse import ArgumentParser
import os
import sys
from typing import Iterable


import requests


from diggeo import VERSION, config, utils
from diggeo.geolocation import GeolocationError, get_country, new_session
from diggeo.inputs import InputError, NoInputError, collect_ips
from diggeo.resolver import ResolutionError


USAGE = """Usage examples:
  diggeo 8.8.8.8 1.1.1.1
  cat ips.txt | diggeo
  diggeo --dig example.com
"""


def lookup_all(
    cfg: config.Config,
    ips: Iterable[str],
    session: requests.Session,
) -> int:
    """Looks up and prints the country of each IP address, in order.
    Failures are reported on stderr and do not stop the loop.

    Returns the number of failed lookups.

    """
    failures = 0
    for ip in ips:
        if not utils.is_valid_ip(ip):
            utils.LOGGER.debug("%r is not an IP address, sending it as-is", ip)
        try:
            country = get_country(cfg.api_key, ip, session=session)
        except GeolocationError as exc:
            failures += 1
            sys.stderr.write("Error fetching geolocation for %s: %s\n" % (ip, exc))
            continue
        sys.stdout.write("%s:%s\n" % (ip, country))
        sys.stdout.flush()
    return failures


def _stdin_is_tty() -> bool:
    try:
        return os.isatty(sys.stdin.fileno())
    except (AttributeError, OSError, ValueError):
        # no real file descriptor behind stdin
        return False


def main() -> None:
    parser = ArgumentParser(description=__doc__)
    parser.add_argument(
        "--dig",
        metavar="DOMAIN",
        help="Domain name to resolve; look up its IPv4 addresses.",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Configuration file (default: %s)." % config.CONFIG_PATH,
    )
    parser.add_argument("-v", "--verbose", help="verbose mode", action="store_true")
    parser.add_argument(
        "--version", action="version", version="diggeo %s" % VERSION
    )
    parser.add_argument(
        "ips",
        nargs="*",
        metavar="IP",
        help="IP addresses to look up (if not using --dig).",
    )
    args = parser.parse_args()

    if args.verbose:
        config.DEBUG = True

    try:
        cfg = config.load_config(args.config)
    except config.ConfigError as exc:
        sys.stderr.write("Error reading API key: %s\n" % exc)
        sys.exit(1)

    try:
        ips = collect_ips(args.dig, args.ips, sys.stdin, _stdin_is_tty())
    except ResolutionError as exc:
        sys.stderr.write("Failed to resolve domain %s: %s\n" % (exc.domain, exc))
        sys.exit(1)
    except NoInputError:
        sys.stderr.write(USAGE)
        sys.exit(1)
    except InputError as exc:
        sys.stderr.write("%s\n" % exc)
        sys.exit(1)

    with new_session() as session:
        failures = lookup_all(cfg, ips, session)
    if failures:
        utils.LOGGER.debug("%d/%d lookup(s) failed", failures, len(ips))
