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

"""This sub-module contains the client for the ipgeolocation.io API.

Only the `country_name` field of the answer is used; any other field
is ignored, and a missing or malformed `country_name` is reported as
config.UNKNOWN_COUNTRY rather than as an error.

"""


from typing import Any, Optional, TypedDict


import requests


from diggeo import VERSION, config, utils


class GeoResponse(TypedDict, total=False):
    country_name: str
    # set by the provider on errors (bad API key, quota, bogus IP)
    message: str


class GeolocationError(Exception):
    def __init__(self, ip: str, cause: Exception) -> None:
        super().__init__(str(cause))
        self.ip = ip
        self.cause = cause


def new_session() -> requests.Session:
    session = requests.Session()
    session.headers["User-Agent"] = "diggeo/%s" % VERSION
    return session


def country_from_response(data: Any) -> str:
    """Returns the country name from a decoded answer, or
    config.UNKNOWN_COUNTRY when there is none.

    """
    if not isinstance(data, dict):
        return config.UNKNOWN_COUNTRY
    country = data.get("country_name")
    if isinstance(country, str):
        return country
    return config.UNKNOWN_COUNTRY


def get_country(
    api_key: str, ip: str, session: Optional[requests.Session] = None
) -> str:
    """Queries the API for `ip` (passed as-is, so a host name works
    too) and returns the country name.

    Raises GeolocationError on network or JSON decoding failures.

    """
    if session is None:
        with new_session() as own_session:
            return get_country(api_key, ip, session=own_session)
    utils.LOGGER.debug("GET %s ip=%s", config.API_URL, ip)
    try:
        resp = session.get(
            config.API_URL,
            params={"apiKey": api_key, "ip": ip},
            timeout=config.HTTP_TIMEOUT,
        )
        data: GeoResponse = resp.json()
    except (requests.RequestException, ValueError) as exc:
        raise GeolocationError(ip, exc) from exc
    if not resp.ok:
        message = data.get("message") if isinstance(data, dict) else None
        utils.LOGGER.warning(
            "API answered HTTP %d: %s", resp.status_code, message or resp.reason
        )
    return country_from_response(data)
