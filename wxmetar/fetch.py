"""
Retrieval of raw METAR reports and station details from the aviationweather.gov
data API using the requests library.

https://aviationweather.gov/data/api/
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from .errors import MetarFetchError

logger = logging.getLogger(__name__)

AVIATIONWEATHER_URL = "https://aviationweather.gov/api/data"
DEFAULT_TIMEOUT = 5


def _get(endpoint: str, timeout: float, **params: Any) -> requests.Response:
    url = f"{AVIATIONWEATHER_URL}/{endpoint}"
    logger.debug("GET %s %s", url, params)
    try:
        resp = requests.get(url=url, params=params, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as ex:
        logger.warning("Request to %s failed: %s", url, ex)
        raise MetarFetchError(ex) from None
    return resp


def fetch_metar(station_id: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """
    Returns the latest raw METAR from the given station.

    Raises:
    * MetarFetchError -- The request failed or no report was returned.
    """
    station_id = station_id.strip().upper()
    resp = _get("metar", timeout, ids=station_id, format="raw", taf="false")
    metar_raw = resp.text.strip().upper()
    if len(metar_raw) == 0:
        raise MetarFetchError(f"Could not retrieve data for '{station_id}'.")
    # Several reports may come back, the newest is first
    return metar_raw.splitlines()[0].strip()


def fetch_station_info(
    station_id: str, timeout: float = DEFAULT_TIMEOUT
) -> dict[str, Any]:
    """
    Returns the station details (name, location, elevation) for the given
    station.

    Raises:
    * MetarFetchError -- The request failed or the payload was not understood.
    """
    station_id = station_id.strip().upper()
    resp = _get("stationinfo", timeout, ids=station_id, format="json")
    try:
        jdata = resp.json()
    except ValueError as ex:
        raise MetarFetchError(f"Invalid JSON in response: {ex}") from None
    if isinstance(jdata, list):
        if len(jdata) > 0 and isinstance(jdata[0], dict):
            return jdata[0]
    raise MetarFetchError("Unknown payload data in response.")
