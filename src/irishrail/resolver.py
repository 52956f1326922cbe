"""Station lookup by free-text name, alias or code."""

import logging
from typing import Iterable

from .errors import StationNotFoundError
from .models import Station
from .sanitize import normalize

logger = logging.getLogger(__name__)


def find_station(stations: Iterable[Station], query: str) -> Station:
    """
    Find the station a user meant by name, alias or code.

    Matching ignores case, whitespace, digits and punctuation, so
    "dun laoghaire", "DUNLAOGHAIRE" and "Dun-Laoghaire" are all equal. A
    query with no letters (e.g. "123") normalizes to "" and therefore
    matches the first station with a blank name, alias or code.

    Args:
        stations: Candidate stations, in the order returned by the API.
        query: Free-text station name, alias or code (e.g. "Connolly" or "CNLY").

    Returns:
        The first matching Station in list order.

    Raises:
        StationNotFoundError: If nothing matches.
    """
    wanted = normalize(query)
    for station in stations:
        if wanted in (normalize(station.name), normalize(station.alias), normalize(station.code)):
            logger.debug(f"Resolved '{query}' to {station.code} ({station.name})")
            return station
    raise StationNotFoundError(query)
