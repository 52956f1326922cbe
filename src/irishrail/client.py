"""IrishRail Realtime API fetcher and parser.

API documentation: http://api.irishrail.ie/realtime/
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Sequence, Type
import xml.etree.ElementTree as ET

import requests

from .config import DEFAULT_OPTIONS, ClientOptions
from .errors import TransportError
from .models import Station, StationDetail, Train, TrainDetail, XMLRecord, local_name
from .resolver import find_station
from .sanitize import (
    sanitize_station,
    sanitize_station_detail,
    sanitize_train,
    sanitize_train_detail,
)

logger = logging.getLogger(__name__)


class Client(ABC):
    """Access to the realtime API, independent of transport."""

    @abstractmethod
    def list_stations(self) -> List[Station]:
        """A list of all stations."""

    @abstractmethod
    def list_trains(self) -> List[Train]:
        """A list of trains (not all of these have running status)."""

    @abstractmethod
    def get_station_details(self, train: Train) -> List[StationDetail]:
        """A list of station details (itinerary stops) for a given train."""

    @abstractmethod
    def get_train_details(self, station: Station) -> List[TrainDetail]:
        """A list of train details for a given station."""

    def lookup_station(self, name: str) -> Station:
        """
        Look up a station by name, alias or code.

        Args:
            name: Free-text station name (e.g. "Dun Laoghaire" or "DLERY").

        Returns:
            Station object.

        Raises:
            StationNotFoundError: If no station matches.
            TransportError: If the station list could not be fetched.
        """
        return find_station(self.list_stations(), name)


class IrishRailClient(Client):
    """Fetches and parses IrishRail XML over HTTP."""

    def __init__(self, options: ClientOptions = DEFAULT_OPTIONS, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            options: Base URL and request timeout.
            session: Optional requests session to reuse.
        """
        self.base_url = options.url.rstrip("/")
        self.timeout = options.timeout
        self._session = session or requests.Session()

    def list_stations(self) -> List[Station]:
        """
        Fetch every station.

        Returns:
            List of Station objects with trimmed codes, in API order.

        Raises:
            TransportError: On network/HTTP failure or malformed XML.
        """
        stations = self._get_records("/getAllStationsXML", "ArrayOfObjStation", "objStation", Station)
        return [sanitize_station(s) for s in stations]

    def list_trains(self) -> List[Train]:
        """
        Fetch the current position of every train.

        Returns:
            List of Train objects. Public messages are flattened onto one line.

        Raises:
            TransportError: On network/HTTP failure or malformed XML.
        """
        trains = self._get_records("/getCurrentTrainsXML", "ArrayOfObjTrainPositions", "objTrainPositions", Train)
        return [sanitize_train(t) for t in trains]

    def get_station_details(self, train: Train) -> List[StationDetail]:
        """
        Fetch the itinerary of one train.

        Args:
            train: Train object (from list_trains()); its code and date are sent.

        Returns:
            List of StationDetail objects, one per stop.

        Raises:
            TransportError: On network/HTTP failure or malformed XML.
        """
        details = self._get_records(
            "/getTrainMovementsXML",
            "ArrayOfObjTrainMovements",
            "objTrainMovements",
            StationDetail,
            params={"TrainId": train.code, "TrainDate": train.date},
        )
        return [sanitize_station_detail(sd) for sd in details]

    def get_train_details(self, station: Station) -> List[TrainDetail]:
        """
        Fetch the trains due at one station.

        Args:
            station: Station object (from list_stations() or lookup_station()).

        Returns:
            List of TrainDetail objects, in API order.

        Raises:
            TransportError: On network/HTTP failure or malformed XML.
        """
        details = self._get_records(
            "/getStationDataByCodeXML",
            "ArrayOfObjStationData",
            "objStationData",
            TrainDetail,
            params={"StationCode": station.code},
        )
        return [sanitize_train_detail(td) for td in details]

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()

    def _get_xml(self, path: str, params: Optional[Dict[str, str]] = None) -> ET.Element:
        """
        Fetch a path relative to the base URL and parse the body.

        Raises:
            TransportError: On network/HTTP failure or malformed XML.
        """
        url = self.base_url + path
        logger.debug(f"Fetching {url} params={params}")
        try:
            response = self._session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return ET.fromstring(response.content)
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise TransportError(f"Failed to fetch {url}: {e}") from e
        except ET.ParseError as e:
            logger.error(f"Failed to parse XML from {url}: {e}")
            raise TransportError(f"Malformed XML from {url}: {e}") from e

    def _get_records(
        self,
        path: str,
        root_name: str,
        item_name: str,
        record_type: Type[XMLRecord],
        params: Optional[Dict[str, str]] = None,
    ) -> list:
        root = self._get_xml(path, params)
        if local_name(root.tag) != root_name:
            raise TransportError(f"Expected <{root_name}> from {path}, got <{local_name(root.tag)}>")
        records = [record_type.from_element(e) for e in root if local_name(e.tag) == item_name]
        logger.debug(f"Parsed {len(records)} {item_name} records from {path}")
        return records


class InMemoryClient(Client):
    """Serves fixed data without network access (tests and offline demos)."""

    def __init__(
        self,
        stations: Sequence[Station] = (),
        trains: Sequence[Train] = (),
        station_details: Optional[Dict[str, List[StationDetail]]] = None,
        train_details: Optional[Dict[str, List[TrainDetail]]] = None,
    ):
        """
        Args:
            stations: Stations returned by list_stations().
            trains: Trains returned by list_trains().
            station_details: Itineraries keyed by train code.
            train_details: Station data keyed by station code.
        """
        self.stations = list(stations)
        self.trains = list(trains)
        self.station_details = station_details or {}
        self.train_details = train_details or {}

    def list_stations(self) -> List[Station]:
        return _sanitized(self.stations, sanitize_station)

    def list_trains(self) -> List[Train]:
        return _sanitized(self.trains, sanitize_train)

    def get_station_details(self, train: Train) -> List[StationDetail]:
        return _sanitized(self.station_details.get(train.code.strip(), []), sanitize_station_detail)

    def get_train_details(self, station: Station) -> List[TrainDetail]:
        return _sanitized(self.train_details.get(station.code.strip(), []), sanitize_train_detail)


def _sanitized(records: Sequence, sanitize: Callable) -> list:
    return [sanitize(r) for r in records]
