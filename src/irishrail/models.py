"""Data models for the IrishRail Realtime API."""

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Iterable, List, TypeVar
import xml.etree.ElementTree as ET

from .errors import TransportError

T = TypeVar("T")


def local_name(tag: str) -> str:
    """Strip an ElementTree '{namespace}' prefix from a tag."""
    return tag.rsplit("}", 1)[-1]


class XMLRecord:
    """Mixin that builds a dataclass from one XML element.

    Subclasses set XML_FIELDS to map element names onto dataclass fields.
    """

    XML_FIELDS: Dict[str, str] = {}

    @classmethod
    def from_element(cls, element: ET.Element):
        values = {local_name(child.tag): child.text or "" for child in element}
        types = {f.name: f.type for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for tag, attr in cls.XML_FIELDS.items():
            if tag not in values:
                continue
            text = values[tag]
            kind = types[attr]
            if kind in (int, "int"):
                kwargs[attr] = _to_number(int, text, tag)
            elif kind in (float, "float"):
                kwargs[attr] = _to_number(float, text, tag)
            else:
                kwargs[attr] = text
        return cls(**kwargs)


def _to_number(kind: Callable[[str], Any], text: str, tag: str):
    text = text.strip()
    if not text:
        return kind(0)
    try:
        return kind(text)
    except ValueError as e:
        raise TransportError(f"Invalid value for <{tag}>: {text!r}") from e


@dataclass(frozen=True)
class Station(XMLRecord):
    """Represents an IrishRail station."""
    code: str = ""
    name: str = ""
    alias: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    XML_FIELDS = {
        "StationCode": "code",
        "StationDesc": "name",
        "StationAlias": "alias",
        "StationLatitude": "latitude",
        "StationLongitude": "longitude",
    }


@dataclass(frozen=True)
class Train(XMLRecord):
    """Represents a train position (not all of these have running status)."""
    code: str = ""
    date: str = ""
    direction: str = ""
    status: str = ""
    message: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    XML_FIELDS = {
        "TrainCode": "code",
        "TrainDate": "date",
        "Direction": "direction",
        "TrainStatus": "status",
        "PublicMessage": "message",
        "TrainLatitude": "latitude",
        "TrainLongitude": "longitude",
    }


@dataclass(frozen=True)
class StationDetail(XMLRecord):
    """One stop in a train's itinerary for a given date."""
    station_code: str = ""
    station_name: str = ""
    station_order: int = 0
    station_type: str = ""  # S=Start, T=Timing, O=Other, D=Destination
    origin_name: str = ""
    destination_name: str = ""
    scheduled_arrival_time: str = ""
    scheduled_departure_time: str = ""
    expected_arrival_time: str = ""
    expected_departure_time: str = ""
    arrival_time: str = ""
    departure_time: str = ""
    stop_type: str = ""  # C=Current, N=Next

    XML_FIELDS = {
        "LocationCode": "station_code",
        "LocationFullName": "station_name",
        "LocationOrder": "station_order",
        "LocationType": "station_type",
        "TrainOrigin": "origin_name",
        "TrainDestination": "destination_name",
        "ScheduledArrival": "scheduled_arrival_time",
        "ScheduledDeparture": "scheduled_departure_time",
        "ExpectedArrival": "expected_arrival_time",
        "ExpectedDeparture": "expected_departure_time",
        "Arrival": "arrival_time",
        "Departure": "departure_time",
        "StopType": "stop_type",
    }


@dataclass(frozen=True)
class TrainDetail(XMLRecord):
    """A train's status as seen from one station."""
    train_code: str = ""
    train_date: str = ""
    status: str = ""
    origin_name: str = ""
    origin_time: str = ""
    destination_name: str = ""
    destination_time: str = ""
    last_location: str = ""
    due_in_minutes: int = 0  # <= 0 means arriving now
    late_by_minutes: int = 0  # negative means early
    expected_arrival_time: str = ""
    expected_departure_time: str = ""
    scheduled_arrival_time: str = ""
    scheduled_departure_time: str = ""
    direction: str = ""
    train_type: str = ""
    location_type: str = ""

    XML_FIELDS = {
        "Traincode": "train_code",
        "Traindate": "train_date",
        "Status": "status",
        "Origin": "origin_name",
        "Origintime": "origin_time",
        "Destination": "destination_name",
        "Destinationtime": "destination_time",
        "Lastlocation": "last_location",
        "Duein": "due_in_minutes",
        "Late": "late_by_minutes",
        "Exparrival": "expected_arrival_time",
        "Expdepart": "expected_departure_time",
        "Scharrival": "scheduled_arrival_time",
        "Schdepart": "scheduled_departure_time",
        "Direction": "direction",
        "Traintype": "train_type",
        "Locationtype": "location_type",
    }


def sort_by(records: Iterable[T], key: Callable[[T], Any], reverse: bool = False) -> List[T]:
    """
    Sort records by an arbitrary field.

    Args:
        records: Any sequence of model objects.
        key: Extracts the sort key from one record, e.g. ``lambda td: td.due_in_minutes``.
        reverse: Sort in descending order.

    Returns:
        A new list. Records with equal keys keep their relative order.
    """
    return sorted(records, key=key, reverse=reverse)
