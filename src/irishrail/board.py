"""Departure-board rows for one station, grouped by direction."""

from typing import Iterable, List, Sequence

from .models import TrainDetail

Row = List[str]

HEADER: Row = ["Destination", "Due In", "Delay", "Arrival", "Origin", "Direction", "Status"]


def due_string(td: TrainDetail) -> str:
    """Minutes until arrival, e.g. "Arriving", "1 min", "7 mins"."""
    if td.due_in_minutes <= 0:
        return "Arriving"
    if td.due_in_minutes == 1:
        return "1 min"
    return f"{td.due_in_minutes} mins"


def delay_string(td: TrainDetail) -> str:
    """Deviation from schedule, e.g. "", "1 min late", "3 mins early"."""
    late = td.late_by_minutes
    if late == 0:
        return ""
    if late == 1:
        return "1 min late"
    if late == -1:
        return "1 min early"
    if late > 1:
        return f"{late} mins late"
    return f"{-late} mins early"


def get_directions(details: Iterable[TrainDetail]) -> List[str]:
    """Distinct directions, sorted ascending."""
    return sorted({td.direction for td in details})


def detail_row(td: TrainDetail) -> Row:
    return [
        td.destination_name,
        due_string(td),
        delay_string(td),
        td.expected_arrival_time,
        td.origin_name,
        td.direction,
        td.last_location,
    ]


def project_rows(details: Sequence[TrainDetail]) -> List[Row]:
    """
    Build the table shown on the dashboard.

    Args:
        details: Train details for one station, in API order.

    Returns:
        The header row, then for each direction (sorted) a blank separator
        row followed by that direction's trains in their original order.
    """
    rows: List[Row] = [list(HEADER)]
    for direction in get_directions(details):
        rows.append([""] * len(HEADER))
        rows.extend(detail_row(td) for td in details if td.direction == direction)
    return rows
