"""Example usage of the IrishRail client: running trains and their itineraries."""

import logging
import sys
from pathlib import Path

# Add src to path so we can import irishrail
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from irishrail.client import IrishRailClient
from irishrail.errors import IrishRailError
from irishrail.models import sort_by

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def print_trains(client: IrishRailClient):
    """Print every train currently known to the API, grouped by status."""
    trains = sort_by(client.list_trains(), key=lambda t: (t.status, t.code))
    print(f"\n{'='*70}")
    print(f"{len(trains)} trains")
    print(f"{'='*70}\n")
    for train in trains:
        print(f"  {train.code:6} [{train.status}] {train.direction:12} {train.message}")


def print_itinerary(client: IrishRailClient, train_code: str):
    """
    Print the stops of one running train.

    Args:
        client: Client to query.
        train_code: Train code as shown by print_trains (e.g. "E108").
    """
    trains = [t for t in client.list_trains() if t.code == train_code]
    if not trains:
        print(f"Train {train_code} is not running")
        sys.exit(1)

    train = trains[0]
    stops = sort_by(client.get_station_details(train), key=lambda sd: sd.station_order)
    print(f"\nTrain {train.code} on {train.date}: {train.message}")
    print("-" * 70)
    for stop in stops:
        marker = {"C": "*", "N": ">"}.get(stop.stop_type, " ")
        print(
            f" {marker} {stop.station_order:3d} {stop.station_name:25} "
            f"sched {stop.scheduled_arrival_time or '--':8} "
            f"exp {stop.expected_arrival_time or '--':8} "
            f"act {stop.arrival_time or '--'}"
        )


if __name__ == "__main__":
    client = IrishRailClient()
    try:
        if len(sys.argv) > 1:
            print_itinerary(client, sys.argv[1].strip())
        else:
            print_trains(client)
    except IrishRailError as e:
        logger.error(f"Failed to fetch data: {e}")
        sys.exit(1)
    finally:
        client.close()
