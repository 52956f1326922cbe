"""Command-line interface: live departure board for one station."""

import argparse
import logging
import sys
from typing import List, Optional

from .client import IrishRailClient
from .config import DEFAULT_OPTIONS, LOCAL_SERVER_OPTIONS, REFRESH_EVERY, ClientOptions
from .dashboard import run_dashboard
from .errors import DisplayInitError, IrishRailError, StationNotFoundError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="irishrail-board",
        description="Live IrishRail departure board for a station (press Esc or q to quit).",
    )
    p.add_argument("station", help="Station name, alias or code (e.g. 'Dun Laoghaire' or DLERY)")
    p.add_argument("--local", action="store_true",
                   help=f"Use the local test server ({LOCAL_SERVER_OPTIONS.url})")
    p.add_argument("--url", help=f"API base URL (default: {DEFAULT_OPTIONS.url})")
    p.add_argument("--timeout", type=float, help="Request timeout in seconds (default: 5, or 1 with --local)")
    p.add_argument("--refresh-every", dest="refresh_every", type=int, default=REFRESH_EVERY,
                   help=f"Seconds between full refreshes (default {REFRESH_EVERY})")
    p.add_argument("--log-file", dest="log_file",
                   help="Write logs to this file instead of stderr (recommended with -v)")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-v info, -vv debug)")
    args = p.parse_args(argv)
    if args.refresh_every < 1:
        p.error("--refresh-every must be at least 1")
    return args


def build_options(args: argparse.Namespace) -> ClientOptions:
    base = LOCAL_SERVER_OPTIONS if args.local else DEFAULT_OPTIONS
    return ClientOptions(
        url=args.url or base.url,
        timeout=args.timeout if args.timeout is not None else base.timeout,
    )


def setup_logging(verbose: int, log_file: Optional[str] = None) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, filename=log_file)


def show_board(client: IrishRailClient, args: argparse.Namespace) -> int:
    """Resolve the station and run the dashboard. Returns the exit status."""
    try:
        station = client.lookup_station(args.station)
    except StationNotFoundError as e:
        print(f"Error looking up station name: {e}", file=sys.stderr)
        return 1
    except IrishRailError as e:
        print(f"Error fetching station list: {e}", file=sys.stderr)
        return 1

    try:
        run_dashboard(client, station, refresh_every=args.refresh_every)
    except DisplayInitError as e:
        print(f"Error displaying UI: {e}", file=sys.stderr)
        return 1
    except IrishRailError as e:
        print(f"Error fetching departures for {station.name}: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    options = build_options(args)
    client = IrishRailClient(options)
    logger.info(f"Using {options.url} (timeout {options.timeout}s)")

    try:
        return show_board(client, args)
    except KeyboardInterrupt:
        return 130
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
