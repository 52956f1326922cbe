"""irishrail - IrishRail Realtime API client and terminal departure board."""

__version__ = "0.1.0"

from .models import Station, Train, StationDetail, TrainDetail, sort_by
from .config import ClientOptions, DEFAULT_OPTIONS, LOCAL_SERVER_OPTIONS
from .errors import IrishRailError, TransportError, StationNotFoundError, DisplayInitError
from .client import Client, IrishRailClient, InMemoryClient
from .sanitize import normalize
from .board import project_rows, due_string, delay_string
from .dashboard import RefreshLoop, CursesSurface, run_dashboard

__all__ = [
    "Station",
    "Train",
    "StationDetail",
    "TrainDetail",
    "sort_by",
    "ClientOptions",
    "DEFAULT_OPTIONS",
    "LOCAL_SERVER_OPTIONS",
    "IrishRailError",
    "TransportError",
    "StationNotFoundError",
    "DisplayInitError",
    "Client",
    "IrishRailClient",
    "InMemoryClient",
    "normalize",
    "project_rows",
    "due_string",
    "delay_string",
    "RefreshLoop",
    "CursesSurface",
    "run_dashboard",
]
