"""Connection settings for the IrishRail Realtime API."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClientOptions:
    """Base URL and request timeout (seconds) used to build a client."""
    url: str
    timeout: float


# Live IrishRail Realtime API
DEFAULT_OPTIONS = ClientOptions(url="http://api.irishrail.ie/realtime/realtime.asmx", timeout=5.0)

# Serves cached responses from a local web server
LOCAL_SERVER_OPTIONS = ClientOptions(url="http://127.0.0.1:8080", timeout=1.0)

# Ticks (seconds) between full dashboard refreshes
REFRESH_EVERY = 20
