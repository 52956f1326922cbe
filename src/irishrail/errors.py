"""Exceptions raised by the IrishRail client and dashboard."""


class IrishRailError(Exception):
    """Base class for all irishrail errors."""


class TransportError(IrishRailError):
    """A fetch failed: network/HTTP error or a malformed XML response."""


class StationNotFoundError(IrishRailError):
    """No station matched a lookup query."""

    def __init__(self, query: str):
        super().__init__(f"Failed to lookup station: {query}")
        self.query = query


class DisplayInitError(IrishRailError):
    """The terminal display could not be acquired."""
