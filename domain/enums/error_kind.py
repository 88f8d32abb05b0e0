"""Transport failure categories for a probe that got no HTTP response."""
from enum import Enum


class ErrorKind(Enum):
    """Why a probe produced no status code.

    Values match the short codes printed in the per-endpoint report lines.
    """

    CONNECTION_REFUSED = "connection-refused"
    CONNECTION_RESET = "connection-reset"
    HOST_NOT_FOUND = "host-not-found"
    TIMED_OUT = "timed-out"
    OTHER = "other-transport-error"

    @property
    def description(self) -> str:
        """Get a human-readable explanation for console output."""
        descriptions = {
            "connection-refused": "Connection refused. No service running",
            "connection-reset": "Connection reset by server",
            "host-not-found": "Host not found",
            "timed-out": "Request timed out",
            "other-transport-error": "Transport error",
        }
        return descriptions[self.value]
