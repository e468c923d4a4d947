"""
Business logic for the sample endpoints.
"""

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional
from shared.config import get_runtime_version

HELLO_MESSAGE = "Hello from Azure Functions Sample!"
STATUS_MESSAGE = "Azure Functions Sample is running"

ENDPOINTS = (
    "GET /api/hello - Simple hello message",
    "GET /api/status - System status information",
)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T00:00:00.000Z"""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SampleService:
    """Service class for the status endpoint."""

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        runtime_version: Optional[str] = None
    ):
        self.clock = clock or utc_now
        self.runtime_version = runtime_version or get_runtime_version()

    def get_status(self) -> Dict:
        """
        Build the status payload.

        Returns:
            dict with keys in order: message, timestamp, runtimeVersion, endpoints
        """
        endpoints: List[str] = list(ENDPOINTS)
        return {
            "message": STATUS_MESSAGE,
            "timestamp": format_timestamp(self.clock()),
            "runtimeVersion": self.runtime_version,
            "endpoints": endpoints,
        }
