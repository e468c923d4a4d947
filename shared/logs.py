"""
Per-invocation logging capability handed to route handlers.
"""

import logging
from typing import Optional, Protocol


class RequestLog(Protocol):
    """Anything handlers can write an informational line to."""

    def log(self, message: str) -> None:
        ...


class InvocationLog:
    """
    Writes handler messages to a standard logger, tagged with the
    Functions invocation id when one is available.
    """

    def __init__(self, logger: logging.Logger, invocation_id: Optional[str] = None):
        self.logger = logger
        self.invocation_id = invocation_id

    def log(self, message: str) -> None:
        if self.invocation_id:
            self.logger.info(f"[{self.invocation_id}] {message}")
        else:
            self.logger.info(message)
