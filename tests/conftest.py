from datetime import datetime, timezone

import azure.functions as func
import pytest


class RecordingLog:
    """Log capability that keeps messages for assertions."""

    def __init__(self):
        self.messages = []

    def log(self, message: str) -> None:
        self.messages.append(message)


class FakeContext:
    def __init__(self, invocation_id: str = "inv-123"):
        self.invocation_id = invocation_id


def make_request(method: str = "GET", url: str = "/api/hello") -> func.HttpRequest:
    return func.HttpRequest(method=method, url=url, body=b"")


@pytest.fixture
def log() -> RecordingLog:
    return RecordingLog()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
