"""
HTTP route handlers for the sample endpoints.
"""

import azure.functions as func
from shared.logs import RequestLog
from shared.registry import AuthLevel, RouteRegistry
from shared.responses import Response, success_response
from .service import HELLO_MESSAGE, SampleService


def hello(req: func.HttpRequest, log: RequestLog) -> Response:
    """
    GET /api/hello
    Plain-text greeting.
    """
    log.log("Hello endpoint called")
    return success_response(HELLO_MESSAGE)


def status(req: func.HttpRequest, log: RequestLog) -> Response:
    """
    GET /api/status
    Runtime status as JSON.
    """
    log.log("Status endpoint called")
    return success_response(
        SampleService().get_status(),
        headers={"Content-Type": "application/json"}
    )


def register_sample_routes(registry: RouteRegistry) -> RouteRegistry:
    """Register the sample routes with the route registry."""
    registry.register(
        "GET", "hello", AuthLevel.ANONYMOUS, hello,
        name="hello", description="Simple hello message"
    )
    registry.register(
        "GET", "status", AuthLevel.ANONYMOUS, status,
        name="status", description="System status information"
    )
    return registry
