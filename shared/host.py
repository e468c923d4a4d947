"""
Binds the route registry to the Azure Functions host.
"""

import logging
from typing import Callable, Optional
from urllib.parse import urlparse
import azure.functions as func

from .config import get_route_prefix
from .logs import InvocationLog, RequestLog
from .registry import Route, RouteRegistry
from .responses import (
    Response, internal_error_response, not_found_response,
    method_not_allowed_response, to_http_response
)

logger = logging.getLogger(__name__)


def invoke(route: Route, req: func.HttpRequest, log: RequestLog) -> Response:
    """
    Run a route handler, converting any failure into a 500 response.
    """
    try:
        response = route.handler(req, log)
    except Exception:
        logger.exception(f"Error handling {route.method} {route.path}")
        return internal_error_response()

    if not isinstance(response, Response):
        logger.error(
            f"Handler for {route.method} {route.path} returned "
            f"{type(response).__name__} instead of Response"
        )
        return internal_error_response()

    return response


def request_path(req: func.HttpRequest, prefix: Optional[str] = None) -> Optional[str]:
    """
    Path of the request with the route prefix removed, or None when the
    request lies outside the prefix.
    """
    if prefix is None:
        prefix = get_route_prefix()
    prefix = prefix.strip("/")

    path = urlparse(req.url).path or "/"
    if not prefix:
        return path

    base = "/" + prefix
    if path == base:
        return "/"
    if path.startswith(base + "/"):
        return path[len(base):]
    return None


def dispatch(
    registry: RouteRegistry,
    req: func.HttpRequest,
    log: RequestLog,
    prefix: Optional[str] = None
) -> Response:
    """
    Resolve a request against the registry and run the matching handler.

    Unregistered paths get 404; a known path under another method gets 405.
    """
    path = request_path(req, prefix)
    if path is None:
        logger.info(f"Request outside route prefix: {req.method} {req.url}")
        return not_found_response()

    route = registry.lookup(req.method, path)

    if route is None:
        allowed = registry.allowed_methods(path)
        if allowed:
            return method_not_allowed_response(allowed)
        logger.info(f"No route for {req.method} {path}")
        return not_found_response()

    return invoke(route, req, log)


def make_function(route: Route) -> Callable[[func.HttpRequest, func.Context], func.HttpResponse]:
    """
    Build the Functions entry point for a single route.

    The parameter names ``req`` and ``context`` are what the Python worker
    binds the trigger and invocation context to.
    """
    route_logger = logging.getLogger(f"{__name__}.{route.name}")

    def function(req: func.HttpRequest, context: func.Context) -> func.HttpResponse:
        invocation_id = getattr(context, "invocation_id", None)
        log = InvocationLog(route_logger, invocation_id)
        return to_http_response(invoke(route, req, log))

    function.__name__ = route.name
    function.__qualname__ = route.name
    function.__doc__ = f"{route.method} {route.path}"
    return function


def bind_registry(app: func.FunctionApp, registry: RouteRegistry) -> func.FunctionApp:
    """Register every route in the registry as an HTTP-triggered function."""
    for route in registry:
        function = make_function(route)
        app.function_name(name=route.name)(
            app.route(
                route=route.host_route,
                methods=[route.method],
                auth_level=route.auth_level.to_host()
            )(function)
        )
        logger.info(f"Bound function '{route.name}' to {route.method} {route.path}")
    return app
