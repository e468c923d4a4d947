# Shared utilities for the Azure Functions Sample
from .registry import Route, RouteRegistry, AuthLevel, DuplicateRouteError, RegistryFrozenError
from .responses import (
    Response, SerializationError, build_response, success_response, error_response,
    not_found_response, method_not_allowed_response, internal_error_response, to_http_response
)
from .logs import RequestLog, InvocationLog
from .host import bind_registry, dispatch, invoke

__all__ = [
    "Route",
    "RouteRegistry",
    "AuthLevel",
    "DuplicateRouteError",
    "RegistryFrozenError",
    "Response",
    "SerializationError",
    "build_response",
    "success_response",
    "error_response",
    "not_found_response",
    "method_not_allowed_response",
    "internal_error_response",
    "to_http_response",
    "RequestLog",
    "InvocationLog",
    "bind_registry",
    "dispatch",
    "invoke",
]
