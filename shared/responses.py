"""
Standard HTTP response helpers for consistent API responses.

Handlers build a plain ``Response`` value; ``to_http_response`` translates it
into the Azure Functions ``HttpResponse`` at the host boundary.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Dict
import azure.functions as func

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
DEFAULT_CONTENT_TYPE = "text/plain"

INTERNAL_ERROR_BODY = '{"error": "internal error"}'


class SerializationError(Exception):
    """Raised when a response body cannot be converted to JSON."""
    pass


@dataclass(frozen=True)
class Response:
    """Host-independent HTTP response."""
    status: int
    body: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        return _find_header(self.headers, name)


def _find_header(headers: Dict[str, str], name: str) -> Optional[str]:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def json_serialize(obj: Any) -> str:
    """
    Serialize object to JSON, handling datetime and UUID types.

    Raises:
        SerializationError: If the object graph holds an unsupported type,
            a non-finite float, or nests too deeply to encode
    """
    import datetime
    import uuid

    def default_serializer(o):
        if isinstance(o, (datetime.datetime, datetime.date)):
            return o.isoformat()
        if isinstance(o, uuid.UUID):
            return str(o)
        raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")

    try:
        return json.dumps(obj, default=default_serializer, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(str(e)) from e


def internal_error_response() -> Response:
    """
    Create the generic 500 Internal Server Error response.

    The body never carries details of the failure.
    """
    return Response(
        status=500,
        body=INTERNAL_ERROR_BODY,
        headers={"Content-Type": JSON_CONTENT_TYPE}
    )


def build_response(
    status: int,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None
) -> Response:
    """
    Build a response from a status code, optional headers and a body value.

    Strings are used as-is and ``None`` becomes an empty body. Any other
    value is JSON-serialized and ``Content-Type`` defaults to
    ``application/json`` unless the caller already set one.

    Never raises: an invalid status or an unserializable body yields the
    generic 500 response.

    Args:
        status: HTTP status code (100-599)
        body: Response body value
        headers: Optional headers

    Returns:
        Response
    """
    if not isinstance(status, int) or isinstance(status, bool) or not 100 <= status <= 599:
        logger.error(f"Invalid HTTP status code: {status!r}")
        return internal_error_response()

    response_headers = dict(headers or {})

    if body is None:
        text = ""
    elif isinstance(body, str):
        text = body
    else:
        try:
            text = json_serialize(body)
        except SerializationError as e:
            logger.error(f"Error serializing response body: {str(e)}")
            return internal_error_response()
        if _find_header(response_headers, "Content-Type") is None:
            response_headers["Content-Type"] = JSON_CONTENT_TYPE

    return Response(status=status, body=text, headers=response_headers)


def success_response(
    data: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None
) -> Response:
    """
    Create a successful response.

    Args:
        data: Response data (text, or a value to serialize as JSON)
        status_code: HTTP status code (default: 200)
        headers: Optional additional headers

    Returns:
        Response
    """
    return build_response(status_code, data, headers)


def error_response(
    message: str,
    status_code: int = 400,
    headers: Optional[Dict[str, str]] = None
) -> Response:
    """
    Create an error JSON response of the form ``{"error": message}``.

    Args:
        message: Error message
        status_code: HTTP status code (default: 400)
        headers: Optional additional headers

    Returns:
        Response with error details
    """
    return build_response(status_code, {"error": message}, headers)


def not_found_response(message: str = "not found") -> Response:
    """Create a 404 Not Found response."""
    return error_response(message, status_code=404)


def method_not_allowed_response(allowed: list) -> Response:
    """
    Create a 405 Method Not Allowed response.

    Args:
        allowed: Methods registered for the requested path

    Returns:
        Response with 405 status and an ``Allow`` header
    """
    return error_response(
        "method not allowed",
        status_code=405,
        headers={"Allow": ", ".join(sorted(allowed))}
    )


def to_http_response(response: Response) -> func.HttpResponse:
    """
    Translate a Response into an Azure Functions HttpResponse.

    The mimetype follows the ``Content-Type`` header, falling back to
    ``text/plain`` like the host does.
    """
    content_type = response.header("Content-Type")
    mimetype = content_type.split(";")[0].strip() if content_type else DEFAULT_CONTENT_TYPE

    return func.HttpResponse(
        response.body,
        status_code=response.status,
        mimetype=mimetype,
        headers=dict(response.headers)
    )
