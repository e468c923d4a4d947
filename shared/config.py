"""
Application settings read from environment variables.
"""

import logging
import os
import platform

DEFAULT_ROUTE_PREFIX = "api"


def get_log_level() -> int:
    """Get the logging level from the LOG_LEVEL environment variable."""
    name = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"LOG_LEVEL environment variable has invalid value: {name}")
    return level


def get_route_prefix() -> str:
    """
    Get the HTTP route prefix (host.json extensions.http.routePrefix).
    An empty ROUTE_PREFIX means routes are served at the root.
    """
    return os.environ.get("ROUTE_PREFIX", DEFAULT_ROUTE_PREFIX).strip("/")


def get_environment() -> str:
    """Get the Functions environment name."""
    return os.environ.get("AZURE_FUNCTIONS_ENVIRONMENT", "Development")


def get_runtime_version() -> str:
    """Version of the Python runtime hosting the functions."""
    return platform.python_version()
