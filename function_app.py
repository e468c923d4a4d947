"""
Azure Functions Sample - Azure Functions Application

Exposes two anonymous GET endpoints, /api/hello and /api/status. Routes are
declared in a RouteRegistry and bound to the Function App at import time.
"""

import logging
from typing import Optional
import azure.functions as func

from shared.config import get_log_level, get_environment
from shared.host import bind_registry
from shared.registry import RouteRegistry
from sample.routes import register_sample_routes

# Configure logging
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)


def build_registry() -> RouteRegistry:
    """Create the route registry with every application route, frozen."""
    registry = RouteRegistry()
    register_sample_routes(registry)
    return registry.freeze()


def create_app(registry: Optional[RouteRegistry] = None) -> func.FunctionApp:
    """Create the Function App and bind the registry's routes to it."""
    registry = registry or build_registry()
    function_app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)
    bind_registry(function_app, registry)
    logger.info(f"Function app created with {len(registry)} routes ({get_environment()})")
    return function_app


# Create the main Function App instance
app = create_app()
