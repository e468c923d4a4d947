"""
Route registry mapping (method, path) pairs to handlers.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Tuple
import azure.functions as func

from .logs import RequestLog
from .responses import Response

logger = logging.getLogger(__name__)

Handler = Callable[[func.HttpRequest, RequestLog], Response]


class DuplicateRouteError(Exception):
    """Raised when a (method, path) pair or function name is registered twice."""
    pass


class RegistryFrozenError(Exception):
    """Raised when registering a route after the registry has been frozen."""
    pass


class AuthLevel(str, Enum):
    """Host-enforced authorization level for a route."""
    ANONYMOUS = "anonymous"
    FUNCTION = "function"
    ADMIN = "admin"

    def to_host(self) -> func.AuthLevel:
        return func.AuthLevel(self.value)


def normalize_method(method: str) -> str:
    return method.strip().upper()


def normalize_path(path: str) -> str:
    """Normalize a route path to a single leading slash and no trailing slash."""
    return "/" + path.strip().strip("/")


@dataclass(frozen=True)
class Route:
    """A (method, path) pair bound to exactly one handler."""
    method: str
    path: str
    auth_level: AuthLevel
    handler: Handler
    name: str
    description: str = ""

    @property
    def host_route(self) -> str:
        """Route template as the Functions host expects it (no leading slash)."""
        return self.path.lstrip("/")


class RouteRegistry:
    """
    Registry of HTTP routes, built once at startup.

    Routes are registered, the registry is frozen, and from then on it is
    only read. Iteration yields routes in registration order.
    """

    def __init__(self):
        self._routes: Dict[Tuple[str, str], Route] = {}
        self._names: Dict[str, Route] = {}
        self._frozen = False

    def register(
        self,
        method: str,
        path: str,
        auth_level: AuthLevel,
        handler: Handler,
        name: Optional[str] = None,
        description: str = ""
    ) -> Route:
        """
        Add a route.

        Args:
            method: HTTP method, case-insensitive
            path: Route path, with or without leading slash
            auth_level: Authorization level enforced by the host
            handler: Callable taking (request, log) and returning a Response
            name: Function name; defaults to the path with slashes replaced
            description: Human-readable summary of the endpoint

        Returns:
            The registered Route

        Raises:
            RegistryFrozenError: If the registry has been frozen
            DuplicateRouteError: If (method, path) or name is already taken
        """
        if self._frozen:
            raise RegistryFrozenError("Route registry is frozen")

        method = normalize_method(method)
        path = normalize_path(path)
        key = (method, path)

        if key in self._routes:
            raise DuplicateRouteError(f"Route already registered: {method} {path}")

        name = name or (path.strip("/").replace("/", "_") or "root")
        if name in self._names:
            raise DuplicateRouteError(f"Function name already registered: {name}")

        route = Route(
            method=method,
            path=path,
            auth_level=AuthLevel(auth_level),
            handler=handler,
            name=name,
            description=description
        )
        self._routes[key] = route
        self._names[name] = route
        logger.debug(f"Registered route {method} {path} as '{name}'")
        return route

    def lookup(self, method: str, path: str) -> Optional[Route]:
        """Return the Route for (method, path), or None."""
        return self._routes.get((normalize_method(method), normalize_path(path)))

    def resolve(self, method: str, path: str) -> Optional[Handler]:
        """Return the handler for (method, path), or None when nothing matches."""
        route = self.lookup(method, path)
        return route.handler if route else None

    def allowed_methods(self, path: str) -> List[str]:
        """Methods registered for a path, in registration order."""
        path = normalize_path(path)
        return [route.method for route in self._routes.values() if route.path == path]

    def freeze(self) -> "RouteRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __iter__(self) -> Iterator[Route]:
        return iter(list(self._routes.values()))

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, item) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        method, path = item
        return self.lookup(method, path) is not None
