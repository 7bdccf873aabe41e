import threading
from dataclasses import dataclass
from typing import Any, Callable

from errors import DuplicateRouteError, RouteNotFoundError

NOT_FOUND_TEXT = "Not found"

# ---------------------------------------------------------------------------
# Response / Route
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Response:
    status: int
    content_type: str
    body: str

    @classmethod
    def html(cls, body: str, status: int = 200) -> "Response":
        return cls(status=status, content_type="text/html", body=body)

    @classmethod
    def text(cls, body: str, status: int = 200) -> "Response":
        return cls(status=status, content_type="text/plain", body=body)


Handler = Callable[[Any], Response]


@dataclass(frozen=True)
class Route:
    path: str
    handler: Handler


def default_not_found(request) -> Response:
    return Response.text(NOT_FOUND_TEXT, status=404)


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------


class RequestRouter:
    """
    Exact-match path -> handler table.

    Paths are compared as plain strings, exactly as the client sent them.
    There is no percent-decoding, no prefix or wildcard matching and no
    trailing-slash normalisation, so "/activate", "/activate/" and
    "/%61ctivate" are three different paths.

    Handlers are plain functions taking the request and returning a
    Response. dispatch() runs them synchronously in the caller's thread, so
    they must not block on I/O.
    """

    def __init__(self, not_found: Handler | None = None):
        self._routes: dict[str, Route] = {}
        self._lock = threading.Lock()
        self._not_found = not_found or default_not_found

    def register(self, path: str, handler: Handler) -> Route:
        """Add a route. Registering the same path twice is a setup bug."""
        route = Route(path, handler)
        with self._lock:
            if path in self._routes:
                raise DuplicateRouteError(path)
            self._routes[path] = route
        return route

    def route(self, path: str):
        """Decorator form of register()."""
        def decorator(handler: Handler) -> Handler:
            self.register(path, handler)
            return handler
        return decorator

    def set_not_found(self, handler: Handler) -> None:
        with self._lock:
            self._not_found = handler

    def resolve(self, path: str) -> Route:
        with self._lock:
            route = self._routes.get(path)
        if route is None:
            raise RouteNotFoundError(path)
        return route

    def dispatch(self, path: str, request=None) -> Response:
        """
        Run the handler for `path` and return its response. Unknown paths
        are answered by the not-found handler.
        """
        try:
            route = self.resolve(path)
        except RouteNotFoundError:
            with self._lock:
                not_found = self._not_found
            return not_found(request)
        return route.handler(request)

    @property
    def paths(self) -> tuple:
        with self._lock:
            return tuple(sorted(self._routes))

    def __contains__(self, path: str) -> bool:
        with self._lock:
            return path in self._routes

    def __len__(self) -> int:
        with self._lock:
            return len(self._routes)
