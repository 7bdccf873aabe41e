"""Panel exception hierarchy.

Shared by the router and the server adapter so both raise and catch the
same types.
"""


class PanelError(Exception):
    """Base for all panel-specific errors."""


class RouteNotFoundError(PanelError, LookupError):
    """No route is registered for the path.

    Recovered inside RequestRouter.dispatch, which answers with the
    not-found response instead.
    """

    def __init__(self, path: str):
        super().__init__(f"No route for {path!r}")
        self.path = path


class DuplicateRouteError(PanelError, ValueError):
    """A path was registered twice. Raised at startup, never at runtime."""

    def __init__(self, path: str):
        super().__init__(f"Route already registered: {path!r}")
        self.path = path
