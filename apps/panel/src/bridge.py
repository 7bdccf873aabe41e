from pages import DEFAULT_TITLE, render_ack, render_index
from router import RequestRouter, Response
from state import ControlState

# ---------------------------------------------------------------------------
# Route handlers
#
# Each handler performs one state transition and answers with a static
# acknowledgement page. Request contents are ignored; every transition is
# legal from every state and repeating one is harmless.
# ---------------------------------------------------------------------------


class ControlPlaneBridge:
    """Translates panel routes into writes on a ControlState."""

    def __init__(self, state: ControlState, title: str = DEFAULT_TITLE):
        self.state = state
        self.title = title

    def index(self, request) -> Response:
        """
        GET /
        Control panel page. Read-only.
        """
        return Response.html(render_index(self.title))

    def activate(self, request) -> Response:
        """
        GET /activate
        Arms flight control.
        """
        self.state.armed.put(True)
        print("[panel] armed -> True")
        return Response.html(render_ack())

    def deactivate(self, request) -> Response:
        """
        GET /deactivate
        Disarms flight control.
        """
        self.state.armed.put(False)
        print("[panel] armed -> False")
        return Response.html(render_ack())

    def calibrate(self, request) -> Response:
        """
        GET /calibrate
        Requests a sensor zero. Never calibrate a live control loop: disarm
        is written before the request is posted.
        """
        self.state.armed.put(False)
        self.state.calibrate.put(True)
        print("[panel] armed -> False, calibrate requested")
        return Response.html(render_ack())

    def install(self, router: RequestRouter) -> RequestRouter:
        router.register("/", self.index)
        router.register("/activate", self.activate)
        router.register("/deactivate", self.deactivate)
        router.register("/calibrate", self.calibrate)
        return router


def build_router(state: ControlState, title: str = DEFAULT_TITLE) -> RequestRouter:
    """Router with the panel routes installed and the default 404 handler."""
    return ControlPlaneBridge(state, title).install(RequestRouter())
