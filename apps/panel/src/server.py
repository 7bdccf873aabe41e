import asyncio
import threading

from aiohttp import web

from router import RequestRouter

DEFAULT_HTTP_HOST = "0.0.0.0"
DEFAULT_HTTP_PORT = 8080

# ---------------------------------------------------------------------------
# Dispatch adapter
#
# aiohttp only accepts connections and parses requests. Every path goes to
# one catch-all handler that hands it to the panel's RequestRouter, which
# decides what the path means.
# ---------------------------------------------------------------------------

def make_handler(router: RequestRouter):
    async def handle_request(request: web.Request) -> web.Response:
        # Route on the request target as sent, minus the query string:
        # "/%61ctivate" is not "/activate".
        path = request.raw_path.split("?", 1)[0]
        # Synchronous on purpose: panel handlers only touch SharedFlags.
        response = router.dispatch(path, request)
        print(f"[HTTP] {request.method} {path} -> {response.status}")
        return web.Response(
            status=response.status,
            text=response.body,
            content_type=response.content_type,
        )

    return handle_request


# ---------------------------------------------------------------------------
# App factory + server runner
# ---------------------------------------------------------------------------

def build_app(router: RequestRouter) -> web.Application:
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", make_handler(router))
    return app


def start_http_server(router: RequestRouter, host: str, port: int) -> None:
    """
    Runs the aiohttp server in its own asyncio event loop inside a daemon
    thread. Using a dedicated loop (rather than asyncio.run in the main
    thread) keeps the control loop on the main thread untouched.

    Intended to be called as the target of a threading.Thread.
    """
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    app = build_app(router)
    runner = web.AppRunner(app)

    async def _run():
        await runner.setup()
        site = web.TCPSite(runner, host, port)
        await site.start()
        print(f"[HTTP] Server listening on http://{host}:{port}")
        while True:
            await asyncio.sleep(3600)

    loop.run_until_complete(_run())


def start_http_thread(router: RequestRouter, host: str, port: int) -> threading.Thread:
    """Convenience wrapper: creates, starts, and returns the daemon thread."""
    thread = threading.Thread(
        target=start_http_server,
        args=(router, host, port),
        daemon=True,
        name="http-server",
    )
    thread.start()
    return thread
