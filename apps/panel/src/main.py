#!/usr/bin/env python3
import argparse

from bridge import build_router
from control import DEFAULT_CONTROL_PERIOD, ControlTask
from pages import DEFAULT_TITLE
from server import DEFAULT_HTTP_HOST, DEFAULT_HTTP_PORT, start_http_thread
from state import ControlState


def parse_args():
    parser = argparse.ArgumentParser(description="Glider flight-control web panel")
    parser.add_argument('--host', type=str, default=DEFAULT_HTTP_HOST,
                        help=f'HTTP bind address (default: {DEFAULT_HTTP_HOST})')
    parser.add_argument('--port', type=int, default=DEFAULT_HTTP_PORT,
                        help=f'HTTP port (default: {DEFAULT_HTTP_PORT})')
    parser.add_argument('--control-period', type=float, default=DEFAULT_CONTROL_PERIOD,
                        help=f'Seconds between control-loop polls (default: {DEFAULT_CONTROL_PERIOD})')
    parser.add_argument('--title', type=str, default=DEFAULT_TITLE,
                        help='Title shown on the control panel page')

    return parser.parse_args()


def main():
    args = parse_args()

    # One state object shared by the web handlers and the control loop.
    # Route setup errors (duplicate paths) are fatal here, before serving.
    state = ControlState()
    router = build_router(state, title=args.title)

    start_http_thread(router, args.host, args.port)

    try:
        ControlTask(state, period=args.control_period).run()
    except KeyboardInterrupt:
        print("\n[control] Stopped.")


if __name__ == '__main__':
    main()
