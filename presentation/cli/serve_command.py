from __future__ import annotations

import argparse

import uvicorn

from config import settings
from core.logging.logger import get_logger


class ServeCommand:
    """Runs the demo backend under uvicorn."""

    def __init__(self) -> None:
        self.logger = get_logger(__name__, service="demo-server")

    def run(self, args: argparse.Namespace) -> int:
        from presentation.demo_server import create_app

        print(f"Backend service running at http://{args.host}:{args.port}", flush=True)
        print(f"Environment: {settings.APP_ENV}", flush=True)
        self.logger.info(lambda: "demo-server-start", extra={"host": args.host, "port": args.port})
        uvicorn.run(create_app(), host=args.host, port=args.port, log_level="warning")
        return 0


def add_serve_parser(subparsers: argparse._SubParsersAction) -> None:
    s = subparsers.add_parser("serve", help="run the demo backend")
    s.add_argument("--host", default=settings.DEMO_HOST)
    s.add_argument("--port", type=int, default=settings.DEMO_PORT)
