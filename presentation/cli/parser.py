"""Top-level argument parser."""
from __future__ import annotations

import argparse

from .health_command import add_health_parsers
from .serve_command import add_serve_parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="validator",
        description="Probe a service's well-known endpoints and report HEALTHY/DEGRADED/UNHEALTHY/FAILED.",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    add_health_parsers(sub)
    add_serve_parser(sub)
    return parser
