"""Presentation layer - CLI and demo server."""
from .cli import HealthCommand, ServeCommand, build_parser

__all__ = [
    "HealthCommand",
    "ServeCommand",
    "build_parser",
]
