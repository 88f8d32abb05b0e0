"""Presentation CLI exports."""
from .health_command import EXIT_CONFIG_ERROR, HealthCommand
from .serve_command import ServeCommand
from .parser import build_parser

__all__ = [
    "EXIT_CONFIG_ERROR",
    "HealthCommand",
    "ServeCommand",
    "build_parser",
]
