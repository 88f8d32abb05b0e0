"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


def main(argv: list[str]) -> int:
    from presentation.cli import EXIT_CONFIG_ERROR, HealthCommand, ServeCommand, build_parser

    args = build_parser().parse_args(argv or ["validate"])
    try:
        settings.validate()
    except ValueError as e:
        print(f"Error: {e}", flush=True)
        return EXIT_CONFIG_ERROR

    bootstrap_logging(
        service="validator",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="validator.jsonl",
    )
    try:
        if args.command == "serve":
            return ServeCommand().run(args)
        return asyncio.run(HealthCommand().execute(args))
    except KeyboardInterrupt:
        print("\nInterrupted.", flush=True)
        return 130
    finally:
        shutdown_logging()


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
