from __future__ import annotations

import argparse
import json
from typing import Iterable, Optional

from config import settings
from core.logging.logger import StructuredLogger, get_logger
from domain.errors import ValidationConfigError
from application.services.health import parse_endpoints, preset_endpoints
from application.use_cases import ValidateServiceUseCase
from .report_printer import format_diagnostics, format_header, format_report, to_json

EXIT_CONFIG_ERROR = 2

_TITLES = {
    "basic": "🔍 Service Validation",
    "hosting": "🌐 Hosting Service Validation",
    "comprehensive": "🌐 Comprehensive Hosting Validation",
}


def _emit(lines: Iterable[str]) -> None:
    for line in lines:
        print(line, flush=True)


class HealthCommand:
    """validate / check / diagnose subcommands."""

    def __init__(self, use_case: Optional[ValidateServiceUseCase] = None) -> None:
        self.logger: StructuredLogger = get_logger(__name__, service="health")
        self.use_case = use_case or ValidateServiceUseCase(logger=self.logger)

    async def execute(self, args: argparse.Namespace) -> int:
        handlers = {
            "validate": self.validate,
            "check": self.check,
            "diagnose": self.diagnose,
        }
        try:
            return await handlers[args.command](args)
        except ValidationConfigError as e:
            self.logger.error(lambda: f"config-error {e}")
            print(f"Error: {e}", flush=True)
            return EXIT_CONFIG_ERROR

    async def validate(self, args: argparse.Namespace) -> int:
        endpoints = parse_endpoints(args.endpoint or []) or preset_endpoints(args.preset)
        timeout_ms = self.use_case.resolve_timeout_ms(args.timeout, args.preset)

        if not args.json:
            _emit(format_header(
                _TITLES.get(args.preset, _TITLES["hosting"]),
                args.url,
                preset=args.preset if not args.endpoint else "custom",
                endpoint_count=len(endpoints),
                timeout_s=timeout_ms / 1000.0,
            ))

        report = await self.use_case.execute(
            args.url,
            preset=args.preset,
            endpoints=endpoints,
            timeout_s=args.timeout,
            precheck=not args.no_precheck,
            max_concurrency=args.concurrency,
        )

        diagnostics = None
        if report.exit_code != 0 and not args.no_diagnostics:
            diagnostics = await self.use_case.diagnose(report.base_url)

        if args.json:
            print(to_json(report, diagnostics), flush=True)
        else:
            _emit(format_report(report))
            if diagnostics is not None:
                print("", flush=True)
                print("💡 Running diagnostics for failed validation...", flush=True)
                _emit(format_diagnostics(diagnostics))
        return report.exit_code

    async def check(self, args: argparse.Namespace) -> int:
        print(f"Validating service on {args.url}...", flush=True)
        result = await self.use_case.check(args.url, timeout_s=args.timeout)
        o = result.outcome
        if result.reachable:
            print(f"✅ Status: {o.status_code}", flush=True)
            print(f"✅ Response time: {o.response_time_ms}ms", flush=True)
            print(f"✅ Service is running and accessible on {result.url}", flush=True)
            return 0
        if o.error_kind is not None:
            print(f"❌ {o.error_kind.description}: {result.url}", flush=True)
        else:
            print(f"❌ Server error: {o.status_code}", flush=True)
        print(f"❌ Service is not accessible on {result.url}", flush=True)
        return 1

    async def diagnose(self, args: argparse.Namespace) -> int:
        diag = await self.use_case.diagnose(args.url)
        if args.json:
            print(json.dumps(diag.to_dict(), separators=(",", ":")), flush=True)
        else:
            _emit(format_diagnostics(diag))
        return 0 if diag.ok else 1


def add_health_parsers(subparsers: argparse._SubParsersAction) -> None:
    v = subparsers.add_parser("validate", help="probe the well-known endpoints and report overall status")
    v.add_argument("url", nargs="?", default=settings.TARGET_URL, help="base URL (default: %(default)s)")
    v.add_argument("timeout", nargs="?", type=float, default=None,
                   help="per-request timeout in seconds (default: 5, 10 for the comprehensive preset)")
    v.add_argument("--preset", choices=["basic", "hosting", "comprehensive"], default="hosting")
    v.add_argument("--endpoint", action="append", metavar="PATH[|NAME]",
                   help="endpoint to probe instead of the preset; repeatable")
    v.add_argument("--no-precheck", action="store_true", help="skip the base URL connectivity check")
    v.add_argument("--concurrency", type=int, default=None,
                   help=f"parallel probes (default: {settings.MAX_CONCURRENT_PROBES})")
    v.add_argument("--json", action="store_true", help="print the report as JSON")
    v.add_argument("--no-diagnostics", action="store_true", help="skip DNS/port diagnostics on failure")

    c = subparsers.add_parser("check", help="single request against the base URL")
    c.add_argument("url", nargs="?", default=settings.TARGET_URL)
    c.add_argument("timeout", nargs="?", type=float, default=None)

    d = subparsers.add_parser("diagnose", help="DNS resolution and TCP port check")
    d.add_argument("url", nargs="?", default=settings.TARGET_URL, help="URL or bare host name")
    d.add_argument("--json", action="store_true")
