"""Endpoint catalogue: the paths each validation preset probes."""
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from domain.entities import EndpointSpec
from domain.errors import ValidationConfigError

BASIC_ENDPOINTS: Tuple[EndpointSpec, ...] = (
    EndpointSpec("/", "Home"),
    EndpointSpec("/health", "Health Check"),
    EndpointSpec("/api/status", "API Status"),
)

HOSTING_ENDPOINTS: Tuple[EndpointSpec, ...] = BASIC_ENDPOINTS + (
    EndpointSpec("/api/health", "API Health"),
    EndpointSpec("/status", "Status"),
)

COMPREHENSIVE_ENDPOINTS: Tuple[EndpointSpec, ...] = HOSTING_ENDPOINTS + (
    EndpointSpec("/api", "API Root"),
)

PRESETS: Dict[str, Tuple[EndpointSpec, ...]] = {
    "basic": BASIC_ENDPOINTS,
    "hosting": HOSTING_ENDPOINTS,
    "comprehensive": COMPREHENSIVE_ENDPOINTS,
}


def preset_endpoints(name: str) -> List[EndpointSpec]:
    try:
        return list(PRESETS[name.lower()])
    except KeyError:
        raise ValidationConfigError(
            f"unknown preset {name!r}; choose one of: {', '.join(PRESETS)}"
        ) from None


def parse_endpoints(values: Iterable[str]) -> List[EndpointSpec]:
    """Parse ``/path`` or ``/path|Name`` strings, dropping duplicates by path."""
    seen: set[str] = set()
    out: List[EndpointSpec] = []
    for raw in values:
        if not raw.strip():
            continue
        spec = EndpointSpec.parse(raw)
        if spec.path in seen:
            continue
        seen.add(spec.path)
        out.append(spec)
    return out
