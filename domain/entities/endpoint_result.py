"""Per-endpoint and pre-check results."""
from dataclasses import dataclass

from .endpoint import EndpointSpec
from .probe_outcome import ProbeOutcome


def is_success_status(status_code) -> bool:
    """2xx is success; everything else, including no response, is failure."""
    return status_code is not None and 200 <= status_code < 300


@dataclass(frozen=True)
class EndpointResult:
    """An endpoint, the URL that was probed and what came back."""

    spec: EndpointSpec
    url: str
    outcome: ProbeOutcome

    @property
    def success(self) -> bool:
        return is_success_status(self.outcome.status_code)

    def to_dict(self) -> dict:
        return {
            **self.spec.to_dict(),
            'url': self.url,
            'success': self.success,
            **self.outcome.to_dict(),
        }


@dataclass(frozen=True)
class ConnectivityCheck:
    """Base-URL reachability check run before the endpoint list.

    Any response below 500 counts as reachable: a 404 on ``/`` still proves
    something is listening and serving HTTP.
    """

    url: str
    outcome: ProbeOutcome

    @property
    def reachable(self) -> bool:
        code = self.outcome.status_code
        return code is not None and code < 500

    def to_dict(self) -> dict:
        return {'url': self.url, 'reachable': self.reachable, **self.outcome.to_dict()}
