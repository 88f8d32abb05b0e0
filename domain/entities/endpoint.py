"""Endpoint descriptor."""
from dataclasses import dataclass

from ..errors import ValidationConfigError


@dataclass(frozen=True)
class EndpointSpec:
    """A fixed path on the target service and its display name."""

    path: str
    name: str

    def __post_init__(self) -> None:
        if not self.path.startswith('/'):
            raise ValidationConfigError(f"endpoint path must start with '/': {self.path!r}")

    @classmethod
    def parse(cls, value: str) -> 'EndpointSpec':
        """Build from ``/path`` or ``/path|Display Name``."""
        path, _, name = value.partition('|')
        path = path.strip()
        return cls(path=path, name=name.strip() or path)

    def to_dict(self) -> dict:
        return {'path': self.path, 'name': self.name}
