"""Application layer - Services and use cases."""
from .services import HealthAggregator, HTTPChecker
from .use_cases import ValidateServiceUseCase

__all__ = [
    'HealthAggregator',
    'HTTPChecker',
    'ValidateServiceUseCase',
]
