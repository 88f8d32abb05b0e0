"""Application use cases."""
from .validate_service import DEFAULT_PRESET, ValidateServiceUseCase, target_host_port

__all__ = [
    'DEFAULT_PRESET',
    'ValidateServiceUseCase',
    'target_host_port',
]
