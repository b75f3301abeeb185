"""Domain services."""

from .base import Service
from .error_translator import ErrorTranslator
from .identity_service import IdentityService

__all__ = [
    "ErrorTranslator",
    "IdentityService",
    "Service",
]
