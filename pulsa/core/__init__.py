"""Core module - configuration and exceptions."""

from pulsa.core.config import Settings, get_settings
from pulsa.core.exceptions import (
    InsufficientFundsError,
    PulsaError,
    StorageError,
    ValidationError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "PulsaError",
    "ValidationError",
    "StorageError",
    "InsufficientFundsError",
]
