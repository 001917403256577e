"""Pulsa Reseller Backend - Custom exceptions."""

from decimal import Decimal
from typing import Any


class PulsaError(Exception):
    """Base exception for all Pulsa errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(PulsaError):
    """Input validation failed before any storage access."""

    pass


class StorageError(PulsaError):
    """Database unit failed: begin/commit error, missing row, or read failure.

    The in-flight unit is always rolled back before this surfaces.
    """

    NOT_FOUND = "not_found"
    IN_USE = "in_use"

    @classmethod
    def not_found(cls, entity: str, entity_id: Any) -> "StorageError":
        """Build a row-not-found error for ``entity`` with ``entity_id``."""
        return cls(
            f"{entity} with ID {entity_id} not found",
            {"reason": cls.NOT_FOUND, "entity": entity, "id": str(entity_id)},
        )

    @classmethod
    def in_use(cls, entity: str, entity_id: Any) -> "StorageError":
        """Build an error for a row that other rows still reference."""
        return cls(
            f"{entity} with ID {entity_id} is still referenced and cannot be deleted",
            {"reason": cls.IN_USE, "entity": entity, "id": str(entity_id)},
        )

    @property
    def is_not_found(self) -> bool:
        return self.details.get("reason") == self.NOT_FOUND

    @property
    def is_in_use(self) -> bool:
        return self.details.get("reason") == self.IN_USE


class InsufficientFundsError(PulsaError):
    """Merchant balance does not cover the nominal value of the order."""

    def __init__(
        self,
        required: Decimal,
        available: Decimal,
        message: str = "Insufficient merchant balance",
    ) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"{message}: required {required}, current balance {available}",
            {"required": str(required), "available": str(available)},
        )
