"""Custom exceptions for multitenancy-strategy.

All exceptions derive from ``TenancyError`` so callers can catch the entire
family with a single ``except TenancyError`` clause.

Exception hierarchy::

    TenancyError
    └── ConfigurationError

Strategy resolution itself never raises: unknown values fall back to
``NONE`` with a logged warning.  Errors are reserved for wiring that cannot
work, e.g. a resolved selection that needs a multi-tenant connection provider
when none was supplied.
"""

from __future__ import annotations

from typing import Any


class TenancyError(Exception):
    """Base exception for all multitenancy-strategy errors.

    Attributes:
        message: Human-readable description of the error.
        details: Supplementary key-value context.  Safe to log; must never
            contain connection credentials.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.details: dict[str, Any] = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return ``human-readable`` string."""
        if self.details:
            return f"{self.message} | details={self.details}"
        return self.message

    def __repr__(self) -> str:
        """Return ``repr`` string for debugging purpose."""
        return f"{type(self).__name__}(message={self.message!r})"


class ConfigurationError(TenancyError):
    """Raised when the tenancy wiring is missing or inconsistent.

    Attributes:
        parameter: The name of the missing or invalid setting / collaborator.
        reason: Why the current value is invalid.
    """

    def __init__(
        self,
        parameter: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"Invalid configuration for {parameter!r}: {reason}", details)
        self.parameter = parameter
        self.reason = reason


__all__ = [
    "ConfigurationError",
    "TenancyError",
]
