"""Custom exceptions for the application."""
from typing import Any


class AuthenticationRequired(Exception):
    """Raised when a request carries no caller identity."""

    message = "Authentication required"

    def __init__(self):
        super().__init__(self.message)


class UnknownIdentity(Exception):
    """Raised when the caller identity does not resolve to a user record."""

    message = "User not found"

    def __init__(self, subject: str):
        """
        Initialize the exception.

        Args:
            subject: Identity provider subject that could not be resolved
        """
        super().__init__(self.message)
        self.subject = subject


class UnsupportedSortField(ValueError):
    """Raised when a sort key is not defined for the searched entity type."""

    def __init__(self, entity_type: str, field: Any):
        """
        Initialize the exception.

        Args:
            entity_type: Entity type being sorted (e.g. "vendors")
            field: The rejected sort key
        """
        super().__init__(f"Cannot sort {entity_type} by '{field}'")
        self.entity_type = entity_type
        self.field = field


class StoreReadTimeout(Exception):
    """Raised when a document store read does not complete in time."""

    def __init__(self, operation: str, timeout: float):
        """
        Initialize the exception.

        Args:
            operation: Name of the repository read that timed out
            timeout: Timeout that was exceeded, in seconds
        """
        super().__init__(f"Store read '{operation}' exceeded {timeout:.2f}s")
        self.operation = operation
        self.timeout = timeout
