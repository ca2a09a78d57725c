"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class DayPlanError(Exception):
    """Base exception for dayplan."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(DayPlanError):
    """Resource not found."""

    pass


class ValidationError(DayPlanError):
    """Validation error."""

    pass


class ConflictError(DayPlanError):
    """A write was rejected because the stored state changed since it was read."""

    def __init__(self, message: str, block_ids: Optional[list[str]] = None):
        super().__init__(message, details={"block_ids": block_ids or []})
        self.block_ids = block_ids or []
