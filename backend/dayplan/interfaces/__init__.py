"""Abstract interfaces for infrastructure abstraction."""

from dayplan.interfaces.plan_repository import IPlanRepository

__all__ = [
    "IPlanRepository",
]
