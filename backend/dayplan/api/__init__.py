"""API routers."""

from dayplan.api import scheduler

__all__ = [
    "scheduler",
]
