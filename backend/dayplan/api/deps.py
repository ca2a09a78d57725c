"""
Dependency injection for API endpoints.

This module provides FastAPI dependencies that inject the correct
infrastructure implementations based on environment configuration.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header

from dayplan.core.config import get_settings
from dayplan.interfaces.plan_repository import IPlanRepository
from dayplan.services.reschedule_service import RescheduleService

DEV_USER_ID = "dev_user"


# ===========================================
# Repository Dependencies
# ===========================================


@lru_cache()
def get_plan_repository() -> IPlanRepository:
    """Get plan repository instance."""
    settings = get_settings()
    if not settings.is_local:
        raise NotImplementedError(f"No plan repository for {settings.ENVIRONMENT}")
    from dayplan.infrastructure.local.plan_repository import InMemoryPlanRepository
    return InMemoryPlanRepository()


def get_reschedule_service(
    plan_repo: IPlanRepository = Depends(get_plan_repository),
) -> RescheduleService:
    """Get RescheduleService instance."""
    return RescheduleService(plan_repo)


# ===========================================
# Caller Identity
# ===========================================


async def get_current_user_id(
    x_user_id: Annotated[str | None, Header()] = None,
) -> str:
    """
    Identify the caller.

    Authentication is handled upstream; the resolved user id arrives in
    the X-User-Id header. Without it a development user is assumed.
    """
    return x_user_id or DEV_USER_ID


# ===========================================
# Type Aliases for Dependency Injection
# ===========================================

RescheduleSvc = Annotated[RescheduleService, Depends(get_reschedule_service)]
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
