"""
Scheduler API endpoints.

Interruption handling and fallback candidate adoption for day plans.
"""

from fastapi import APIRouter, HTTPException, status

from dayplan.api.deps import CurrentUserId, RescheduleSvc
from dayplan.core.exceptions import ConflictError, NotFoundError, ValidationError
from dayplan.models.schedule import (
    AdoptRequest,
    AdoptResponse,
    InterruptRequest,
    InterruptResponse,
)

router = APIRouter()


def _conflict(exc: ConflictError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={"message": exc.message, "block_ids": exc.block_ids},
    )


@router.post("/interrupt", response_model=InterruptResponse)
async def interrupt(
    request: InterruptRequest,
    user_id: CurrentUserId,
    service: RescheduleSvc,
):
    """
    Declare an interruption and re-pack the plan's movable blocks.

    Blocks that cannot be placed today are returned as `unplaced` with
    three `candidates` to choose from.
    """
    try:
        return await service.interrupt(user_id, request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except ConflictError as e:
        raise _conflict(e) from e


@router.post("/adopt", response_model=AdoptResponse)
async def adopt(
    request: AdoptRequest,
    user_id: CurrentUserId,
    service: RescheduleSvc,
):
    """Accept a candidate and move leftover blocks there."""
    try:
        return await service.adopt(user_id, request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": e.message, **(e.details or {})},
        ) from e
    except ConflictError as e:
        raise _conflict(e) from e
