"""
Reschedule service.

Loads a plan snapshot, runs the rescheduling engine and writes the
resulting moves back in a single atomic repository call.
"""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Optional

from dayplan.core.config import Settings, get_settings
from dayplan.core.exceptions import NotFoundError, ValidationError
from dayplan.core.logger import setup_logger
from dayplan.interfaces.plan_repository import IPlanRepository
from dayplan.models.enums import CandidateLabel
from dayplan.models.plan import Block, Plan
from dayplan.models.schedule import (
    AdoptRequest,
    AdoptResponse,
    InterruptRequest,
    InterruptResponse,
)
from dayplan.services.rescheduler import plan_adopt, plan_interrupt
from dayplan.utils.datetime_utils import day_bounds_ms, local_hour_ms, next_date, now_ms

logger = setup_logger(__name__)


class RescheduleService:
    """
    Service for interruption handling and candidate adoption.

    Provides:
    - Interrupt: re-pack today's movable blocks after an interruption
    - Adopt: move leftover blocks to an accepted candidate slot
    """

    def __init__(self, plan_repo: IPlanRepository, settings: Optional[Settings] = None):
        self.plan_repo = plan_repo
        self.settings = settings or get_settings()

    def _timezone(self, plan: Plan) -> str:
        return plan.timezone or self.settings.APP_TIMEZONE

    def _tomorrow_anchor(self, plan: Plan, label: CandidateLabel) -> int:
        # Whole local hours on the next day, shared by interrupt candidates and adopt seeds
        hour = (
            self.settings.CANDIDATE_MORNING_HOUR
            if label == CandidateLabel.TOMORROW_MORNING
            else self.settings.CANDIDATE_EVENING_HOUR
        )
        return local_hour_ms(next_date(plan.date), hour, self._timezone(plan))

    async def _get_plan(self, user_id: str, plan_id: str) -> Plan:
        plan = await self.plan_repo.get(user_id, plan_id)
        if plan is None:
            raise NotFoundError(f"Plan {plan_id} not found")
        return plan

    async def interrupt(self, user_id: str, request: InterruptRequest) -> InterruptResponse:
        """
        Carve an interruption out of a plan and relocate its movable blocks.

        Moved blocks are persisted; unplaced blocks are only reported, together
        with candidate slots the user can adopt later.
        """
        plan = await self._get_plan(user_id, request.plan_id)
        _, day_end = day_bounds_ms(plan.date, self._timezone(plan))

        blocks, windows = await asyncio.gather(
            self.plan_repo.list_blocks(user_id, plan.id),
            self.plan_repo.list_windows(user_id, plan.id),
        )

        result = plan_interrupt(
            blocks,
            windows,
            request,
            today_end=day_end,
            tomorrow_morning=self._tomorrow_anchor(plan, CandidateLabel.TOMORROW_MORNING),
            tomorrow_evening=self._tomorrow_anchor(plan, CandidateLabel.TOMORROW_EVENING),
        )

        if result.moved:
            await self.plan_repo.apply_moves(user_id, result.moved)

        logger.info(
            f"Interrupt applied to plan {plan.id} ({plan.date}): "
            f"{len(result.moved)} moved, {len(result.unplaced)} unplaced"
        )

        return InterruptResponse(
            moved=result.moved,
            unplaced=result.unplaced,
            candidates=result.candidates,
        )

    def _blocks_to_relocate(
        self,
        blocks: list[Block],
        block_ids: Optional[list[str]],
        now: int,
    ) -> list[Block]:
        if block_ids is None:
            return [block for block in blocks if block.movable and block.end > now]

        duplicates = sorted({block_id for block_id in block_ids if block_ids.count(block_id) > 1})
        if duplicates:
            raise ValidationError(
                f"Blocks listed more than once: {', '.join(duplicates)}",
                details={"block_ids": duplicates},
            )

        by_id = {block.id: block for block in blocks}
        missing = [block_id for block_id in block_ids if block_id not in by_id]
        if missing:
            raise NotFoundError(
                f"Blocks not found in plan: {', '.join(missing)}",
                details={"block_ids": missing},
            )

        fixed = [block_id for block_id in block_ids if not by_id[block_id].movable]
        if fixed:
            raise ValidationError(
                f"Blocks are not movable: {', '.join(fixed)}",
                details={"block_ids": fixed},
            )
        return [by_id[block_id] for block_id in block_ids]

    async def _get_or_create_next_plan(self, user_id: str, plan: Plan) -> Plan:
        tomorrow: date = next_date(plan.date)
        existing = await self.plan_repo.get_by_date(user_id, tomorrow)
        if existing is not None:
            return existing

        timezone = self._timezone(plan)
        created = await self.plan_repo.create(user_id, tomorrow, timezone)
        await self.plan_repo.add_window(
            user_id,
            created.id,
            start=local_hour_ms(tomorrow, self.settings.DEFAULT_WINDOW_START_HOUR, timezone),
            end=local_hour_ms(tomorrow, self.settings.DEFAULT_WINDOW_END_HOUR, timezone),
        )
        logger.info(f"Created plan {created.id} for {tomorrow} with default window")
        return created

    async def adopt(
        self,
        user_id: str,
        request: AdoptRequest,
        now: Optional[int] = None,
    ) -> AdoptResponse:
        """
        Lay leftover blocks out contiguously at an accepted candidate slot.

        Args:
            user_id: Owner of the plan
            request: Plan, accepted candidate label and optionally the blocks
                to relocate
            now: Current instant in epoch ms (defaults to the wall clock);
                without explicit block ids, movable blocks ending after it
                are relocated
        """
        plan = await self._get_plan(user_id, request.plan_id)
        current_blocks = await self.plan_repo.list_blocks(user_id, plan.id)
        relocating = self._blocks_to_relocate(
            current_blocks,
            request.block_ids,
            now if now is not None else now_ms(),
        )

        if request.label == CandidateLabel.TODAY_END:
            target = plan
            _, start_seed = day_bounds_ms(plan.date, self._timezone(plan))
            target_blocks = current_blocks
        else:
            target = await self._get_or_create_next_plan(user_id, plan)
            start_seed = self._tomorrow_anchor(plan, request.label)
            target_blocks = await self.plan_repo.list_blocks(user_id, target.id)

        relocating_ids = {block.id for block in relocating}
        occupancy = [block for block in target_blocks if block.id not in relocating_ids]
        target_windows = await self.plan_repo.list_windows(user_id, target.id)

        placements = plan_adopt(occupancy, target_windows, relocating, start_seed)
        if placements:
            await self.plan_repo.apply_moves(user_id, placements, target_plan_id=target.id)

        logger.info(
            f"Adopted {request.label.value} for plan {plan.id}: "
            f"{len(placements)} blocks moved to plan {target.id}"
        )

        return AdoptResponse(adopted=placements, target_plan_id=target.id)
