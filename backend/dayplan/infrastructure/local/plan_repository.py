"""
In-memory implementation of plan repository.
"""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Optional
from uuid import uuid4

from dayplan.core.exceptions import ConflictError, NotFoundError
from dayplan.interfaces.plan_repository import IPlanRepository
from dayplan.models.plan import Block, Plan, Window
from dayplan.models.schedule import BlockMove


class InMemoryPlanRepository(IPlanRepository):
    """In-memory implementation of plan repository."""

    def __init__(self):
        self._plans: dict[str, Plan] = {}
        self._blocks: dict[str, Block] = {}
        self._windows: dict[str, Window] = {}
        self._write_lock = asyncio.Lock()

    async def get(self, user_id: str, plan_id: str) -> Optional[Plan]:
        plan = self._plans.get(plan_id)
        if plan is None or plan.user_id != user_id:
            return None
        return plan

    async def get_by_date(self, user_id: str, plan_date: date) -> Optional[Plan]:
        for plan in self._plans.values():
            if plan.user_id == user_id and plan.date == plan_date:
                return plan
        return None

    async def create(self, user_id: str, plan_date: date, timezone: str) -> Plan:
        plan = Plan(id=str(uuid4()), user_id=user_id, date=plan_date, timezone=timezone)
        self._plans[plan.id] = plan
        return plan

    async def list_blocks(self, user_id: str, plan_id: str) -> list[Block]:
        blocks = [
            block
            for block in self._blocks.values()
            if block.user_id == user_id and block.plan_id == plan_id
        ]
        return sorted(blocks, key=lambda block: block.start)

    async def list_windows(self, user_id: str, plan_id: str) -> list[Window]:
        windows = [
            window
            for window in self._windows.values()
            if window.user_id == user_id and window.plan_id == plan_id
        ]
        return sorted(windows, key=lambda window: window.start)

    async def add_block(
        self,
        user_id: str,
        plan_id: str,
        start: int,
        end: int,
        movable: bool = True,
        locked_length: bool = True,
        task_id: Optional[str] = None,
        title: Optional[str] = None,
    ) -> Block:
        if await self.get(user_id, plan_id) is None:
            raise NotFoundError(f"Plan {plan_id} not found")
        block = Block(
            id=str(uuid4()),
            plan_id=plan_id,
            user_id=user_id,
            start=start,
            end=end,
            movable=movable,
            locked_length=locked_length,
            task_id=task_id,
            title=title,
        )
        self._blocks[block.id] = block
        return block

    async def add_window(self, user_id: str, plan_id: str, start: int, end: int) -> Window:
        if await self.get(user_id, plan_id) is None:
            raise NotFoundError(f"Plan {plan_id} not found")
        window = Window(id=str(uuid4()), plan_id=plan_id, user_id=user_id, start=start, end=end)
        self._windows[window.id] = window
        return window

    async def apply_moves(
        self,
        user_id: str,
        moves: list[BlockMove],
        target_plan_id: Optional[str] = None,
    ) -> list[Block]:
        async with self._write_lock:
            if target_plan_id is not None and await self.get(user_id, target_plan_id) is None:
                raise NotFoundError(f"Plan {target_plan_id} not found")

            stale: list[str] = []
            for move in moves:
                current = self._blocks.get(move.id)
                if (
                    current is None
                    or current.user_id != user_id
                    or current.start != move.from_.start
                    or current.end != move.from_.end
                ):
                    stale.append(move.id)
            if stale:
                raise ConflictError("Blocks changed since they were read", block_ids=stale)

            updated: list[Block] = []
            for move in moves:
                changes = {"start": move.to.start, "end": move.to.end}
                if target_plan_id is not None:
                    changes["plan_id"] = target_plan_id
                block = self._blocks[move.id].model_copy(update=changes)
                self._blocks[block.id] = block
                updated.append(block)
            return updated
