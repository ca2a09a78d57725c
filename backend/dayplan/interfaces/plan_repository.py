"""
Day plan repository interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from dayplan.models.plan import Block, Plan, Window
from dayplan.models.schedule import BlockMove


class IPlanRepository(ABC):
    @abstractmethod
    async def get(self, user_id: str, plan_id: str) -> Optional[Plan]:
        pass

    @abstractmethod
    async def get_by_date(self, user_id: str, plan_date: date) -> Optional[Plan]:
        pass

    @abstractmethod
    async def create(self, user_id: str, plan_date: date, timezone: str) -> Plan:
        pass

    @abstractmethod
    async def list_blocks(self, user_id: str, plan_id: str) -> list[Block]:
        """Blocks of a plan ordered by start."""
        pass

    @abstractmethod
    async def list_windows(self, user_id: str, plan_id: str) -> list[Window]:
        """Windows of a plan ordered by start."""
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    async def add_window(self, user_id: str, plan_id: str, start: int, end: int) -> Window:
        pass

    @abstractmethod
    async def apply_moves(
        self,
        user_id: str,
        moves: list[BlockMove],
        target_plan_id: Optional[str] = None,
    ) -> list[Block]:
        """
        Write all moves or none of them.

        Each block must still sit at its move's `from` interval; otherwise
        ConflictError is raised and nothing is written. When
        `target_plan_id` is given, moved blocks are re-homed to that plan.
        """
        pass
