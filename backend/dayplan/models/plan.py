"""
Plan, block and window models.

All timestamps are epoch milliseconds.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from dayplan.models.interval import Interval


class Plan(BaseModel):
    """One user's plan for one calendar day."""

    id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    date: date
    # IANA name; when unset the configured APP_TIMEZONE applies
    timezone: Optional[str] = None


class Block(BaseModel):
    """A placed commitment on a day's timeline."""

    id: str = Field(..., min_length=1)
    plan_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    movable: bool = True
    locked_length: bool = True
    task_id: Optional[str] = None
    title: Optional[str] = None

    @model_validator(mode="after")
    def _check_range(self) -> "Block":
        if self.end <= self.start:
            raise ValueError("end must be greater than start")
        return self

    @property
    def interval(self) -> Interval:
        return Interval(start=self.start, end=self.end)

    @property
    def duration(self) -> int:
        return self.end - self.start


class Window(BaseModel):
    """A permitted period where movable blocks may be placed (intermission)."""

    id: str = Field(..., min_length=1)
    plan_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_range(self) -> "Window":
        if self.end <= self.start:
            raise ValueError("end must be greater than start")
        return self

    @property
    def interval(self) -> Interval:
        return Interval(start=self.start, end=self.end)
