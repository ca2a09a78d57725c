"""
Rescheduling inputs and outputs.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dayplan.models.enums import CandidateLabel
from dayplan.models.interval import Interval


class Interruption(BaseModel):
    """
    An externally declared span of time carved out of the plan.

    Either `duration` or `end` must be supplied. When both are present,
    `duration` takes precedence.
    """

    start: int = Field(..., ge=0)
    duration: Optional[int] = Field(None, ge=1)
    end: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def _check_span(self) -> "Interruption":
        if self.duration is None and self.end is None:
            raise ValueError("either duration or end is required")
        if self.duration is None and self.end <= self.start:
            raise ValueError("end must be greater than start")
        return self

    def resolve_end(self) -> int:
        """Return the instant the interruption finishes."""
        if self.duration is not None:
            return self.start + self.duration
        if self.end is not None:
            return self.end
        raise ValueError("Interruption has neither duration nor end")


class BlockMove(BaseModel):
    """A block relocated from one interval to another."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    from_: Interval = Field(..., alias="from")
    to: Interval


class UnplacedBlock(BaseModel):
    """A movable block that did not fit anywhere."""

    id: str
    duration: int = Field(..., ge=1)


class Candidate(BaseModel):
    """Suggested slot for everything that could not be placed."""

    label: CandidateLabel
    start: int
    end: int


class InterruptResult(BaseModel):
    """Outcome of one interrupt planning pass."""

    moved: list[BlockMove] = Field(default_factory=list)
    unplaced: list[UnplacedBlock] = Field(default_factory=list)
    candidates: list[Candidate] = Field(default_factory=list)


# ===========================================
# API payloads
# ===========================================


class InterruptRequest(Interruption):
    plan_id: str = Field(..., min_length=1)


class InterruptResponse(InterruptResult):
    ok: bool = True


class AdoptRequest(BaseModel):
    plan_id: str = Field(..., min_length=1)
    label: CandidateLabel
    block_ids: Optional[list[str]] = Field(
        None,
        description="Blocks to relocate; defaults to the plan's remaining movable blocks",
    )


class AdoptResponse(BaseModel):
    ok: bool = True
    adopted: list[BlockMove] = Field(default_factory=list)
    target_plan_id: str
