"""
Half-open time interval model.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class Interval(BaseModel):
    """Half-open interval [start, end) in epoch milliseconds."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @model_validator(mode="after")
    def _check_range(self) -> "Interval":
        if self.end <= self.start:
            raise ValueError("end must be greater than start")
        return self

    @property
    def duration(self) -> int:
        return self.end - self.start
