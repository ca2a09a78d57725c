"""Pydantic models (schemas) for the application."""

from dayplan.models.enums import CandidateLabel, PlacementStrategy
from dayplan.models.interval import Interval
from dayplan.models.plan import Block, Plan, Window
from dayplan.models.schedule import (
    AdoptRequest,
    AdoptResponse,
    BlockMove,
    Candidate,
    InterruptRequest,
    InterruptResponse,
    InterruptResult,
    Interruption,
    UnplacedBlock,
)

__all__ = [
    # Enums
    "CandidateLabel",
    "PlacementStrategy",
    # Plan
    "Interval",
    "Plan",
    "Block",
    "Window",
    # Scheduling
    "Interruption",
    "BlockMove",
    "UnplacedBlock",
    "Candidate",
    "InterruptResult",
    "InterruptRequest",
    "InterruptResponse",
    "AdoptRequest",
    "AdoptResponse",
]
