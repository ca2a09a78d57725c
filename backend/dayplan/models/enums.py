"""
Enum definitions for the application.

These enums are used across models and provide type-safe label/strategy values.
"""

from enum import Enum


class CandidateLabel(str, Enum):
    """Fallback slot offered when blocks could not be placed."""

    TODAY_END = "today_end"
    TOMORROW_MORNING = "tomorrow_morning"
    TOMORROW_EVENING = "tomorrow_evening"


class PlacementStrategy(str, Enum):
    """
    How the earliest allowed start evolves while placing blocks.

    INDEPENDENT = Every block competes from the same floor; blocks that
                  fit nowhere are reported as unplaced.
    CONTIGUOUS = The floor advances to the end of each placed block;
                 blocks that fit nowhere are appended after the latest
                 occupied instant.
    """

    INDEPENDENT = "independent"
    CONTIGUOUS = "contiguous"
