"""
Interval rescheduling engine.

Re-packs movable blocks into permitted windows after an interruption,
and lays out blocks onto a target day when the user accepts a fallback
candidate. Everything here is pure: inputs are snapshots and the result
is returned, never written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from dayplan.core.logger import setup_logger
from dayplan.models.enums import CandidateLabel, PlacementStrategy
from dayplan.models.interval import Interval
from dayplan.models.plan import Block, Window
from dayplan.models.schedule import (
    BlockMove,
    Candidate,
    InterruptResult,
    Interruption,
    UnplacedBlock,
)
from dayplan.utils.interval_utils import subtract

logger = setup_logger(__name__)


@dataclass
class PlacementOutcome:
    moved: list[BlockMove] = field(default_factory=list)
    unplaced: list[UnplacedBlock] = field(default_factory=list)


def _find_slot(
    duration: int,
    floor: int,
    windows: Sequence[Interval],
    occupied: Sequence[Interval],
) -> Interval | None:
    """First free slice, in window order, that can hold `duration`."""
    for window in windows:
        candidate_start = max(floor, window.start)
        if candidate_start >= window.end:
            continue
        free_slices = subtract(Interval(start=candidate_start, end=window.end), occupied)
        for free in free_slices:
            if free.duration >= duration:
                return Interval(start=free.start, end=free.start + duration)
    return None


def place_blocks(
    blocks: Sequence[Block],
    windows: Sequence[Interval],
    occupied: Sequence[Interval],
    floor: int,
    strategy: PlacementStrategy,
) -> PlacementOutcome:
    """
    Place `blocks` in the given order, never splitting a block.

    Args:
        blocks: Blocks to relocate, in priority order
        windows: Permitted intervals, sorted by start
        occupied: Time that is already taken
        floor: Earliest instant a block may start
        strategy: INDEPENDENT keeps `floor` fixed and reports blocks that do
            not fit; CONTIGUOUS advances `floor` past each placed block and
            appends blocks that do not fit after the latest occupied instant

    Returns:
        PlacementOutcome with moves and unplaced blocks (always empty for
        CONTIGUOUS)
    """
    taken = list(occupied)
    outcome = PlacementOutcome()
    cursor = floor

    for block in blocks:
        duration = block.duration
        placed = _find_slot(duration, cursor, windows, taken)

        if placed is None and strategy is PlacementStrategy.CONTIGUOUS:
            last_end = max([cursor, *(busy.end for busy in taken)])
            placed = Interval(start=last_end, end=last_end + duration)

        if placed is None:
            outcome.unplaced.append(UnplacedBlock(id=block.id, duration=duration))
            continue

        outcome.moved.append(BlockMove(id=block.id, from_=block.interval, to=placed))
        taken.append(placed)
        if strategy is PlacementStrategy.CONTIGUOUS:
            cursor = placed.end

    return outcome


def _sorted_windows(windows: Sequence[Window]) -> list[Interval]:
    return [window.interval for window in sorted(windows, key=lambda w: w.start)]


def build_candidates(
    unplaced: Sequence[UnplacedBlock],
    today_end: int,
    tomorrow_morning: int,
    tomorrow_evening: int,
) -> list[Candidate]:
    """
    Fallback slots sized to the total unplaced duration.

    Per-block granularity is intentionally dropped: each candidate reserves
    one contiguous span for everything that did not fit.
    """
    if not unplaced:
        return []
    total = sum(item.duration for item in unplaced)
    anchors = (
        (CandidateLabel.TODAY_END, today_end),
        (CandidateLabel.TOMORROW_MORNING, tomorrow_morning),
        (CandidateLabel.TOMORROW_EVENING, tomorrow_evening),
    )
    return [Candidate(label=label, start=anchor, end=anchor + total) for label, anchor in anchors]


def is_movable(block: Block, interruption_start: int) -> bool:
    return block.movable and block.locked_length and block.end > interruption_start


def plan_interrupt(
    blocks: Sequence[Block],
    windows: Sequence[Window],
    interruption: Interruption,
    today_end: int,
    tomorrow_morning: int,
    tomorrow_evening: int,
) -> InterruptResult:
    """
    Relocate movable blocks after an interruption.

    Movable blocks are relocated in order of their original start and each
    may begin no earlier than the end of the interruption. Every other block
    is fixed occupancy. Blocks that fit nowhere are reported as unplaced and
    three candidate slots are offered for them.

    Args:
        blocks: Every block of the plan
        windows: Every permitted window of the plan, in any order
        interruption: Span to carve out
        today_end: Anchor for the "today_end" candidate
        tomorrow_morning: Anchor for the "tomorrow_morning" candidate
        tomorrow_evening: Anchor for the "tomorrow_evening" candidate

    Raises:
        ValueError: If the interruption has neither duration nor end
    """
    cursor_start = interruption.resolve_end()

    movable = sorted(
        (block for block in blocks if is_movable(block, interruption.start)),
        key=lambda block: block.start,
    )
    movable_ids = {block.id for block in movable}
    occupied = [block.interval for block in blocks if block.id not in movable_ids]

    outcome = place_blocks(
        movable,
        _sorted_windows(windows),
        occupied,
        floor=cursor_start,
        strategy=PlacementStrategy.INDEPENDENT,
    )
    candidates = build_candidates(outcome.unplaced, today_end, tomorrow_morning, tomorrow_evening)

    logger.info(
        f"Interrupt plan: {len(outcome.moved)}/{len(movable)} movable blocks placed "
        f"after {cursor_start}, {len(outcome.unplaced)} unplaced, "
        f"{len(occupied)} fixed, {len(windows)} windows"
    )

    return InterruptResult(
        moved=outcome.moved,
        unplaced=outcome.unplaced,
        candidates=candidates,
    )


def plan_adopt(
    target_blocks: Sequence[Block],
    target_windows: Sequence[Window],
    blocks_to_relocate: Sequence[Block],
    start_seed: int,
) -> list[BlockMove]:
    """
    Lay blocks out one after another on a target day from `start_seed`.

    Blocks keep their given order. A block that fits in no window is
    appended after the latest occupied instant, so every block is placed.
    """
    outcome = place_blocks(
        blocks_to_relocate,
        _sorted_windows(target_windows),
        [block.interval for block in target_blocks],
        floor=start_seed,
        strategy=PlacementStrategy.CONTIGUOUS,
    )

    logger.info(
        f"Adopt plan: {len(outcome.moved)} blocks laid out from {start_seed} "
        f"against {len(target_blocks)} occupied, {len(target_windows)} windows"
    )

    return outcome.moved
