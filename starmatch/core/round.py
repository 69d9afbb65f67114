"""Round state and transitions for a single play-through of Star Match.

A :class:`PuzzleRound` is an immutable snapshot.  The transition functions
(:func:`initialize`, :func:`tick`, :func:`select_tile`) return a new snapshot
and the status helpers derive tile and round status from the raw state on
every call; nothing derived is ever stored.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, Optional

from starmatch.core.subset_sum import choose_next_target

TILES = tuple(range(1, 10))
TARGET_BOUND = 9
ROUND_SECONDS = 10


class TileStatus(str, Enum):
    AVAILABLE = "available"
    USED = "used"
    CANDIDATE = "candidate"
    WRONG = "wrong"


class RoundStatus(str, Enum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class PuzzleRound:
    """Raw state of one round: target, unused tiles, selection and timer."""

    target: int
    available: FrozenSet[int] = frozenset(TILES)
    candidates: FrozenSet[int] = field(default_factory=frozenset)
    seconds_remaining: int = ROUND_SECONDS

    @property
    def status(self) -> RoundStatus:
        return round_status(self)

    @property
    def candidate_sum(self) -> int:
        return sum(self.candidates)

    @property
    def used(self) -> FrozenSet[int]:
        """Tiles consumed by correct matches so far."""
        return frozenset(TILES) - self.available


def initialize(seconds: int = ROUND_SECONDS, rng: Optional[random.Random] = None) -> PuzzleRound:
    """Start a round with every tile available and a freshly drawn target."""
    available = frozenset(TILES)
    return PuzzleRound(
        target=choose_next_target(available, TARGET_BOUND, rng),
        available=available,
        candidates=frozenset(),
        seconds_remaining=seconds,
    )


def round_status(puzzle: PuzzleRound) -> RoundStatus:
    if not puzzle.available:
        return RoundStatus.WON
    if puzzle.seconds_remaining <= 0:
        return RoundStatus.LOST
    return RoundStatus.ACTIVE


def candidates_are_wrong(puzzle: PuzzleRound) -> bool:
    return puzzle.candidate_sum > puzzle.target


def tile_status(puzzle: PuzzleRound, number: int) -> TileStatus:
    if number not in puzzle.available:
        return TileStatus.USED
    if number in puzzle.candidates:
        return TileStatus.WRONG if candidates_are_wrong(puzzle) else TileStatus.CANDIDATE
    return TileStatus.AVAILABLE


def tick(puzzle: PuzzleRound) -> PuzzleRound:
    """Count one second off an active round; terminal rounds are returned as-is."""
    if round_status(puzzle) is not RoundStatus.ACTIVE:
        return puzzle
    return replace(puzzle, seconds_remaining=max(0, puzzle.seconds_remaining - 1))


def select_tile(
    puzzle: PuzzleRound,
    number: int,
    rng: Optional[random.Random] = None,
) -> PuzzleRound:
    """Toggle ``number`` in the selection, consuming the tiles on a correct match.

    Used tiles (and numbers that were never tiles) are ignored.  When the
    toggled selection sums to the target its tiles leave the pool and, unless
    the pool is now empty, a new target is drawn from what remains.
    """
    if tile_status(puzzle, number) is TileStatus.USED:
        return puzzle

    candidates = puzzle.candidates ^ {number}
    if sum(candidates) != puzzle.target:
        return replace(puzzle, candidates=candidates)

    available = puzzle.available - candidates
    target = puzzle.target
    if available:
        target = choose_next_target(available, TARGET_BOUND, rng)
    return replace(puzzle, target=target, available=available, candidates=frozenset())
