"""Random target selection over the sums reachable from a pool of tiles."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional


def achievable_sums(pool: Iterable[int], bound: int) -> List[int]:
    """Return the sum of every non-empty subset of ``pool`` that is ``<= bound``.

    A sum appears once per subset that produces it, so ``{1, 2, 3}`` with
    bound 3 yields ``[1, 2, 3, 3]``.  Subsets are only extended while their sum
    stays within ``bound``; tiles are positive, so nothing is missed.
    """
    subset_sums = [0]
    sums: List[int] = []
    for number in sorted(pool):
        for base in list(subset_sums):
            total = base + number
            if total <= bound:
                subset_sums.append(total)
                sums.append(total)
    return sums


def choose_next_target(
    pool: Iterable[int],
    bound: int,
    rng: Optional[random.Random] = None,
) -> int:
    """Pick a target that some non-empty subset of ``pool`` sums to.

    The draw is uniform over subsets, not over distinct sums: a sum reachable
    by more subsets is proportionally more likely.
    """
    numbers = sorted(pool)
    sums = achievable_sums(numbers, bound)
    if not sums:
        raise ValueError(f"no subset of {numbers} sums to {bound} or less")
    return (rng or random).choice(sums)
