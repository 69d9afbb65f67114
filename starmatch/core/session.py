from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional

from starmatch.core import round as engine
from starmatch.core.round import TILES, PuzzleRound, RoundStatus, TileStatus
from starmatch.core.scheduler import ManualScheduler, TickScheduler
from starmatch.core.settings import GameSettings

logger = logging.getLogger(__name__)

Listener = Callable[["RoundSession"], None]


class RoundSession:
    """Owns the live round, its countdown scheduler and change listeners.

    Starting a new round throws the previous one away together with its
    schedule.  Every scheduled tick is bound to the round number it was
    started for, so a tick that arrives after the round was replaced is
    dropped instead of counting down the new round.
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        scheduler: Optional[TickScheduler] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Create an idle session; call :meth:`start_new_round` to begin play."""
        self._settings = settings or GameSettings()
        self._scheduler = scheduler if scheduler is not None else ManualScheduler()
        self._rng = rng or random.Random(self._settings.seed)
        self._round: Optional[PuzzleRound] = None
        self._round_number = 0
        self._listeners: List[Listener] = []

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def round(self) -> PuzzleRound:
        """The current round snapshot."""
        if self._round is None:
            raise RuntimeError("No round has been started")
        return self._round

    @property
    def round_number(self) -> int:
        """How many rounds this session has started (1-based once playing)."""
        return self._round_number

    @property
    def target(self) -> int:
        return self.round.target

    @property
    def seconds_remaining(self) -> int:
        return self.round.seconds_remaining

    @property
    def status(self) -> RoundStatus:
        return engine.round_status(self.round)

    def is_active(self) -> bool:
        return self._round is not None and self.status is RoundStatus.ACTIVE

    def tile_status(self, number: int) -> TileStatus:
        return engine.tile_status(self.round, number)

    def tile_statuses(self) -> Dict[int, TileStatus]:
        """Status of every tile, keyed by tile number."""
        return {number: engine.tile_status(self.round, number) for number in TILES}

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every state change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start_new_round(self) -> PuzzleRound:
        """Replace the current round (if any) with a fresh one and start the clock."""
        self._scheduler.stop()
        self._round_number += 1
        self._round = engine.initialize(self._settings.round_seconds, self._rng)
        round_number = self._round_number
        self._scheduler.start(
            self._settings.tick_interval_ms,
            lambda: self._scheduled_tick(round_number),
        )
        logger.info(
            "Round %d started: target=%d, %ds on the clock",
            round_number,
            self._round.target,
            self._round.seconds_remaining,
        )
        self._notify()
        return self._round

    def select_tile(self, number: int) -> PuzzleRound:
        """Toggle a tile for the live round; ignored once the round is over."""
        current = self.round
        if not self.is_active():
            logger.debug("Ignoring tile %d: round %d is %s", number, self._round_number, self.status.value)
            return current

        updated = engine.select_tile(current, number, self._rng)
        if updated is current:
            return current
        if updated.available != current.available:
            logger.debug(
                "Round %d: matched %s for target %d",
                self._round_number,
                sorted(current.available - updated.available),
                current.target,
            )
        return self._apply(updated)

    def tick(self) -> PuzzleRound:
        """Count one second off the live round."""
        current = self.round
        if not self.is_active():
            return current
        return self._apply(engine.tick(current))

    def stop(self) -> None:
        """Cancel the countdown without touching the round."""
        self._scheduler.stop()

    def _scheduled_tick(self, round_number: int) -> None:
        if round_number != self._round_number:
            logger.debug("Dropping tick for replaced round %d", round_number)
            return
        self.tick()

    def _apply(self, updated: PuzzleRound) -> PuzzleRound:
        self._round = updated
        status = engine.round_status(updated)
        if status is not RoundStatus.ACTIVE:
            self._scheduler.stop()
            if status is RoundStatus.WON:
                logger.info("Round %d won with %ds left", self._round_number, updated.seconds_remaining)
            else:
                logger.info("Round %d lost with tiles %s left", self._round_number, sorted(updated.available))
        self._notify()
        return updated

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
