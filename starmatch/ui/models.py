"""View models the widgets render from a session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from starmatch.core.round import TileStatus
from starmatch.core.session import RoundSession
from starmatch.ui.colors import tile_color


@dataclass(frozen=True)
class TileView:
    """Display state for one numbered tile."""

    number: int
    status: TileStatus
    color: str
    enabled: bool


def build_tile_views(session: RoundSession) -> List[TileView]:
    """Tiles in board order; only unused tiles of an active round are clickable."""
    active = session.is_active()
    return [
        TileView(
            number=number,
            status=status,
            color=tile_color(status),
            enabled=active and status is not TileStatus.USED,
        )
        for number, status in session.tile_statuses().items()
    ]
