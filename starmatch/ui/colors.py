"""Theme colors and color utilities for the UI."""

from __future__ import annotations

from typing import Optional, Tuple

from starmatch.core.round import RoundStatus, TileStatus


class GameColors:
    """Light palette for the board; tile colors follow the classic Star Match scheme."""

    BG = "#f5f7f8"
    STAR = "#ffb300"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"
    CORAL = "#ff8a65"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_MUTED = "#78909c"

    LOST = "#ff0000"
    WON = "#008000"


# lightgray, lightgreen, lightcoral, deepskyblue
TILE_COLORS = {
    TileStatus.AVAILABLE: "#D3D3D3",
    TileStatus.USED: "#90EE90",
    TileStatus.WRONG: "#F08080",
    TileStatus.CANDIDATE: "#00BFFF",
}


def tile_color(status: TileStatus) -> str:
    return TILE_COLORS[status]


def outcome_message(status: RoundStatus) -> Optional[Tuple[str, str]]:
    """Return (message, color) for a finished round, or None while it is active."""
    if status is RoundStatus.LOST:
        return "Game Over", GameColors.LOST
    if status is RoundStatus.WON:
        return "You Won!", GameColors.WON
    return None


def timer_color(seconds_remaining: int, total_seconds: int) -> str:
    """Fade the countdown from the primary color to coral as time runs out."""
    if total_seconds <= 0:
        return GameColors.CORAL
    return blend_hex(GameColors.PRIMARY, GameColors.CORAL, 1.0 - seconds_remaining / total_seconds)


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        channels = []
        for i in (1, 3, 5):
            start, end = int(a[i:i + 2], 16), int(b[i:i + 2], 16)
            channels.append(int(start + (end - start) * t))
        return "#{:02X}{:02X}{:02X}".format(*channels)
    except ValueError:
        return a
