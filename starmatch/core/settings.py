from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

logger = logging.getLogger(__name__)

SETTINGS_ENV = "STARMATCH_SETTINGS"


@dataclass(frozen=True)
class GameSettings:
    round_seconds: int = 10
    tick_interval_ms: int = 1000
    seed: Optional[int] = None


def default_settings_path() -> Path:
    """Settings file named by $STARMATCH_SETTINGS, else the bundled data/settings.yaml."""
    override = os.environ.get(SETTINGS_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


def load_settings(path: Optional[Union[str, Path]] = None) -> GameSettings:
    settings_path = Path(path) if path is not None else default_settings_path()
    if not settings_path.exists():
        logger.warning("Settings file not found: %s; using defaults", settings_path)
        return GameSettings()

    raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    if raw is None:
        return GameSettings()
    if not isinstance(raw, dict):
        raise ValueError(f"{settings_path.name}: expected a YAML mapping of settings")

    defaults = GameSettings()
    round_seconds = _positive_int(settings_path, raw, "round_seconds", defaults.round_seconds)
    tick_interval_ms = _positive_int(settings_path, raw, "tick_interval_ms", defaults.tick_interval_ms)

    seed = raw.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"{settings_path.name}: 'seed' must be an integer or empty")

    unknown = set(raw) - {"round_seconds", "tick_interval_ms", "seed"}
    if unknown:
        logger.warning("Ignoring unknown settings in %s: %s", settings_path, ", ".join(sorted(unknown)))

    return GameSettings(round_seconds=round_seconds, tick_interval_ms=tick_interval_ms, seed=seed)


def _positive_int(settings_path: Path, raw: dict, key: str, default: int) -> int:
    value = raw.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{settings_path.name}: '{key}' must be a positive integer")
    return value
