"""Tests for starmatch.core.settings – YAML configuration."""

from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest
import yaml

from starmatch.core.settings import SETTINGS_ENV, GameSettings, default_settings_path, load_settings


def _write_yaml(path: Path, data) -> Path:
    path.write_text(yaml.dump(data, default_flow_style=False), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# GameSettings dataclass
# ---------------------------------------------------------------------------

class TestGameSettings:
    def test_defaults(self):
        s = GameSettings()
        assert s.round_seconds == 10
        assert s.tick_interval_ms == 1000
        assert s.seed is None

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            GameSettings().round_seconds = 5  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Default path
# ---------------------------------------------------------------------------

class TestDefaultPath:
    def test_bundled_file(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv(SETTINGS_ENV, raising=False)
        path = default_settings_path()
        assert path.name == "settings.yaml"
        assert path.parent.name == "data"
        assert path.exists()

    def test_bundled_file_loads_defaults(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv(SETTINGS_ENV, raising=False)
        assert load_settings() == GameSettings()

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        f = _write_yaml(tmp_path / "custom.yaml", {"round_seconds": 20})
        monkeypatch.setenv(SETTINGS_ENV, str(f))
        assert default_settings_path() == f
        assert load_settings().round_seconds == 20


# ---------------------------------------------------------------------------
# load_settings
# ---------------------------------------------------------------------------

class TestLoadSettings:
    def test_full_file(self, tmp_path: Path):
        f = _write_yaml(tmp_path / "s.yaml", {"round_seconds": 15, "tick_interval_ms": 500, "seed": 7})
        assert load_settings(f) == GameSettings(round_seconds=15, tick_interval_ms=500, seed=7)

    def test_partial_file_keeps_defaults(self, tmp_path: Path):
        f = _write_yaml(tmp_path / "s.yaml", {"seed": 3})
        s = load_settings(f)
        assert s.round_seconds == 10
        assert s.tick_interval_ms == 1000
        assert s.seed == 3

    def test_accepts_str_path(self, tmp_path: Path):
        f = _write_yaml(tmp_path / "s.yaml", {"round_seconds": 12})
        assert load_settings(str(f)).round_seconds == 12

    def test_empty_file(self, tmp_path: Path):
        f = tmp_path / "s.yaml"
        f.write_text("", encoding="utf-8")
        assert load_settings(f) == GameSettings()

    def test_missing_file_warns(self, tmp_path: Path, caplog):
        caplog.set_level(logging.WARNING, logger="starmatch.core.settings")
        assert load_settings(tmp_path / "nope.yaml") == GameSettings()
        assert "not found" in caplog.text

    def test_unknown_keys_warn(self, tmp_path: Path, caplog):
        caplog.set_level(logging.WARNING, logger="starmatch.core.settings")
        f = _write_yaml(tmp_path / "s.yaml", {"difficulty": "hard"})
        assert load_settings(f) == GameSettings()
        assert "difficulty" in caplog.text

    def test_not_a_mapping(self, tmp_path: Path):
        f = _write_yaml(tmp_path / "s.yaml", [1, 2, 3])
        with pytest.raises(ValueError, match="mapping"):
            load_settings(f)

    @pytest.mark.parametrize("value", [0, -5, "ten", 1.5, True])
    def test_invalid_round_seconds(self, tmp_path: Path, value):
        f = _write_yaml(tmp_path / "s.yaml", {"round_seconds": value})
        with pytest.raises(ValueError, match="round_seconds"):
            load_settings(f)

    def test_invalid_interval(self, tmp_path: Path):
        f = _write_yaml(tmp_path / "s.yaml", {"tick_interval_ms": 0})
        with pytest.raises(ValueError, match="tick_interval_ms"):
            load_settings(f)

    @pytest.mark.parametrize("value", ["abc", 2.5, False])
    def test_invalid_seed(self, tmp_path: Path, value):
        f = _write_yaml(tmp_path / "s.yaml", {"seed": value})
        with pytest.raises(ValueError, match="seed"):
            load_settings(f)

    def test_error_names_file(self, tmp_path: Path):
        f = _write_yaml(tmp_path / "broken.yaml", {"round_seconds": -1})
        with pytest.raises(ValueError, match="broken.yaml"):
            load_settings(f)
