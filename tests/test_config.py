from __future__ import annotations

import pytest

from devsketch.core.config import Config


def test_defaults_match_reference_canvas() -> None:
    cfg = Config(_env_file=None)
    assert (cfg.reference_width, cfg.reference_height) == (375, 812)
    assert cfg.row_threshold == 0.08
    assert cfg.preview_limit == 5
    assert cfg.validate_config() is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEVSKETCH_ROW_THRESHOLD", "0.12")
    monkeypatch.setenv("DEVSKETCH_ROW_STRATEGY", "anchored")
    cfg = Config(_env_file=None)
    assert cfg.row_threshold == 0.12
    assert cfg.row_strategy == "anchored"


@pytest.mark.parametrize(
    "overrides",
    [
        {"row_threshold": 1.5},
        {"row_strategy": "zigzag"},
        {"reference_width": 0},
        {"min_confidence": -0.1},
        {"preview_limit": -1},
    ],
)
def test_validate_config_rejects_bad_values(overrides) -> None:
    with pytest.raises(ValueError):
        Config(_env_file=None, **overrides).validate_config()
