from __future__ import annotations

from pathlib import Path

from relicbar.presentation.cli.config import debug_enabled, load_config, save_config


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    assert load_config(tmp_path / "config.json") == {"lock_mode": "random"}


def test_save_and_load_round_trip_manual_mode(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    save_config({"lock_mode": "manual"}, path)
    assert load_config(path) == {"lock_mode": "manual"}


def test_invalid_config_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")
    assert load_config(path) == {"lock_mode": "random"}

    path.write_text('{"lock_mode": "sideways"}', encoding="utf-8")
    assert load_config(path) == {"lock_mode": "random"}

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(path) == {"lock_mode": "random"}


def test_debug_flag_requires_explicit_one(monkeypatch) -> None:
    monkeypatch.delenv("RELICBAR_DEBUG", raising=False)
    assert not debug_enabled()
    monkeypatch.setenv("RELICBAR_DEBUG", "true")
    assert not debug_enabled()
    monkeypatch.setenv("RELICBAR_DEBUG", "1")
    assert debug_enabled()
