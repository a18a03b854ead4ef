"""Tests for pages file resolution."""

from pathlib import Path

import pytest

from pagetree import config


def test_env_override_wins(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(config.PAGES_FILE_ENV, str(tmp_path / "custom.json"))
    assert config.resolve_pages_file() == tmp_path / "custom.json"


def test_first_existing_candidate_is_used(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"
    present = tmp_path / "present.json"
    present.write_text("[]")
    monkeypatch.delenv(config.PAGES_FILE_ENV, raising=False)
    monkeypatch.setattr(config, "PAGES_FILES", [missing, present])
    assert config.resolve_pages_file() == present


def test_falls_back_to_first_candidate(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    candidates = [tmp_path / "a.json", tmp_path / "b.json"]
    monkeypatch.delenv(config.PAGES_FILE_ENV, raising=False)
    monkeypatch.setattr(config, "PAGES_FILES", candidates)
    assert config.resolve_pages_file() == candidates[0]
