"""Shared fixtures for dingus tests."""

from pathlib import Path

import pytest


@pytest.fixture
def config_folder(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty config folder that dingus.config.config_dir() points at."""
    folder = tmp_path / "config" / "dingus"
    folder.mkdir(parents=True)
    monkeypatch.setenv("DINGUS_CONFIG_DIR", str(folder))
    return folder


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """/proj with a .dingus marker and a nested /proj/src/lib."""
    root = tmp_path / "proj"
    (root / "src" / "lib").mkdir(parents=True)
    (root / ".dingus").write_text('FOO: "1"\nBAR: "2"\n', encoding="utf-8")
    return root
