"""Shared fixtures for amber_levels tests."""

from pathlib import Path

import pytest

from amber_levels.levels import LevelLoader
from amber_levels.settings import AppSettings


@pytest.fixture
def loader() -> LevelLoader:
    return LevelLoader()


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    """Settings stored in a throwaway INI file."""
    return AppSettings(settings_file=tmp_path / "settings.ini")
