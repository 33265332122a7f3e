"""Pytest configuration and fixtures for VFX Quote tests."""

from pathlib import Path

import pytest

from vfxquote.models import Complexity, Resolution, ShotConfiguration


@pytest.fixture
def project_path(tmp_path: Path) -> Path:
    """Return a project file path inside a temporary directory."""
    return tmp_path / "project.json"


@pytest.fixture
def base_shot() -> ShotConfiguration:
    """10,000 per second for five seconds, nothing else selected."""
    return ShotConfiguration(base_price=10000, duration=5)


@pytest.fixture
def busy_shot(base_shot: ShotConfiguration) -> ShotConfiguration:
    """A shot touching several tables at once."""
    return base_shot.with_changes(
        resolution=Resolution.UHD_4K,
        roto=Complexity.EASY,
        simulation=Complexity.HARD,
        frame_rate="60",
    )


@pytest.fixture(autouse=True)
def wide_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from wrapping CLI output that embeds long temp paths."""
    monkeypatch.setenv("COLUMNS", "200")
