"""Pytest configuration and shared fixtures for cut analysis tests."""

from __future__ import annotations

import pytest

from plankcut.models import Point2D, ProjectConfig


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests through the API")


def _room(width: float, height: float) -> list[Point2D]:
    """Rectangular room outline with its corner at the origin."""
    return [
        Point2D(x=0, y=0),
        Point2D(x=width, y=0),
        Point2D(x=width, y=height),
        Point2D(x=0, y=height),
    ]


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def single_row_config() -> ProjectConfig:
    """One row of 2400mm planks in a 2400mm tall room."""
    return ProjectConfig(
        plank_full_length=2400,
        plank_width=190,
        room_polygon=_room(190, 2400),
        saw_kerf=3,
        min_cut_length=300,
        row_offsets=[0],
    )


@pytest.fixture
def default_config() -> ProjectConfig:
    return ProjectConfig()


@pytest.fixture
def staggered_config() -> ProjectConfig:
    """A small room with mixed positive and negative row offsets."""
    return ProjectConfig(
        room_polygon=_room(760, 3000),
        row_offsets=[0, -800, -1600, -400],
    )
