"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from gridlayout.config import Settings
from gridlayout.grid_layout import GridLayout
from gridlayout.protocols import VisualSurfaceProtocol
from gridlayout.surfaces import InMemorySurface


@pytest.fixture
def test_settings():
    """Settings instance independent of the environment."""
    return Settings(
        log_level="DEBUG",
        default_column_width="auto",
        default_row_height="auto",
        preserve_column_widths=True,
        percentage_precision=6,
    )


@pytest.fixture
def legacy_settings(test_settings):
    """Settings that reset every column width on resize."""
    return test_settings.model_copy(update={"preserve_column_widths": False})


@pytest.fixture
def surface():
    """In-memory visual surface."""
    return InMemorySurface()


@pytest.fixture
def mock_surface():
    """Mock visual surface recording every call."""
    return MagicMock(spec=VisualSurfaceProtocol)


@pytest.fixture
def make_layout(surface, test_settings):
    """Factory for layouts sharing the in-memory surface and test settings."""

    def _make(columns: int = 4, rows: int = 4, **kwargs) -> GridLayout:
        kwargs.setdefault("surface", surface)
        kwargs.setdefault("settings", test_settings)
        return GridLayout(columns, rows, **kwargs)

    return _make


@pytest.fixture
def layout(make_layout):
    """4x4 layout on the in-memory surface."""
    return make_layout(4, 4)
