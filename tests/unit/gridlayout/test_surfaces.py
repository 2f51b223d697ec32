"""Tests for the in-memory visual surface and the surface protocol."""

from unittest.mock import call

import pytest

from gridlayout.exceptions import ErrorCode, SurfaceRejectedException
from gridlayout.grid_layout import GridLayout
from gridlayout.models.base_models import Area, MarginInfo
from gridlayout.protocols import VisualSurfaceProtocol
from gridlayout.surfaces import InMemorySurface, grid_area_style


def test_in_memory_surface_satisfies_protocol():
    assert isinstance(InMemorySurface(), VisualSurfaceProtocol)


def test_grid_area_style_uses_one_based_exclusive_lines():
    style = grid_area_style(Area(column1=1, row1=2, column2=1, row2=3))

    assert style == {
        "grid-row-start": "3",
        "grid-row-end": "5",
        "grid-column-start": "2",
        "grid-column-end": "3",
    }


def test_attach_and_detach(surface):
    surface.attach("a", Area.cell(0, 0))
    surface.attach("b", Area.cell(1, 0))

    surface.detach("a")
    surface.detach("missing")

    assert surface.items == ["b"]


def test_duplicate_attach_rejected(surface):
    surface.attach("a", Area.cell(0, 0))

    with pytest.raises(SurfaceRejectedException) as exc_info:
        surface.attach("a", Area.cell(1, 1))

    assert exc_info.value.code == ErrorCode.SURFACE_REJECTED
    assert surface.style_of("a")["grid-column-start"] == "1"


def test_detach_all(surface):
    surface.attach("a", Area.cell(0, 0))
    surface.detach_all()

    assert surface.items == []


def test_templates_margin_spacing(surface):
    surface.apply_column_template(["10%", "auto"])
    surface.apply_row_template(["auto"])
    surface.apply_margin(MarginInfo(left=True))
    surface.apply_spacing(True)

    assert surface.column_template == "10% auto"
    assert surface.row_template == "auto"
    assert surface.margin.left
    assert surface.spacing


class TestLayoutSurfaceCalls:
    """The layout talks to its surface only through the protocol."""

    def test_placement_calls(self, mock_surface, test_settings):
        layout = GridLayout(2, 2, surface=mock_surface, settings=test_settings)

        layout.add_component("a", 0, 0, 1, 0)
        layout.remove_component("a")
        layout.remove_all_components()

        mock_surface.attach.assert_called_once_with("a", Area(column1=0, row1=0, column2=1, row2=0))
        mock_surface.detach.assert_called_once_with("a")
        mock_surface.detach_all.assert_called_once_with()

    def test_template_calls(self, mock_surface, test_settings):
        layout = GridLayout(2, 1, surface=mock_surface, settings=test_settings)
        layout.add_component("a")
        layout.add_component("b")
        layout.add_component("c")  # grows to two rows

        assert mock_surface.apply_column_template.call_args_list == [call(["auto", "auto"])]
        assert mock_surface.apply_row_template.call_args_list == [call(["auto"]), call(["auto", "auto"])]

    def test_presentation_calls(self, mock_surface, test_settings):
        layout = GridLayout(1, 1, surface=mock_surface, settings=test_settings)

        layout.set_margin(False)
        layout.set_spacing(True)

        mock_surface.apply_margin.assert_called_once_with(MarginInfo())
        mock_surface.apply_spacing.assert_called_once_with(True)
