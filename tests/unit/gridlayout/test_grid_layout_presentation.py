"""Tests for column widths, alignment, margin, spacing and snapshots."""

import pytest

from gridlayout.exceptions import InvalidArgumentException
from gridlayout.grid_layout import GridLayout
from gridlayout.models.alignment import Alignment
from gridlayout.models.base_models import Area, MarginInfo
from gridlayout.models.units import Unit


class TestColumnWidths:
    """Tests for set_column_width / set_column_expand_ratio."""

    def test_percentage_widths(self, layout, surface):
        layout.set_column_width(1, "10%")
        layout.set_column_width(3, "30%")
        layout.set_column_width(4, "40%")

        assert layout.column_widths == ["10%", "auto", "30%", "40%"]
        assert surface.column_template == "10% auto 30% 40%"

    def test_unit_widths(self, layout, surface):
        layout.set_column_width(1, 10, Unit.EM)
        layout.set_column_width(3, 10, Unit.EM)
        layout.set_column_width(4, 20, Unit.EM)

        assert surface.column_template == "10em auto 10em 20em"
        assert layout.get_column_width(4) == "20em"

    @pytest.mark.parametrize("index", [0, 5])
    def test_index_out_of_range(self, layout, index):
        with pytest.raises(InvalidArgumentException):
            layout.set_column_width(index, "10px")
        with pytest.raises(InvalidArgumentException):
            layout.set_column_expand_ratio(index, 1)
        with pytest.raises(InvalidArgumentException):
            layout.get_column_width(index)

    def test_expand_ratio_quarters(self, make_layout, surface):
        layout = make_layout(2, 1)
        layout.set_column_expand_ratio(1, 1)
        layout.set_column_expand_ratio(2, 3)

        assert layout.column_widths == ["25%", "75%"]
        assert surface.column_template == "25% 75%"
        assert layout.get_column_expand_ratio(2) == 3.0

    def test_expand_ratio_idempotent(self, layout):
        ratios = {1: 1, 2: 1, 3: 2, 4: 4}
        for index, ratio in ratios.items():
            layout.set_column_expand_ratio(index, ratio)
        first = layout.column_widths

        for index, ratio in ratios.items():
            layout.set_column_expand_ratio(index, ratio)

        assert layout.column_widths == first

    def test_expand_ratios_created_lazily(self, layout):
        assert layout.column_expand_ratios is None
        assert layout.get_column_expand_ratio(1) == 0.0

        layout.set_column_expand_ratio(2, 1)

        assert layout.column_expand_ratios == [None, 1.0, None, None]
        assert layout.column_widths == ["auto", "100%", "auto", "auto"]

    def test_custom_default_width(self, surface, test_settings):
        settings = test_settings.model_copy(update={"default_column_width": "1fr"})
        layout = GridLayout(3, 1, surface=surface, settings=settings)

        assert layout.column_widths == ["1fr", "1fr", "1fr"]


class TestAlignment:
    """Tests for component alignment."""

    def test_default_is_top_left(self, layout):
        layout.add_component("a")

        assert layout.default_component_alignment == Alignment.TOP_LEFT
        assert layout.get_component_alignment("a") == Alignment.TOP_LEFT

    def test_set_and_reset(self, layout):
        layout.add_component("a")

        layout.set_component_alignment("a", Alignment.MIDDLE_CENTER)
        assert layout.get_component_alignment("a") == Alignment.MIDDLE_CENTER

        layout.set_component_alignment("a", None)
        assert layout.get_component_alignment("a") == Alignment.TOP_LEFT

    def test_unknown_component(self, layout):
        with pytest.raises(InvalidArgumentException):
            layout.get_component_alignment("missing")
        with pytest.raises(InvalidArgumentException):
            layout.set_component_alignment("missing", Alignment.TOP_RIGHT)

    def test_invalid_alignment(self, layout):
        layout.add_component("a")

        with pytest.raises(InvalidArgumentException):
            layout.set_component_alignment("a", "top")
        with pytest.raises(InvalidArgumentException):
            layout.default_component_alignment = 5

    def test_default_applies_to_later_components(self, layout):
        layout.add_component("before")
        layout.default_component_alignment = Alignment.BOTTOM_CENTER
        layout.add_component("after")

        assert layout.get_component_alignment("before") == Alignment.TOP_LEFT
        assert layout.get_component_alignment("after") == Alignment.BOTTOM_CENTER

    def test_alignment_dropped_on_remove(self, layout):
        layout.add_component("a")
        layout.set_component_alignment("a", Alignment.BOTTOM_RIGHT)
        layout.remove_component("a")
        layout.add_component("a", 2, 2)

        assert layout.get_component_alignment("a") == Alignment.TOP_LEFT


class TestMarginAndSpacing:
    """Tests for margin and spacing pass-through."""

    def test_margin_bool(self, layout, surface):
        layout.set_margin(True)

        assert layout.margin == MarginInfo.all(True)
        assert surface.margin.has_all

    def test_margin_info(self, layout, surface):
        margin = MarginInfo(top=True, bottom=True)
        layout.set_margin(margin)

        assert layout.margin == margin
        assert surface.margin == margin

    def test_margin_invalid(self, layout):
        with pytest.raises(InvalidArgumentException):
            layout.set_margin("yes")
        assert layout.margin.has_none

    def test_spacing(self, layout, surface):
        assert layout.spacing is False

        layout.set_spacing(True)

        assert layout.spacing is True
        assert surface.spacing is True

    def test_presentation_has_no_placement_effect(self, layout):
        layout.add_component("a")
        layout.set_margin(True)
        layout.set_spacing(True)

        assert layout.cursor == (1, 0)
        assert layout.get_component_area("a") == Area.cell(0, 0)


class TestSnapshot:
    """Tests for snapshot()."""

    def test_snapshot(self, layout):
        layout.add_component("b", 1, 1, 2, 1)
        layout.add_component("a")
        layout.set_column_width(1, "50px")
        layout.set_spacing(True)

        snapshot = layout.snapshot()

        assert snapshot.columns == 4
        assert snapshot.rows == 4
        assert snapshot.cursor == (1, 0)
        assert snapshot.column_widths == ["50px", "auto", "auto", "auto"]
        assert snapshot.column_expand_ratios is None
        assert snapshot.spacing is True
        assert [p.item for p in snapshot.placements] == ["'a'", "'b'"]
        assert snapshot.placements[1].area == Area(column1=1, row1=1, column2=2, row2=1)
        assert snapshot.to_log_fields()["component_count"] == 2

    def test_snapshot_is_detached(self, layout):
        snapshot = layout.snapshot()
        layout.add_component("a")

        assert snapshot.placements == []
        assert repr(layout) == "GridLayout(columns=4, rows=4, components=1)"
