"""Unit tests for display formatters."""

import pytest

from roomcost.domain import CostEngine, LayoutEngine, Room
from roomcost.infrastructure import CostReportFormatter, DisplayFormatter, LabelTextFormatter


class TestDisplayFormatter:
    """Tests for number formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"), [(5.0, "5"), (2.5, "2.5"), (0.0, "0"), (12.75, "12.75")]
    )
    def test_format_length(self, value: float, expected: str) -> None:
        assert DisplayFormatter().format_length(value) == expected

    def test_format_area(self) -> None:
        assert DisplayFormatter().format_area(20) == "20.00"
        assert DisplayFormatter().format_area(71.456) == "71.46"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(858, "$858.00"), (1234.5, "$1,234.50"), (0, "$0.00"), (1_000_000, "$1,000,000.00")],
    )
    def test_format_currency(self, value: float, expected: str) -> None:
        assert DisplayFormatter().format_currency(value) == expected

    def test_custom_currency_symbol(self) -> None:
        assert DisplayFormatter(currency_symbol="€").format_currency(12) == "€12.00"


class TestLabelTextFormatter:
    """Tests for filling label templates."""

    def test_formats_each_field_by_name(self, standard_room: Room) -> None:
        standard_room.set_dimension("length", 2.5)
        standard_room.add_layer({"unit_price": 10})
        report = CostEngine().compute(standard_room)
        layout = LayoutEngine().compute(standard_room, report)
        texts = [LabelTextFormatter().format(label) for label in layout.labels]
        assert texts[0] == "2.5m"
        assert texts[3] == "Floor: 10.00m²"
        assert texts[5] == "Walls: 39.00m²"
        assert texts[6] == "Total: $590.00"


class TestCostReportFormatter:
    """Tests for the plain-text report."""

    def test_report_lists_layers_and_total(self, standard_room: Room) -> None:
        standard_room.add_layer({"name": "Paint", "unit_price": 12, "applies_floor": False})
        text = CostReportFormatter().format(CostEngine().compute(standard_room))
        assert "ROOM AREAS" in text
        assert "54.00" in text
        assert "Paint" in text
        assert "$888.00" in text
        assert text.splitlines()[-1].startswith("TOTAL")

    def test_report_without_layers(self, standard_room: Room) -> None:
        text = CostReportFormatter().format(CostEngine().compute(standard_room))
        assert "No material layers." in text
        assert "$0.00" in text
