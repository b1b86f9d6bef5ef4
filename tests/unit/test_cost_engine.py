"""Unit tests for CostEngine."""

import math
from typing import Any

import pytest

from roomcost.domain import CostEngine, Room


@pytest.fixture
def engine() -> CostEngine:
    return CostEngine()


class TestComputeAreas:
    """Tests for base area derivation."""

    def test_standard_room(self, engine: CostEngine, standard_room: Room) -> None:
        """5 x 4 x 3 room: 54 m² walls, 20 m² floor and ceiling."""
        report = engine.compute(standard_room)
        areas = report.areas
        assert areas.wall_area == pytest.approx(54.0)
        assert areas.floor_area == pytest.approx(20.0)
        assert areas.ceiling_area == pytest.approx(20.0)
        assert areas.avg_wall_area == pytest.approx(13.5)
        assert areas.total_area == pytest.approx(94.0)

    def test_degenerate_room(self, engine: CostEngine) -> None:
        """All-zero dimensions give zero areas and zero cost."""
        room = Room(length=0, width=0, height=0)
        room.add_layer({"unit_price": 50})
        report = engine.compute(room)
        assert report.areas.total_area == 0.0
        assert report.entries[0].area == 0.0
        assert report.grand_total == 0.0


class TestPriceLayers:
    """Tests for per-layer area and cost."""

    def test_walls_and_ceiling_with_exclusion(
        self, engine: CostEngine, standard_room: Room, paint_layer_fields: dict[str, Any]
    ) -> None:
        """74 m² covered, minus 2.5 m² of openings, at 12 per m²."""
        layer = standard_room.add_layer(paint_layer_fields)
        entry = engine.compute(standard_room).entry_for(layer.id)
        assert entry is not None
        assert entry.raw_area == pytest.approx(74.0)
        assert entry.area == pytest.approx(71.5)
        assert entry.cost == pytest.approx(858.0)
        assert entry.name == "Paint"

    def test_exclusion_larger_than_coverage_clamps_to_zero(
        self, engine: CostEngine, standard_room: Room, paint_layer_fields: dict[str, Any]
    ) -> None:
        standard_room.add_layer({**paint_layer_fields, "exclusion_area": 100})
        report = engine.compute(standard_room)
        assert report.entries[0].area == 0.0
        assert report.entries[0].cost == 0.0
        assert report.grand_total == 0.0

    def test_package_price_gives_same_cost(
        self, engine: CostEngine, standard_room: Room, paint_layer_fields: dict[str, Any]
    ) -> None:
        fields = dict(paint_layer_fields)
        del fields["unit_price"]
        standard_room.add_layer({**fields, "package_unit_price": 60, "package_area": 5})
        report = engine.compute(standard_room)
        assert report.grand_total == pytest.approx(858.0)

    @pytest.mark.parametrize(
        ("wall_count", "expected_area"),
        [(0, 0.0), (1, 13.5), (2, 27.0), (3, 40.5), (4, 54.0)],
    )
    def test_wall_count_uses_average_wall(
        self, engine: CostEngine, standard_room: Room, wall_count: int, expected_area: float
    ) -> None:
        standard_room.add_layer(
            {"wall_count": wall_count, "applies_floor": False, "applies_ceiling": False}
        )
        assert engine.compute(standard_room).entries[0].area == pytest.approx(expected_area)

    def test_floor_only(self, engine: CostEngine, standard_room: Room) -> None:
        standard_room.add_layer(
            {"wall_count": 0, "applies_floor": True, "applies_ceiling": False, "unit_price": 30}
        )
        assert engine.compute(standard_room).grand_total == pytest.approx(600.0)

    def test_grand_total_sums_layers_in_order(
        self, engine: CostEngine, standard_room: Room, paint_layer_fields: dict[str, Any]
    ) -> None:
        standard_room.add_layer(paint_layer_fields)
        standard_room.add_layer(
            {"name": "Floor", "wall_count": 0, "applies_ceiling": False, "unit_price": 12}
        )
        standard_room.add_layer({"name": "Free", "unit_price": 0})
        report = engine.compute(standard_room)
        assert [entry.name for entry in report.entries] == ["Paint", "Floor", "Free"]
        assert report.grand_total == pytest.approx(858.0 + 240.0)

    def test_no_layers(self, engine: CostEngine, standard_room: Room) -> None:
        report = engine.compute(standard_room)
        assert report.entries == ()
        assert report.grand_total == 0.0

    def test_entry_for_unknown_layer(self, engine: CostEngine, standard_room: Room) -> None:
        assert engine.compute(standard_room).entry_for(5) is None


class TestCostInvariants:
    """Properties that hold for any input."""

    @pytest.mark.parametrize("dims", [(0, 0, 0), (0.3, 0.2, 0.25), (5, 4, 3), (40, 25, 12)])
    @pytest.mark.parametrize("exclusion", [0, 3, 1000])
    @pytest.mark.parametrize("wall_count", [0, 2, 4])
    def test_costs_are_never_negative(
        self,
        engine: CostEngine,
        dims: tuple[float, float, float],
        exclusion: float,
        wall_count: int,
    ) -> None:
        room = Room(*dims)
        room.add_layer({"wall_count": wall_count, "exclusion_area": exclusion, "unit_price": 9.5})
        report = engine.compute(room)
        assert report.grand_total >= 0
        assert all(entry.area >= 0 and entry.cost >= 0 for entry in report.entries)

    def test_compute_is_deterministic(
        self, engine: CostEngine, standard_room: Room, paint_layer_fields: dict[str, Any]
    ) -> None:
        standard_room.add_layer(paint_layer_fields)
        assert engine.compute(standard_room) == engine.compute(standard_room)

    def test_to_dict(self, engine: CostEngine, standard_room: Room) -> None:
        standard_room.add_layer({"unit_price": 1})
        data = engine.compute(standard_room).to_dict()
        assert data["areas"]["wall_area"] == pytest.approx(54.0)
        assert data["entries"][0]["layer_id"] == 1
        assert data["grand_total"] == pytest.approx(94.0)

    @pytest.mark.parametrize("unit_price", [0, 25])
    def test_overflowing_areas_count_as_zero(
        self, engine: CostEngine, unit_price: float
    ) -> None:
        """Products too large for a float never leak inf or NaN into the totals."""
        room = Room(length=1e200, width=1e200, height=3)
        room.add_layer({"unit_price": unit_price})
        report = engine.compute(room)
        assert report.areas.floor_area == 0.0
        assert all(math.isfinite(value) for value in report.areas.to_dict().values())
        assert math.isfinite(report.grand_total)
        assert report.grand_total >= 0

    def test_overflowing_cost_counts_as_zero(
        self, engine: CostEngine, standard_room: Room
    ) -> None:
        standard_room.add_layer({"unit_price": 1e308})
        report = engine.compute(standard_room)
        assert report.entries[0].area == pytest.approx(94.0)
        assert report.entries[0].cost == 0.0
        assert report.grand_total == 0.0
