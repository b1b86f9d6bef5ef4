"""Unit tests for the Room and MaterialLayer entities.

These tests verify:
- Fail-soft dimension parsing
- Layer defaults and id assignment
- Field coercion on update, including wall count clamping
- Package price derivation
- Removal by id preserving order
"""

import math

import pytest

from roomcost.domain import Dimension, LayerDefaults, Room
from roomcost.domain.coercion import coerce_bool, coerce_non_negative, coerce_wall_count


class TestCoercion:
    """Tests for fail-soft value parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (3, 3.0),
            (2.5, 2.5),
            ("4", 4.0),
            ("3.5m", 3.5),
            (" .5", 0.5),
            ("1e2", 100.0),
            ("", 0.0),
            ("abc", 0.0),
            (None, 0.0),
            (-2, 0.0),
            ("-1.5", 0.0),
            (math.nan, 0.0),
            (math.inf, 0.0),
            (True, 0.0),
            ([1], 0.0),
        ],
    )
    def test_coerce_non_negative(self, value: object, expected: float) -> None:
        assert coerce_non_negative(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(4, 4), (7, 4), (2.7, 2), ("3", 3), (-1, 0), ("x", 0), (None, 0)],
    )
    def test_coerce_wall_count(self, value: object, expected: int) -> None:
        assert coerce_wall_count(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(True, True), (False, False), ("true", True), ("off", False), (1, True), (0, False)],
    )
    def test_coerce_bool(self, value: object, expected: bool) -> None:
        assert coerce_bool(value) is expected


class TestRoomDimensions:
    """Tests for Room.set_dimension."""

    def test_default_room(self) -> None:
        """Default room matches the initial form values."""
        room = Room()
        assert (room.length, room.width, room.height) == (5.0, 4.0, 3.0)
        assert room.layers == []

    def test_set_dimension_by_enum_and_string(self, standard_room: Room) -> None:
        standard_room.set_dimension(Dimension.LENGTH, 7.5)
        standard_room.set_dimension("height", "2.4")
        assert standard_room.length == 7.5
        assert standard_room.height == 2.4

    @pytest.mark.parametrize("value", [None, "", "abc", -3, math.nan])
    def test_invalid_input_becomes_zero(self, standard_room: Room, value: object) -> None:
        """Invalid input degrades to 0 instead of raising."""
        standard_room.set_dimension("width", value)
        assert standard_room.width == 0.0

    def test_unknown_dimension_is_ignored(self, standard_room: Room) -> None:
        standard_room.set_dimension("depth", 10)
        assert (standard_room.length, standard_room.width, standard_room.height) == (
            5.0,
            4.0,
            3.0,
        )

    def test_constructor_coerces_negative(self) -> None:
        room = Room(length=-1, width=2, height=3)
        assert room.length == 0.0

    def test_max_dimension(self, standard_room: Room) -> None:
        assert standard_room.max_dimension == 5.0

    def test_set_dimension_is_idempotent(self, standard_room: Room) -> None:
        standard_room.set_dimension("length", 6)
        standard_room.set_dimension("length", 6)
        assert standard_room.length == 6.0


class TestAddLayer:
    """Tests for Room.add_layer."""

    def test_default_fields(self, standard_room: Room) -> None:
        """A fresh layer covers all four walls, floor and ceiling."""
        layer = standard_room.add_layer()
        assert layer.id == 1
        assert layer.name == "Layer 1"
        assert layer.wall_count == 4
        assert layer.applies_floor is True
        assert layer.applies_ceiling is True
        assert layer.unit_price == 0.0
        assert layer.exclusion_area == 0.0
        assert layer.package_area is None

    def test_custom_defaults(self) -> None:
        room = Room(layer_defaults=LayerDefaults(applies_floor=False, name_prefix="Finish"))
        layer = room.add_layer()
        assert layer.applies_floor is False
        assert layer.name == "Finish 1"

    def test_initial_fields_override_defaults(self, standard_room: Room) -> None:
        layer = standard_room.add_layer({"name": "Tiles", "wall_count": 2, "unit_price": "30"})
        assert layer.name == "Tiles"
        assert layer.wall_count == 2
        assert layer.unit_price == 30.0

    def test_ids_are_unique_and_monotonic(self, standard_room: Room) -> None:
        """Ids are never reused, even after removal."""
        first = standard_room.add_layer()
        second = standard_room.add_layer()
        standard_room.remove_layer(second.id)
        third = standard_room.add_layer()
        assert (first.id, second.id, third.id) == (1, 2, 3)

    def test_numbering_continues_after_given_layers(self) -> None:
        room = Room()
        room.add_layer()
        room.add_layer()
        copy = Room(layers=list(room.layers))
        assert copy.add_layer().id == 3

    def test_invalid_defaults_rejected(self) -> None:
        with pytest.raises(ValueError, match="wall_count"):
            LayerDefaults(wall_count=5)
        with pytest.raises(ValueError, match="unit_price"):
            LayerDefaults(unit_price=-1)


class TestUpdateLayer:
    """Tests for Room.update_layer."""

    def test_applies_patch(self, standard_room: Room) -> None:
        layer = standard_room.add_layer()
        standard_room.update_layer(
            layer.id, {"applies_floor": False, "exclusion_area": 1.5, "name": "Plaster"}
        )
        assert layer.applies_floor is False
        assert layer.exclusion_area == 1.5
        assert layer.name == "Plaster"

    def test_wall_count_is_clamped(self, standard_room: Room) -> None:
        layer = standard_room.add_layer()
        standard_room.update_layer(layer.id, {"wall_count": 9})
        assert layer.wall_count == 4
        standard_room.update_layer(layer.id, {"wall_count": -2})
        assert layer.wall_count == 0

    def test_negative_values_become_zero(self, standard_room: Room) -> None:
        layer = standard_room.add_layer()
        standard_room.update_layer(layer.id, {"unit_price": -5, "exclusion_area": "x"})
        assert layer.unit_price == 0.0
        assert layer.exclusion_area == 0.0

    def test_unknown_id_returns_none(self, standard_room: Room) -> None:
        standard_room.add_layer()
        assert standard_room.update_layer(99, {"unit_price": 3}) is None

    def test_unknown_field_is_ignored(self, standard_room: Room) -> None:
        layer = standard_room.add_layer()
        standard_room.update_layer(layer.id, {"colour": "red", "unit_price": 4})
        assert layer.unit_price == 4.0
        assert not hasattr(layer, "colour")

    def test_update_is_idempotent(self, standard_room: Room) -> None:
        layer = standard_room.add_layer()
        patch = {"package_unit_price": 60, "package_area": 5, "wall_count": 3}
        standard_room.update_layer(layer.id, patch)
        once = layer.to_dict()
        standard_room.update_layer(layer.id, patch)
        assert layer.to_dict() == once


class TestPackagePrice:
    """Tests for unit price derivation from package fields."""

    def test_package_fields_derive_unit_price(self, standard_room: Room) -> None:
        layer = standard_room.add_layer({"package_unit_price": 60, "package_area": 5})
        assert layer.unit_price == pytest.approx(12.0)

    def test_package_price_overwrites_manual_price(self, standard_room: Room) -> None:
        layer = standard_room.add_layer({"unit_price": 99})
        standard_room.update_layer(layer.id, {"package_unit_price": 60, "package_area": 5})
        assert layer.unit_price == pytest.approx(12.0)

    def test_package_fields_win_over_manual_edit(self, standard_room: Room) -> None:
        layer = standard_room.add_layer({"package_unit_price": 60, "package_area": 5})
        standard_room.update_layer(layer.id, {"unit_price": 20})
        assert layer.unit_price == pytest.approx(12.0)

    def test_zero_package_area_keeps_manual_price(self, standard_room: Room) -> None:
        layer = standard_room.add_layer({"unit_price": 7, "package_unit_price": 60, "package_area": 0})
        assert layer.unit_price == 7.0

    def test_missing_package_price_keeps_manual_price(self, standard_room: Room) -> None:
        layer = standard_room.add_layer({"unit_price": 7, "package_area": 5})
        assert layer.unit_price == 7.0


class TestRemoveLayer:
    """Tests for Room.remove_layer."""

    def test_remove_preserves_order(self, standard_room: Room) -> None:
        for name in ("a", "b", "c", "d"):
            standard_room.add_layer({"name": name})
        assert standard_room.remove_layer(2) is True
        assert [layer.name for layer in standard_room.layers] == ["a", "c", "d"]

    def test_remove_unknown_id(self, standard_room: Room) -> None:
        standard_room.add_layer()
        assert standard_room.remove_layer(42) is False
        assert len(standard_room.layers) == 1
