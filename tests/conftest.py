"""Pytest configuration and shared fixtures for roomcost tests."""

from __future__ import annotations

from typing import Any

import pytest

from roomcost.domain import Room


@pytest.fixture
def standard_room() -> Room:
    """A 5 x 4 x 3 m room without layers."""
    return Room(length=5.0, width=4.0, height=3.0)


@pytest.fixture
def paint_layer_fields() -> dict[str, Any]:
    """Walls and ceiling, 2.5 m² of openings, 12 per m²."""
    return {
        "name": "Paint",
        "wall_count": 4,
        "applies_floor": False,
        "applies_ceiling": True,
        "exclusion_area": 2.5,
        "unit_price": 12.0,
    }


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Configuration dict matching samples/living-room.json."""
    return {
        "schema_version": "1.0",
        "room": {"length": 5, "width": 4, "height": 3},
        "layers": [
            {
                "name": "Wall paint",
                "unit_price": 12,
                "wall_count": 4,
                "applies_floor": False,
                "applies_ceiling": True,
                "exclusion_area": 2.5,
            },
            {
                "name": "Oak flooring",
                "package_unit_price": 60,
                "package_area": 5,
                "wall_count": 0,
                "applies_floor": True,
                "applies_ceiling": False,
            },
        ],
    }
