"""Area and cost computation for a room's material layers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..value_objects import CostBreakdownEntry, DerivedAreas

if TYPE_CHECKING:
    from ..entities import MaterialLayer, Room

__all__ = ["CostEngine", "CostReport"]


def _finite(value: float) -> float:
    """Overflowed products count as 0, like any other unusable number."""
    return value if math.isfinite(value) else 0.0


@dataclass(frozen=True)
class CostReport:
    """Areas of the room plus the cost of each layer, in layer order."""

    areas: DerivedAreas
    entries: tuple[CostBreakdownEntry, ...]
    grand_total: float

    def entry_for(self, layer_id: int) -> CostBreakdownEntry | None:
        for entry in self.entries:
            if entry.layer_id == layer_id:
                return entry
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "areas": self.areas.to_dict(),
            "entries": [entry.to_dict() for entry in self.entries],
            "grand_total": self.grand_total,
        }


class CostEngine:
    """Derives base areas from a room and prices every layer.

    A layer's area is its wall count times the average wall area, plus the
    floor and ceiling when it covers them. The exclusion area is subtracted
    from that total, not per wall, and the result is clamped at zero so a
    large exclusion never produces a negative cost.
    """

    @staticmethod
    def compute_areas(length: float, width: float, height: float) -> DerivedAreas:
        """Compute base surface areas for a box room."""
        wall_area = _finite(2 * length * height + 2 * width * height)
        floor_area = _finite(length * width)
        ceiling_area = floor_area
        return DerivedAreas(
            wall_area=wall_area,
            floor_area=floor_area,
            ceiling_area=ceiling_area,
            avg_wall_area=wall_area / 4,
            total_area=_finite(wall_area + floor_area + ceiling_area),
        )

    @staticmethod
    def price_layer(layer: MaterialLayer, areas: DerivedAreas) -> CostBreakdownEntry:
        """Compute the covered area and cost of a single layer."""
        raw_area = layer.wall_count * areas.avg_wall_area
        if layer.applies_floor:
            raw_area += areas.floor_area
        if layer.applies_ceiling:
            raw_area += areas.ceiling_area

        raw_area = _finite(raw_area)
        area = max(0.0, raw_area - layer.exclusion_area)
        return CostBreakdownEntry(
            layer_id=layer.id,
            name=layer.name,
            raw_area=raw_area,
            area=area,
            cost=_finite(area * layer.unit_price),
        )

    def compute(self, room: Room) -> CostReport:
        """Price every layer of ``room`` in list order."""
        areas = self.compute_areas(room.length, room.width, room.height)

        entries: list[CostBreakdownEntry] = []
        grand_total = 0.0
        for layer in room.layers:
            entry = self.price_layer(layer, areas)
            entries.append(entry)
            grand_total += entry.cost

        return CostReport(
            areas=areas, entries=tuple(entries), grand_total=_finite(grand_total)
        )
