"""Value objects for room geometry, cost results and scene placement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Dimension(str, Enum):
    """The three editable room dimensions."""

    LENGTH = "length"
    WIDTH = "width"
    HEIGHT = "height"


class ColorRole(str, Enum):
    """Color category of a floating label.

    Attributes:
        DIMENSION: Length, width and height readouts.
        SURFACE: Floor, ceiling and wall area readouts.
        TOTAL: The grand total cost readout.
    """

    DIMENSION = "dimension"
    SURFACE = "surface"
    TOTAL = "total"


class LabelKind(str, Enum):
    """Identity of each entry in the fixed label catalog."""

    LENGTH = "length"
    WIDTH = "width"
    HEIGHT = "height"
    FLOOR_AREA = "floor_area"
    CEILING_AREA = "ceiling_area"
    WALL_AREA = "wall_area"
    TOTAL_COST = "total_cost"


class CameraState(str, Enum):
    """States of the camera fit state machine."""

    STABLE = "stable"
    RETARGETING = "retargeting"


@dataclass(frozen=True)
class Vector3:
    """3D vector in scene space (y is up, meters)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> Vector3:
        """Return this vector multiplied by a scalar."""
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    @property
    def length(self) -> float:
        """Euclidean norm."""
        return math.hypot(self.x, self.y, self.z)

    def normalized(self, fallback: Vector3 | None = None) -> Vector3:
        """Return the unit vector in this direction.

        Args:
            fallback: Direction to use for the zero vector. It is normalized
                itself; without one the zero vector is returned unchanged.
        """
        norm = self.length
        if norm == 0:
            if fallback is None:
                return self
            return fallback.normalized()
        return self.scaled(1.0 / norm)

    def lerp(self, other: Vector3, alpha: float) -> Vector3:
        """Linear interpolation toward ``other`` by ``alpha``."""
        return Vector3(
            self.x + (other.x - self.x) * alpha,
            self.y + (other.y - self.y) * alpha,
            self.z + (other.z - self.z) * alpha,
        )

    def distance_to(self, other: Vector3) -> float:
        return (self - other).length

    def with_y(self, y: float) -> Vector3:
        return Vector3(self.x, y, self.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_sequence(cls, values: Any) -> Vector3:
        """Build a vector from any three-item sequence."""
        x, y, z = values
        return cls(float(x), float(y), float(z))


@dataclass(frozen=True)
class DerivedAreas:
    """Base surface areas of a rectangular room in square meters.

    Attributes:
        wall_area: Combined area of all four walls.
        floor_area: Floor area (length x width).
        ceiling_area: Ceiling area, equal to the floor area.
        avg_wall_area: A quarter of the wall area; stands in for one wall
            when layers cover a count of walls.
        total_area: Walls, floor and ceiling together.
    """

    wall_area: float
    floor_area: float
    ceiling_area: float
    avg_wall_area: float
    total_area: float

    def to_dict(self) -> dict[str, float]:
        return {
            "wall_area": self.wall_area,
            "floor_area": self.floor_area,
            "ceiling_area": self.ceiling_area,
            "avg_wall_area": self.avg_wall_area,
            "total_area": self.total_area,
        }


@dataclass(frozen=True)
class CostBreakdownEntry:
    """Cost of one material layer."""

    layer_id: int
    name: str
    raw_area: float
    area: float
    cost: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "layer_id": self.layer_id,
            "name": self.name,
            "raw_area": self.raw_area,
            "area": self.area,
            "cost": self.cost,
        }


@dataclass(frozen=True)
class LabelPlacement:
    """A floating text label, positioned but not yet formatted.

    The text is produced later from ``template`` and ``values`` by a
    formatting collaborator, so the layout stays free of display concerns.

    Attributes:
        kind: Which catalog entry this is.
        template: Format string with named fields, e.g. ``"Floor: {area}m²"``.
        values: Raw numbers for the template fields.
        position: Anchor point in scene space.
        color_role: Color category.
        size: Final text size (text size times the entry's multiplier).
    """

    kind: LabelKind
    template: str
    values: dict[str, float]
    position: Vector3
    color_role: ColorRole
    size: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "template": self.template,
            "values": dict(self.values),
            "position": list(self.position.as_tuple()),
            "color_role": self.color_role.value,
            "size": self.size,
        }


@dataclass(frozen=True)
class BoxPlacement:
    """Scale and vertical origin of the unit room box."""

    scale: Vector3
    origin_y: float


@dataclass(frozen=True)
class GridExtent:
    """Floor grid size in meters and its number of divisions."""

    size: float
    divisions: int


@dataclass(frozen=True)
class SceneLayout:
    """Everything the renderer needs to place the room and its labels."""

    text_size: float
    gap: float
    box: BoxPlacement
    grid: GridExtent
    labels: tuple[LabelPlacement, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "text_size": self.text_size,
            "gap": self.gap,
            "box": {
                "scale": list(self.box.scale.as_tuple()),
                "origin_y": self.box.origin_y,
            },
            "grid": {"size": self.grid.size, "divisions": self.grid.divisions},
            "labels": [label.to_dict() for label in self.labels],
        }


__all__ = [
    "BoxPlacement",
    "CameraState",
    "ColorRole",
    "CostBreakdownEntry",
    "DerivedAreas",
    "Dimension",
    "GridExtent",
    "LabelKind",
    "LabelPlacement",
    "SceneLayout",
    "Vector3",
]
