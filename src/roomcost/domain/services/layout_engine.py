"""Adaptive text sizing and label placement for the room scene.

Every size and position is derived from the room dimensions so labels stay
legible and clear of the geometry from sub-meter rooms up to tens of meters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_objects import (
    BoxPlacement,
    ColorRole,
    GridExtent,
    LabelKind,
    LabelPlacement,
    SceneLayout,
    Vector3,
)

if TYPE_CHECKING:
    from ..entities import Room
    from .cost_engine import CostReport

__all__ = ["LABEL_TEMPLATES", "LayoutEngine", "LayoutSettings"]


LABEL_TEMPLATES: dict[LabelKind, str] = {
    LabelKind.LENGTH: "{value}m",
    LabelKind.WIDTH: "{value}m",
    LabelKind.HEIGHT: "{value}m",
    LabelKind.FLOOR_AREA: "Floor: {area}m²",
    LabelKind.CEILING_AREA: "Ceiling: {area}m²",
    LabelKind.WALL_AREA: "Walls: {area}m²",
    LabelKind.TOTAL_COST: "Total: {cost}",
}


@dataclass(frozen=True)
class LayoutSettings:
    """Tuning constants for text size and spacing.

    Attributes:
        text_scale: Text size as a fraction of the largest dimension.
        height_ratio: Upper clamp as a fraction of room height, so floor and
            ceiling labels cannot collide in flat rooms.
        min_text_size: Lower clamp that keeps text legible in small rooms.
        gap_ratio: Gap between geometry and text, relative to text size.
        total_offset: Height of the total label above the ceiling, in text sizes.
        total_scale: Size multiplier of the total label.
        grid_margin: Grid size as a multiple of the larger floor dimension.
    """

    text_scale: float = 0.03
    height_ratio: float = 0.15
    min_text_size: float = 0.15
    gap_ratio: float = 1.2
    total_offset: float = 2.0
    total_scale: float = 1.2
    grid_margin: float = 2.0

    def __post_init__(self) -> None:
        if self.text_scale <= 0:
            raise ValueError("text_scale must be positive")
        if self.height_ratio <= 0:
            raise ValueError("height_ratio must be positive")
        if self.min_text_size <= 0:
            raise ValueError("min_text_size must be positive")
        if self.gap_ratio < 0 or self.total_offset < 0:
            raise ValueError("gap_ratio and total_offset cannot be negative")
        if self.total_scale <= 0:
            raise ValueError("total_scale must be positive")
        if self.grid_margin <= 0:
            raise ValueError("grid_margin must be positive")


class LayoutEngine:
    """Computes text size, gap, label catalog, box and grid for a room."""

    def __init__(self, settings: LayoutSettings | None = None) -> None:
        self.settings = settings or LayoutSettings()

    def text_metrics(self, length: float, width: float, height: float) -> tuple[float, float]:
        """Return ``(text_size, gap)`` for the given dimensions.

        The size grows with the largest dimension, is capped by the room
        height, and never drops below the legibility floor.
        """
        s = self.settings
        max_dim = max(length, width, height)
        text_size = max_dim * s.text_scale
        text_size = min(text_size, height * s.height_ratio)
        text_size = max(text_size, s.min_text_size)
        return text_size, text_size * s.gap_ratio

    def grid_extent(self, length: float, width: float) -> GridExtent:
        size = max(length, width) * self.settings.grid_margin
        # One division per meter, at least one.
        return GridExtent(size=size, divisions=max(1, math.floor(size)))

    def compute(self, room: Room, report: CostReport) -> SceneLayout:
        """Build the full scene layout from scratch."""
        length, width, height = room.length, room.width, room.height
        text_size, gap = self.text_metrics(length, width, height)
        areas = report.areas
        total_size = text_size * self.settings.total_scale

        def label(
            kind: LabelKind,
            values: dict[str, float],
            position: Vector3,
            role: ColorRole,
            size: float = text_size,
        ) -> LabelPlacement:
            return LabelPlacement(
                kind=kind,
                template=LABEL_TEMPLATES[kind],
                values=values,
                position=position,
                color_role=role,
                size=size,
            )

        labels = (
            label(
                LabelKind.LENGTH,
                {"value": length},
                Vector3(0, 0, width / 2 + gap),
                ColorRole.DIMENSION,
            ),
            label(
                LabelKind.WIDTH,
                {"value": width},
                Vector3(length / 2 + gap, 0, 0),
                ColorRole.DIMENSION,
            ),
            label(
                LabelKind.HEIGHT,
                {"value": height},
                Vector3(-length / 2 - gap, height / 2, -width / 2),
                ColorRole.DIMENSION,
            ),
            label(
                LabelKind.FLOOR_AREA,
                {"area": areas.floor_area},
                Vector3(0, gap, 0),
                ColorRole.SURFACE,
            ),
            label(
                LabelKind.CEILING_AREA,
                {"area": areas.ceiling_area},
                Vector3(0, height - gap, 0),
                ColorRole.SURFACE,
            ),
            label(
                LabelKind.WALL_AREA,
                {"area": areas.wall_area},
                Vector3(0, height / 2, -width / 2 + gap),
                ColorRole.SURFACE,
            ),
            label(
                LabelKind.TOTAL_COST,
                {"cost": report.grand_total},
                Vector3(0, height + self.settings.total_offset * text_size, 0),
                ColorRole.TOTAL,
                size=total_size,
            ),
        )

        return SceneLayout(
            text_size=text_size,
            gap=gap,
            box=BoxPlacement(scale=Vector3(length, height, width), origin_y=height / 2),
            grid=self.grid_extent(length, width),
            labels=labels,
        )
