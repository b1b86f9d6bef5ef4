"""Hands scene snapshots to a rendering collaborator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from roomcost.domain import ColorRole
from roomcost.infrastructure.formatters import LabelTextFormatter

if TYPE_CHECKING:
    from roomcost.application.dtos import SceneSnapshot
    from roomcost.contracts.protocols import SceneRenderer

logger = logging.getLogger(__name__)

__all__ = ["LabelPalette", "ScenePresenter"]


@dataclass(frozen=True)
class LabelPalette:
    """Label colors by role, as 0xRRGGBB integers."""

    dimension: int = 0xFFFFFF
    surface: int = 0xFFFF00
    total: int = 0x00FF88

    def __post_init__(self) -> None:
        for color in (self.dimension, self.surface, self.total):
            if not 0 <= color <= 0xFFFFFF:
                raise ValueError(f"Color out of range: {color:#x}")

    def color_for(self, role: ColorRole) -> int:
        return {
            ColorRole.DIMENSION: self.dimension,
            ColorRole.SURFACE: self.surface,
            ColorRole.TOTAL: self.total,
        }[role]


class ScenePresenter:
    """Pushes box, grid and labels of a snapshot into a renderer.

    Labels are always cleared and rebuilt from scratch. When the renderer
    has no font yet they are left empty; the session redraws once the font
    arrives.
    """

    def __init__(
        self,
        label_formatter: LabelTextFormatter | None = None,
        palette: LabelPalette | None = None,
    ) -> None:
        self.label_formatter = label_formatter or LabelTextFormatter()
        self.palette = palette or LabelPalette()

    def present(self, snapshot: SceneSnapshot, renderer: SceneRenderer) -> None:
        layout = snapshot.layout
        dims = snapshot.dimensions

        renderer.set_room_box_scale(dims.length, dims.height, dims.width)
        renderer.set_room_box_origin(layout.box.origin_y)
        renderer.set_grid_extent(layout.grid.size, layout.grid.divisions)
        renderer.clear_labels()

        if not renderer.is_font_ready():
            logger.debug("Font not ready, skipping label emission")
            return

        for label in layout.labels:
            renderer.add_label(
                self.label_formatter.format(label),
                label.position,
                self.palette.color_for(label.color_role),
                label.size,
            )
