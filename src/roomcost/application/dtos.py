"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from roomcost.domain import CameraState, CostReport, SceneLayout, Vector3

if TYPE_CHECKING:
    from roomcost.infrastructure.formatters import LabelTextFormatter


@dataclass(frozen=True)
class RoomDimensions:
    """Room dimensions at the time of a snapshot."""

    length: float
    width: float
    height: float


@dataclass(frozen=True)
class SceneSnapshot:
    """Result of one recompute cycle.

    Holds everything the UI layer needs to redraw: the cost report, the
    scene layout and the camera decision.

    Attributes:
        dimensions: Room dimensions the snapshot was computed from.
        layers: Layer fields in list order, as plain dicts.
        report: Areas, per-layer costs and grand total.
        layout: Text size, gap, labels, box and grid.
        camera_state: Camera state after evaluation.
        camera_target: Pending camera target, if retargeting.
        camera_position: Live camera position at evaluation time.
        font_ready: Whether labels were emitted to the renderer.
    """

    dimensions: RoomDimensions
    layers: tuple[dict[str, Any], ...]
    report: CostReport
    layout: SceneLayout
    camera_state: CameraState
    camera_target: Vector3 | None
    camera_position: Vector3
    font_ready: bool

    @property
    def grand_total(self) -> float:
        return self.report.grand_total

    def to_dict(self, label_formatter: LabelTextFormatter | None = None) -> dict[str, Any]:
        """Convert to a JSON-safe dict.

        Args:
            label_formatter: When given, each label also gets its display text.
        """
        layout = self.layout.to_dict()
        if label_formatter is not None:
            for entry, label in zip(layout["labels"], self.layout.labels):
                entry["text"] = label_formatter.format(label)
        return {
            "dimensions": {
                "length": self.dimensions.length,
                "width": self.dimensions.width,
                "height": self.dimensions.height,
            },
            "layers": [dict(layer) for layer in self.layers],
            "report": self.report.to_dict(),
            "layout": layout,
            "camera": {
                "state": self.camera_state.value,
                "target": (
                    list(self.camera_target.as_tuple()) if self.camera_target else None
                ),
                "position": list(self.camera_position.as_tuple()),
            },
            "font_ready": self.font_ready,
        }


__all__ = ["RoomDimensions", "SceneSnapshot"]
