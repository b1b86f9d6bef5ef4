"""In-memory scene renderer.

Implements the SceneRenderer protocol without a graphics engine. The CLI
and API use it to capture what a real renderer would be told to draw.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from roomcost.domain.value_objects import Vector3

__all__ = ["RecordedLabel", "RecordingRenderer"]


@dataclass(frozen=True)
class RecordedLabel:
    text: str
    position: Vector3
    color: int
    size: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "position": list(self.position.as_tuple()),
            "color": f"#{self.color:06x}",
            "size": self.size,
        }


@dataclass
class RecordingRenderer:
    """Keeps the latest scene state and a log of method calls."""

    font_ready: bool = True
    camera_position: Vector3 = field(default_factory=lambda: Vector3(10.0, 10.0, 10.0))
    box_scale: Vector3 | None = None
    box_origin_y: float | None = None
    grid: tuple[float, int] | None = None
    labels: list[RecordedLabel] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)

    def set_room_box_scale(self, length: float, height: float, width: float) -> None:
        self.calls.append("set_room_box_scale")
        self.box_scale = Vector3(length, height, width)

    def set_room_box_origin(self, y: float) -> None:
        self.calls.append("set_room_box_origin")
        self.box_origin_y = y

    def set_grid_extent(self, size: float, divisions: int) -> None:
        self.calls.append("set_grid_extent")
        self.grid = (size, divisions)

    def clear_labels(self) -> None:
        self.calls.append("clear_labels")
        self.labels.clear()

    def add_label(self, text: str, position: Vector3, color: int, size: float) -> None:
        self.calls.append("add_label")
        self.labels.append(RecordedLabel(text=text, position=position, color=color, size=size))

    def set_camera_position(self, position: Vector3) -> None:
        self.camera_position = position

    def get_camera_position(self) -> Vector3:
        return self.camera_position

    def is_font_ready(self) -> bool:
        return self.font_ready

    def to_dict(self) -> dict[str, Any]:
        return {
            "box": {
                "scale": list(self.box_scale.as_tuple()) if self.box_scale else None,
                "origin_y": self.box_origin_y,
            },
            "grid": (
                {"size": self.grid[0], "divisions": self.grid[1]} if self.grid else None
            ),
            "labels": [label.to_dict() for label in self.labels],
            "camera_position": list(self.camera_position.as_tuple()),
        }
