"""Collaborator protocols.

The core never draws or formats anything itself. It hands plain numbers,
templates and vectors to implementations of these protocols, which the
presentation layer supplies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from roomcost.domain.value_objects import Vector3


@runtime_checkable
class SceneRenderer(Protocol):
    """Protocol for the 3D rendering engine that displays the room.

    Example:
        ```python
        class ThreeJsBridge:
            def set_room_box_scale(self, length, height, width) -> None:
                self.room_mesh.scale = (length, height, width)
            ...
        ```
    """

    def set_room_box_scale(self, length: float, height: float, width: float) -> None:
        """Scale the unit room box to the room dimensions."""
        ...

    def set_room_box_origin(self, y: float) -> None:
        """Move the room box so its floor rests on y = 0."""
        ...

    def set_grid_extent(self, size: float, divisions: int) -> None:
        """Replace the floor grid."""
        ...

    def clear_labels(self) -> None:
        """Discard every floating label."""
        ...

    def add_label(self, text: str, position: Vector3, color: int, size: float) -> None:
        """Add one floating text label."""
        ...

    def set_camera_position(self, position: Vector3) -> None:
        ...

    def get_camera_position(self) -> Vector3:
        ...

    def is_font_ready(self) -> bool:
        """Whether the glyph resource needed for labels has loaded."""
        ...


@runtime_checkable
class NumberFormatter(Protocol):
    """Protocol for turning raw numbers into display strings."""

    def format_length(self, value: float) -> str:
        ...

    def format_area(self, value: float) -> str:
        ...

    def format_currency(self, value: float) -> str:
        ...


__all__ = ["NumberFormatter", "SceneRenderer"]
