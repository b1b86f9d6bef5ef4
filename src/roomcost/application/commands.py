"""Application commands (use cases) for editing a room and redrawing it."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from roomcost.domain import (
    CameraFitController,
    CostEngine,
    Dimension,
    LayoutEngine,
    Room,
    Vector3,
)

from .dtos import RoomDimensions, SceneSnapshot
from .services import ScenePresenter

if TYPE_CHECKING:
    from roomcost.contracts.protocols import SceneRenderer

logger = logging.getLogger(__name__)

__all__ = ["RoomSession"]


class RoomSession:
    """The single owner of a room and its scene state.

    Every editing command mutates the room and then runs a full recompute:
    costs, then layout, then the camera decision. The new snapshot is
    returned and, when a renderer is attached, presented to it.

    The only state that outlives a recompute is the camera: its live
    position and any pending fit target. ``tick`` advances it once per
    animation frame.

    Args:
        room: Room to edit; a default 5 x 4 x 3 room when omitted.
        cost_engine: Area and cost computation.
        layout_engine: Text size and label placement.
        camera: Camera framing state machine.
        presenter: Pushes snapshots into the renderer.
        renderer: Optional rendering collaborator. When attached, the
            camera position and font readiness are read from it.
        font_ready: Font readiness used when no renderer is attached.
    """

    def __init__(
        self,
        room: Room | None = None,
        cost_engine: CostEngine | None = None,
        layout_engine: LayoutEngine | None = None,
        camera: CameraFitController | None = None,
        presenter: ScenePresenter | None = None,
        renderer: SceneRenderer | None = None,
        font_ready: bool = True,
    ) -> None:
        self.room = room if room is not None else Room()
        self.cost_engine = cost_engine or CostEngine()
        self.layout_engine = layout_engine or LayoutEngine()
        self.camera = camera or CameraFitController()
        self.presenter = presenter or ScenePresenter()
        self.renderer = renderer
        self._font_ready = font_ready
        self._camera_position = self.camera.settings.initial_position
        self._labels_pending = False
        self._last_snapshot: SceneSnapshot | None = None

    @property
    def camera_position(self) -> Vector3:
        if self.renderer is not None:
            return self.renderer.get_camera_position()
        return self._camera_position

    @camera_position.setter
    def camera_position(self, position: Vector3) -> None:
        """Move the camera, e.g. when the user orbits."""
        self._camera_position = position
        if self.renderer is not None:
            self.renderer.set_camera_position(position)

    @property
    def font_ready(self) -> bool:
        if self.renderer is not None:
            return self.renderer.is_font_ready()
        return self._font_ready

    @property
    def last_snapshot(self) -> SceneSnapshot | None:
        return self._last_snapshot

    # -- commands ---------------------------------------------------------

    def set_dimension(self, which: Dimension | str, value: Any) -> SceneSnapshot:
        self.room.set_dimension(which, value)
        return self.recompute()

    def add_layer(self, initial: Mapping[str, Any] | None = None) -> SceneSnapshot:
        self.room.add_layer(initial)
        return self.recompute()

    def update_layer(self, layer_id: int, patch: Mapping[str, Any]) -> SceneSnapshot:
        self.room.update_layer(layer_id, patch)
        return self.recompute()

    def remove_layer(self, layer_id: int) -> SceneSnapshot:
        self.room.remove_layer(layer_id)
        return self.recompute()

    def notify_font_ready(self) -> SceneSnapshot:
        """Record that the font has loaded and redraw the labels once.

        Returns the latest snapshot without recomputing when no labels were
        waiting on the font.
        """
        self._font_ready = True
        if self._labels_pending or self._last_snapshot is None:
            return self.recompute()
        return self._last_snapshot

    # -- recompute and animation ------------------------------------------

    def recompute(self) -> SceneSnapshot:
        """Run the full cost, layout and camera cycle."""
        room = self.room
        report = self.cost_engine.compute(room)
        layout = self.layout_engine.compute(room, report)
        position = self.camera_position
        state = self.camera.evaluate(room.max_dimension, position)
        font_ready = self.font_ready

        snapshot = SceneSnapshot(
            dimensions=RoomDimensions(room.length, room.width, room.height),
            layers=tuple(layer.to_dict() for layer in room.layers),
            report=report,
            layout=layout,
            camera_state=state,
            camera_target=self.camera.target,
            camera_position=position,
            font_ready=font_ready,
        )
        logger.debug(
            f"Recomputed room {room.length}x{room.width}x{room.height}: "
            f"{len(report.entries)} layers, total {report.grand_total:.2f}, "
            f"camera {state.value}"
        )

        if self.renderer is not None:
            self.presenter.present(snapshot, self.renderer)
        self._labels_pending = not font_ready
        self._last_snapshot = snapshot
        return snapshot

    def tick(self, dt: float | None = None) -> Vector3:
        """Advance the camera one animation frame and return its position."""
        if not self.camera.is_retargeting:
            return self.camera_position
        self.camera_position = self.camera.tick(self.camera_position, dt)
        return self.camera_position
