"""Session factory wiring configuration into services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roomcost.domain import CameraFitController, CostEngine, LayoutEngine
from roomcost.infrastructure.formatters import DisplayFormatter, LabelTextFormatter

from .commands import RoomSession
from .config import (
    RoomConfiguration,
    config_to_camera_settings,
    config_to_layout_settings,
    config_to_palette,
    config_to_room,
)
from .services import ScenePresenter

if TYPE_CHECKING:
    from roomcost.contracts.protocols import SceneRenderer


def create_display_formatter(config: RoomConfiguration | None = None) -> DisplayFormatter:
    config = config or RoomConfiguration()
    return DisplayFormatter(currency_symbol=config.display.currency_symbol)


def create_label_formatter(config: RoomConfiguration | None = None) -> LabelTextFormatter:
    return LabelTextFormatter(create_display_formatter(config))


def create_session(
    config: RoomConfiguration | None = None,
    renderer: SceneRenderer | None = None,
    font_ready: bool = True,
) -> RoomSession:
    """Create a RoomSession from a configuration.

    Args:
        config: Validated configuration; defaults to a 5 x 4 x 3 room
            without layers.
        renderer: Optional rendering collaborator to attach.
        font_ready: Font readiness when no renderer is attached.
    """
    config = config or RoomConfiguration()
    presenter = ScenePresenter(
        label_formatter=create_label_formatter(config),
        palette=config_to_palette(config.palette),
    )
    return RoomSession(
        room=config_to_room(config),
        cost_engine=CostEngine(),
        layout_engine=LayoutEngine(config_to_layout_settings(config)),
        camera=CameraFitController(config_to_camera_settings(config)),
        presenter=presenter,
        renderer=renderer,
        font_ready=font_ready,
    )


__all__ = ["create_display_formatter", "create_label_formatter", "create_session"]
