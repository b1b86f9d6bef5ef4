"""Cost estimate and scene endpoints."""

from typing import Any

from fastapi import APIRouter

from roomcost.application import create_label_formatter, create_session
from roomcost.application.config import load_config_from_dict
from roomcost.domain import Vector3
from roomcost.infrastructure import RecordingRenderer
from roomcost.web.schemas import SceneRequest

router = APIRouter(tags=["estimate"])


@router.post("/estimate")
async def estimate(config: dict[str, Any]) -> dict[str, Any]:
    """Compute areas and per-layer costs for a room configuration.

    Raises:
        ConfigError: If the configuration is invalid (mapped to 422).
    """
    room_config = load_config_from_dict(config)
    snapshot = create_session(room_config).recompute()
    return snapshot.report.to_dict()


@router.post("/scene")
async def scene(request: SceneRequest) -> dict[str, Any]:
    """Compute the full scene: costs, labels, box, grid and camera decision."""
    room_config = load_config_from_dict(request.config)
    position = request.camera_position or room_config.camera.initial_position
    renderer = RecordingRenderer(
        font_ready=request.font_ready,
        camera_position=Vector3.from_sequence(position),
    )
    session = create_session(room_config, renderer=renderer)
    snapshot = session.recompute()
    return {
        "snapshot": snapshot.to_dict(create_label_formatter(room_config)),
        "renderer": renderer.to_dict(),
    }
