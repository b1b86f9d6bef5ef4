"""Convert configuration models into domain objects."""

from __future__ import annotations

from roomcost.application.services import LabelPalette
from roomcost.domain import (
    CameraSettings,
    LayerDefaults,
    LayoutSettings,
    Room,
    Vector3,
)

from .schema import LayerConfig, PaletteConfig, RoomConfiguration


def _layer_fields(layer: LayerConfig) -> dict[str, object]:
    """Fields explicitly given for a layer; the rest come from the defaults."""
    return layer.model_dump(exclude_none=True)


def config_to_layer_defaults(config: RoomConfiguration) -> LayerDefaults:
    defaults = config.layer_defaults
    return LayerDefaults(
        wall_count=defaults.wall_count,
        applies_floor=defaults.applies_floor,
        applies_ceiling=defaults.applies_ceiling,
        unit_price=defaults.unit_price,
        name_prefix=defaults.name_prefix,
    )


def config_to_room(config: RoomConfiguration) -> Room:
    """Build a Room with its layers in configuration order."""
    room = Room(
        length=config.room.length,
        width=config.room.width,
        height=config.room.height,
        layer_defaults=config_to_layer_defaults(config),
    )
    for layer in config.layers:
        room.add_layer(_layer_fields(layer))
    return room


def config_to_layout_settings(config: RoomConfiguration) -> LayoutSettings:
    return LayoutSettings(**config.layout.model_dump())


def config_to_camera_settings(config: RoomConfiguration) -> CameraSettings:
    camera = config.camera.model_dump(exclude={"initial_position"})
    return CameraSettings(
        initial_position=Vector3.from_sequence(config.camera.initial_position),
        **camera,
    )


def _parse_color(value: str) -> int:
    return int(value.lstrip("#"), 16)


def config_to_palette(palette: PaletteConfig) -> LabelPalette:
    return LabelPalette(
        dimension=_parse_color(palette.dimension),
        surface=_parse_color(palette.surface),
        total=_parse_color(palette.total),
    )


__all__ = [
    "config_to_camera_settings",
    "config_to_layer_defaults",
    "config_to_layout_settings",
    "config_to_palette",
    "config_to_room",
]
