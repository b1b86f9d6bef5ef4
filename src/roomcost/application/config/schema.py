"""Pydantic configuration schema models for room cost configurations.

This module defines the schema for JSON room configuration files and API
request bodies. It uses Pydantic v2 for validation and serialization.
Configurations are read-only input; nothing is written back.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Supported schema versions for configuration files
# Version 1.0: Initial schema with room, layers, layout and camera settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class RoomConfig(BaseModel):
    """Room dimensions in meters."""

    model_config = ConfigDict(extra="forbid")

    length: float = Field(
        default=5.0, ge=0, allow_inf_nan=False, description="Room length in meters"
    )
    width: float = Field(
        default=4.0, ge=0, allow_inf_nan=False, description="Room width in meters"
    )
    height: float = Field(
        default=3.0, ge=0, allow_inf_nan=False, description="Room height in meters"
    )


class LayerConfig(BaseModel):
    """A material layer.

    Fields left unset fall back to ``layer_defaults``. When ``package_area``
    is positive and ``package_unit_price`` is given, the unit price is
    derived from them.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    unit_price: float | None = Field(default=None, ge=0, description="Price per m²")
    wall_count: int | None = Field(default=None, ge=0, le=4)
    applies_floor: bool | None = None
    applies_ceiling: bool | None = None
    package_unit_price: float | None = Field(default=None, ge=0)
    package_area: float | None = Field(default=None, ge=0)
    exclusion_area: float = Field(default=0.0, ge=0, description="Openings in m²")


class LayerDefaultsConfig(BaseModel):
    """Defaults applied to freshly added layers."""

    model_config = ConfigDict(extra="forbid")

    wall_count: int = Field(default=4, ge=0, le=4)
    applies_floor: bool = True
    applies_ceiling: bool = True
    unit_price: float = Field(default=0.0, ge=0)
    name_prefix: str = "Layer"


class LayoutConfig(BaseModel):
    """Text sizing and spacing constants."""

    model_config = ConfigDict(extra="forbid")

    text_scale: float = Field(default=0.03, gt=0)
    height_ratio: float = Field(default=0.15, gt=0)
    min_text_size: float = Field(default=0.15, gt=0)
    gap_ratio: float = Field(default=1.2, ge=0)
    total_offset: float = Field(default=2.0, ge=0)
    total_scale: float = Field(default=1.2, gt=0)
    grid_margin: float = Field(default=2.0, gt=0)


class CameraConfig(BaseModel):
    """Camera framing constants."""

    model_config = ConfigDict(extra="forbid")

    fit_multiplier: float = Field(default=1.5, gt=0)
    near_ratio: float = Field(default=0.4, ge=0, lt=1)
    far_ratio: float = Field(default=2.5, gt=1)
    min_elevation_ratio: float = Field(default=0.3, ge=0)
    lerp_factor: float = Field(default=0.05, gt=0, le=1)
    snap_threshold: float = Field(default=0.1, gt=0)
    initial_position: tuple[float, float, float] = (10.0, 10.0, 10.0)


class PaletteConfig(BaseModel):
    """Label colors as ``#RRGGBB`` strings."""

    model_config = ConfigDict(extra="forbid")

    dimension: str = "#ffffff"
    surface: str = "#ffff00"
    total: str = "#00ff88"

    @field_validator("dimension", "surface", "total")
    @classmethod
    def validate_hex_color(cls, value: str) -> str:
        text = value.strip()
        digits = text[1:] if text.startswith("#") else text
        if len(digits) != 6:
            raise ValueError("color must be a #RRGGBB hex string")
        try:
            int(digits, 16)
        except ValueError as e:
            raise ValueError("color must be a #RRGGBB hex string") from e
        return f"#{digits.lower()}"


class DisplayConfig(BaseModel):
    """Display formatting options."""

    model_config = ConfigDict(extra="forbid")

    currency_symbol: str = "$"


class RoomConfiguration(BaseModel):
    """Root configuration model.

    Example:
        ```json
        {
          "schema_version": "1.0",
          "room": {"length": 5, "width": 4, "height": 3},
          "layers": [
            {"name": "Paint", "unit_price": 12, "applies_floor": false,
             "exclusion_area": 2.5}
          ]
        }
        ```
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    room: RoomConfig = Field(default_factory=RoomConfig)
    layers: list[LayerConfig] = Field(default_factory=list)
    layer_defaults: LayerDefaultsConfig = Field(default_factory=LayerDefaultsConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    camera: CameraConfig = Field(default_factory=CameraConfig)
    palette: PaletteConfig = Field(default_factory=PaletteConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version {value!r}; supported: {supported}"
            )
        return value
