"""Configuration schema and loading for room cost configurations.

Public API:
    - RoomConfiguration: Root configuration model
    - RoomConfig, LayerConfig, LayerDefaultsConfig: Room and layer models
    - LayoutConfig, CameraConfig, PaletteConfig, DisplayConfig: Scene tuning
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Validate configuration held in memory
    - ConfigError: Exception for configuration errors
    - config_to_*: Convert configuration to domain objects

Example:
    >>> from pathlib import Path
    >>> from roomcost.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("living-room.json"))
    ...     print(f"Room: {config.room.length}x{config.room.width}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from .adapter import (
    config_to_camera_settings,
    config_to_layer_defaults,
    config_to_layout_settings,
    config_to_palette,
    config_to_room,
)
from .loader import ConfigError, load_config, load_config_from_dict
from .schema import (
    SUPPORTED_VERSIONS,
    CameraConfig,
    DisplayConfig,
    LayerConfig,
    LayerDefaultsConfig,
    LayoutConfig,
    PaletteConfig,
    RoomConfig,
    RoomConfiguration,
)

__all__ = [
    "CameraConfig",
    "ConfigError",
    "DisplayConfig",
    "LayerConfig",
    "LayerDefaultsConfig",
    "LayoutConfig",
    "PaletteConfig",
    "RoomConfig",
    "RoomConfiguration",
    "SUPPORTED_VERSIONS",
    "config_to_camera_settings",
    "config_to_layer_defaults",
    "config_to_layout_settings",
    "config_to_palette",
    "config_to_room",
    "load_config",
    "load_config_from_dict",
]
