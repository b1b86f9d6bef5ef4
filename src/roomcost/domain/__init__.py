"""Domain layer - core business logic."""

from .entities import LayerDefaults, MaterialLayer, Room
from .services import (
    LABEL_TEMPLATES,
    CameraFitController,
    CameraSettings,
    CostEngine,
    CostReport,
    LayoutEngine,
    LayoutSettings,
)
from .value_objects import (
    BoxPlacement,
    CameraState,
    ColorRole,
    CostBreakdownEntry,
    DerivedAreas,
    Dimension,
    GridExtent,
    LabelKind,
    LabelPlacement,
    SceneLayout,
    Vector3,
)

__all__ = [
    "BoxPlacement",
    "CameraFitController",
    "CameraSettings",
    "CameraState",
    "ColorRole",
    "CostBreakdownEntry",
    "CostEngine",
    "CostReport",
    "DerivedAreas",
    "Dimension",
    "GridExtent",
    "LABEL_TEMPLATES",
    "LabelKind",
    "LabelPlacement",
    "LayerDefaults",
    "LayoutEngine",
    "LayoutSettings",
    "MaterialLayer",
    "Room",
    "SceneLayout",
    "Vector3",
]
