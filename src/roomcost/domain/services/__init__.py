"""Domain services for room pricing, scene layout and camera framing."""

from .camera_fit import CameraFitController, CameraSettings
from .cost_engine import CostEngine, CostReport
from .layout_engine import LABEL_TEMPLATES, LayoutEngine, LayoutSettings

__all__ = [
    "CameraFitController",
    "CameraSettings",
    "CostEngine",
    "CostReport",
    "LABEL_TEMPLATES",
    "LayoutEngine",
    "LayoutSettings",
]
