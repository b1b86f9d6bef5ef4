"""Infrastructure layer - formatting and renderer implementations."""

from .formatters import CostReportFormatter, DisplayFormatter, LabelTextFormatter
from .recording_renderer import RecordedLabel, RecordingRenderer

__all__ = [
    "CostReportFormatter",
    "DisplayFormatter",
    "LabelTextFormatter",
    "RecordedLabel",
    "RecordingRenderer",
]
