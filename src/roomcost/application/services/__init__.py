"""Application services."""

from .scene_presenter import LabelPalette, ScenePresenter

__all__ = ["LabelPalette", "ScenePresenter"]
