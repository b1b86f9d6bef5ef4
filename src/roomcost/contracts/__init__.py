"""Contracts between the core and its presentation collaborators."""

from .protocols import NumberFormatter, SceneRenderer

__all__ = ["NumberFormatter", "SceneRenderer"]
