"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class SceneRequest(BaseModel):
    """Request for a full scene snapshot."""

    config: dict[str, Any] = Field(
        default_factory=dict, description="Room configuration JSON"
    )
    camera_position: tuple[float, float, float] | None = Field(
        default=None, description="Live camera position; the configured start when omitted"
    )
    font_ready: bool = Field(
        default=True, description="Whether the client's label font has loaded"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Room configuration JSON")
