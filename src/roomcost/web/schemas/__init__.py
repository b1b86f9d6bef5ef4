"""Request schemas for the REST API."""

from roomcost.web.schemas.requests import ConfigValidateRequest, SceneRequest

__all__ = ["ConfigValidateRequest", "SceneRequest"]
