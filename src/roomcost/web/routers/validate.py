"""Configuration validation endpoint."""

from typing import Any

from fastapi import APIRouter

from roomcost.application.config import ConfigError, load_config_from_dict
from roomcost.web.schemas import ConfigValidateRequest

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("")
async def validate_configuration(request: ConfigValidateRequest) -> dict[str, Any]:
    """Validate a room configuration without computing anything."""
    try:
        load_config_from_dict(request.config)
    except ConfigError as e:
        return {
            "is_valid": False,
            "errors": [
                {"message": detail["message"], "path": detail["path"]}
                for detail in e.details
            ],
        }
    return {"is_valid": True, "errors": []}
