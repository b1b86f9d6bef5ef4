"""API routers."""

from roomcost.web.routers.estimate import router as estimate_router
from roomcost.web.routers.validate import router as validate_router

__all__ = ["estimate_router", "validate_router"]
