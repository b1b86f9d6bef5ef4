"""FastAPI REST API for room cost estimation.

Usage:
    uvicorn roomcost.web:app --reload
"""

from roomcost.web.app import app, create_app

__all__ = ["app", "create_app"]
