"""FastAPI REST API for step and repeat layouts.

Usage:
    uvicorn stepnrepeat.web:app --reload
"""

from stepnrepeat.web.app import app, create_app

__all__ = ["app", "create_app"]
