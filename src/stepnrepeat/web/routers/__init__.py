"""API routers for the REST API."""

from stepnrepeat.web.routers.layout import router as layout_router
from stepnrepeat.web.routers.preview import router as preview_router

__all__ = [
    "layout_router",
    "preview_router",
]
