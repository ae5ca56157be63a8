"""FastAPI dependency injection for layout services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from stepnrepeat.application import ComputeLayoutCommand, LayoutInput
from stepnrepeat.infrastructure import PreviewRenderer
from stepnrepeat.web.schemas.requests import LayoutRequestSchema


def get_compute_command() -> ComputeLayoutCommand:
    """Dependency for ComputeLayoutCommand."""
    return ComputeLayoutCommand()


@lru_cache(maxsize=1)
def get_preview_renderer() -> PreviewRenderer:
    """Get cached PreviewRenderer instance."""
    return PreviewRenderer()


def to_layout_input(request: LayoutRequestSchema) -> LayoutInput:
    """Snapshot request values as a LayoutInput."""
    return LayoutInput(
        document_width=request.document_width,
        document_height=request.document_height,
        document_margin=request.document_margin,
        item_width=request.item_width,
        item_height=request.item_height,
        unit=request.unit,
    )


# Type aliases for cleaner endpoint signatures
ComputeCommandDep = Annotated[ComputeLayoutCommand, Depends(get_compute_command)]
PreviewRendererDep = Annotated[PreviewRenderer, Depends(get_preview_renderer)]
