"""Layout computation endpoints."""

from fastapi import APIRouter

from stepnrepeat.infrastructure import LayoutJsonFormatter, result_to_dict
from stepnrepeat.web.dependencies import ComputeCommandDep, to_layout_input
from stepnrepeat.web.schemas.requests import LayoutRequestSchema
from stepnrepeat.web.schemas.responses import (
    ErrorResponseSchema,
    LayoutResultSchema,
    OrientationOutcomeSchema,
)

router = APIRouter(prefix="/layout", tags=["layout"])


@router.post(
    "/optimize",
    response_model=LayoutResultSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def optimize_layout(
    request: LayoutRequestSchema,
    command: ComputeCommandDep,
) -> LayoutResultSchema:
    """Optimize the document exactly as given, without comparing orientations.

    Raises:
        LayoutError: Rendered as a 422 response by the error handler.
    """
    result = command.optimize(to_layout_input(request))
    return LayoutResultSchema.model_validate(result_to_dict(result))


@router.post(
    "/orientation",
    response_model=OrientationOutcomeSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def select_layout_orientation(
    request: LayoutRequestSchema,
    command: ComputeCommandDep,
) -> OrientationOutcomeSchema:
    """Compare orientations and return every candidate with preview geometry."""
    output = command.execute(to_layout_input(request))
    return OrientationOutcomeSchema.model_validate(
        LayoutJsonFormatter(indent=None).to_dict(output)
    )
