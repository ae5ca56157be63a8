"""Preview rendering endpoints."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from stepnrepeat.application import ComputeLayoutCommand
from stepnrepeat.web.dependencies import PreviewRendererDep, to_layout_input
from stepnrepeat.web.schemas.requests import PreviewRequestSchema
from stepnrepeat.web.schemas.responses import ErrorResponseSchema

router = APIRouter(prefix="/preview", tags=["preview"])


@router.post(
    "/svg",
    response_class=Response,
    responses={
        200: {"content": {"image/svg+xml": {}}},
        422: {"model": ErrorResponseSchema},
    },
)
async def preview_svg(
    request: PreviewRequestSchema,
    renderer: PreviewRendererDep,
) -> Response:
    """Render the layout candidates as an SVG image."""
    output = ComputeLayoutCommand(preview_scale=request.scale).execute(
        to_layout_input(request)
    )
    svg = renderer.render_outcome_svg(output, preferred_only=request.preferred_only)
    return Response(content=svg, media_type="image/svg+xml")


@router.post(
    "/ascii",
    response_class=PlainTextResponse,
    responses={422: {"model": ErrorResponseSchema}},
)
async def preview_ascii(
    request: PreviewRequestSchema,
    renderer: PreviewRendererDep,
) -> PlainTextResponse:
    """Render the layout candidates as ASCII art."""
    output = ComputeLayoutCommand(preview_scale=request.scale).execute(
        to_layout_input(request)
    )
    return PlainTextResponse(
        renderer.render_outcome_ascii(output, preferred_only=request.preferred_only)
    )
