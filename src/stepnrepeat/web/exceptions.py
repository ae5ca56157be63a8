"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stepnrepeat.domain import LayoutError, MarginExceedsDimensionError


def _layout_error_details(exc: LayoutError) -> dict[str, str] | None:
    if isinstance(exc, MarginExceedsDimensionError):
        return {"axis": exc.axis}
    name = getattr(exc, "name", None)
    if name is not None:
        return {"field": name}
    return None


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(LayoutError)
    async def layout_error_handler(request: Request, exc: LayoutError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": _layout_error_details(exc),
            },
        )
