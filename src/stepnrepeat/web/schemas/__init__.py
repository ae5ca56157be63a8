"""Pydantic schemas for the REST API."""

from stepnrepeat.web.schemas.requests import LayoutRequestSchema, PreviewRequestSchema
from stepnrepeat.web.schemas.responses import (
    CandidateSchema,
    ErrorResponseSchema,
    LayoutResultSchema,
    OrientationOutcomeSchema,
    PreviewGeometrySchema,
)

__all__ = [
    # Requests
    "LayoutRequestSchema",
    "PreviewRequestSchema",
    # Responses
    "CandidateSchema",
    "ErrorResponseSchema",
    "LayoutResultSchema",
    "OrientationOutcomeSchema",
    "PreviewGeometrySchema",
]
