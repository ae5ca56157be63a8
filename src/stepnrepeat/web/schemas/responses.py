"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LayoutResultSchema(BaseModel):
    """Result of a single optimization."""

    document_width_real: float = Field(..., description="Document width before margin")
    document_height_real: float = Field(..., description="Document height before margin")
    document_width: float = Field(..., description="Usable width after margin")
    document_height: float = Field(..., description="Usable height after margin")
    document_margin: float = Field(..., description="Margin applied to every side")
    item_width: float = Field(..., description="Item width")
    item_height: float = Field(..., description="Item height")
    max_columns: int = Field(..., description="Whole items across")
    max_rows: int = Field(..., description="Whole items down")
    item_count: int = Field(..., description="Total items placed")
    leftover_width: float = Field(..., description="Usable width left empty")
    leftover_height: float = Field(..., description="Usable height left empty")
    coverage: float = Field(..., description="Share of usable area covered (0-1)")


class PreviewGeometrySchema(BaseModel):
    """Pixel geometry for drawing a preview."""

    canvas_width: int
    canvas_height: int
    margin: int
    item_width: int
    item_height: int
    offset_x: int
    offset_y: int
    columns: int
    rows: int


class CandidateSchema(LayoutResultSchema):
    """One orientation candidate with its preview geometry."""

    preview: PreviewGeometrySchema


class OrientationOutcomeSchema(BaseModel):
    """Response for an orientation comparison."""

    unit: str = Field(..., description="Unit shared by every dimension")
    input: dict[str, float | None] = Field(..., description="Values as received")
    is_square: bool = Field(..., description="Whether the document is square")
    preferred: str = Field(..., description="Orientation holding the most items")
    candidates: dict[str, CandidateSchema] = Field(
        ..., description="Results keyed by orientation"
    )


class ErrorResponseSchema(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: dict[str, Any] | None = Field(default=None, description="Error details")
