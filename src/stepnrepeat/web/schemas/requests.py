"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from stepnrepeat.domain import PREVIEW_SCALE, Unit


class LayoutRequestSchema(BaseModel):
    """Request for a layout computation.

    Fields are optional so that missing values reach the optimizer and come
    back as typed `missing_field` errors. A missing margin uses the default.
    """

    document_width: float | None = Field(default=None, description="Document width")
    document_height: float | None = Field(default=None, description="Document height")
    document_margin: float | None = Field(
        default=None, description="Margin on every side (default 12.7)"
    )
    item_width: float | None = Field(default=None, description="Item width")
    item_height: float | None = Field(default=None, description="Item height")
    unit: Unit = Field(default=Unit.MM, description="Unit shared by every dimension")


class PreviewRequestSchema(LayoutRequestSchema):
    """Request for a rendered preview."""

    scale: float = Field(
        default=PREVIEW_SCALE, gt=0, le=10, description="Preview pixels per millimetre"
    )
    preferred_only: bool = Field(
        default=False, description="Render only the preferred orientation"
    )
