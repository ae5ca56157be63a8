"""Pydantic models for step and repeat configuration files.

Configuration files are JSON documents describing the document, its margin
and the item to repeat. Example:

    {
        "schema_version": "1.0",
        "unit": "mm",
        "document": {"width": 330, "height": 488, "margin": 12.7},
        "item": {"width": 90, "height": 50}
    }
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stepnrepeat.domain import DEFAULT_DOCUMENT_MARGIN, PREVIEW_SCALE, Unit

# Supported schema versions for configuration files
# Version 1.0: Document, item, unit and preview settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class DocumentConfig(BaseModel):
    """Document (canvas) dimensions.

    Attributes:
        width: Outer document width (> 0)
        height: Outer document height (> 0)
        margin: Uniform margin on every side (>= 0)
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    margin: float = Field(default=DEFAULT_DOCUMENT_MARGIN, ge=0)


class ItemConfig(BaseModel):
    """Dimensions of the repeated item."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class PreviewConfig(BaseModel):
    """Preview rendering options.

    Attributes:
        scale: Preview pixels per millimetre
        preferred_only: Render only the preferred orientation
    """

    model_config = ConfigDict(extra="forbid")

    scale: float = Field(default=PREVIEW_SCALE, gt=0, le=10)
    preferred_only: bool = False


class StepRepeatConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Configuration schema version (e.g. "1.0")
        unit: Unit shared by every dimension
        document: Document dimensions and margin
        item: Item dimensions
        preview: Preview rendering options
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    unit: Unit = Unit.MM
    document: DocumentConfig
    item: ItemConfig
    preview: PreviewConfig = Field(default_factory=PreviewConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
