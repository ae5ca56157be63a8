"""Domain layer - core layout optimization logic."""

from .exceptions import (
    InvalidItemSizeError,
    LayoutError,
    MarginExceedsDimensionError,
    MissingFieldError,
    NonFiniteValueError,
)
from .preview import PREVIEW_SCALE, PreviewCell, PreviewGeometry
from .services import count_fitting, optimize_step_and_repeat, select_orientation
from .units import Unit
from .value_objects import (
    DEFAULT_DOCUMENT_MARGIN,
    REQUEST_FIELDS,
    LayoutRequest,
    LayoutResult,
    Orientation,
    OrientationOutcome,
)

__all__ = [
    "DEFAULT_DOCUMENT_MARGIN",
    "InvalidItemSizeError",
    "LayoutError",
    "LayoutRequest",
    "LayoutResult",
    "MarginExceedsDimensionError",
    "MissingFieldError",
    "NonFiniteValueError",
    "Orientation",
    "OrientationOutcome",
    "PREVIEW_SCALE",
    "PreviewCell",
    "PreviewGeometry",
    "REQUEST_FIELDS",
    "Unit",
    "count_fitting",
    "optimize_step_and_repeat",
    "select_orientation",
]
