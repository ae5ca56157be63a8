"""Value objects for step and repeat layout optimization.

All dataclasses are frozen (immutable): a request is never mutated by the
optimizer, every computation returns a fresh result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Margin applied when the request omits one (half an inch, in millimetres)
DEFAULT_DOCUMENT_MARGIN: float = 12.7

# Request fields in validation order
REQUEST_FIELDS: tuple[str, ...] = (
    "document_width",
    "document_height",
    "document_margin",
    "item_width",
    "item_height",
)


class Orientation(str, Enum):
    """Orientation of the document's long axis."""

    SQUARE = "square"
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


@dataclass(frozen=True)
class LayoutRequest:
    """Input to the layout optimizer.

    A value of None means the field was not supplied. Only the margin has a
    default (DEFAULT_DOCUMENT_MARGIN); any other missing field is an error.

    Attributes:
        document_width: Outer width of the document.
        document_height: Outer height of the document.
        document_margin: Uniform margin removed from every side.
        item_width: Width of a single item.
        item_height: Height of a single item.
    """

    document_width: float | None = None
    document_height: float | None = None
    document_margin: float | None = None
    item_width: float | None = None
    item_height: float | None = None

    def with_default_margin(self) -> LayoutRequest:
        """Return a copy with the default margin applied when omitted."""
        if self.document_margin is not None:
            return self
        return LayoutRequest(
            document_width=self.document_width,
            document_height=self.document_height,
            document_margin=DEFAULT_DOCUMENT_MARGIN,
            item_width=self.item_width,
            item_height=self.item_height,
        )


@dataclass(frozen=True)
class LayoutResult:
    """Result of a single step and repeat optimization.

    Attributes:
        document_width_real: Document width before the margin was applied.
        document_height_real: Document height before the margin was applied.
        document_width: Usable width after the margin was applied.
        document_height: Usable height after the margin was applied.
        document_margin: Margin that was applied to every side.
        item_width: Width of a single item.
        item_height: Height of a single item.
        max_columns: Number of whole items that fit across.
        max_rows: Number of whole items that fit down.
    """

    document_width_real: float
    document_height_real: float
    document_width: float
    document_height: float
    document_margin: float
    item_width: float
    item_height: float
    max_columns: int
    max_rows: int

    def __post_init__(self) -> None:
        if self.max_columns < 0 or self.max_rows < 0:
            raise ValueError("Row and column counts must be non-negative")

    @property
    def item_count(self) -> int:
        """Total number of items placed."""
        return self.max_rows * self.max_columns

    @property
    def occupied_width(self) -> float:
        return self.max_columns * self.item_width

    @property
    def occupied_height(self) -> float:
        return self.max_rows * self.item_height

    @property
    def leftover_width(self) -> float:
        """Usable width not covered by items."""
        return self.document_width - self.occupied_width

    @property
    def leftover_height(self) -> float:
        """Usable height not covered by items."""
        return self.document_height - self.occupied_height

    @property
    def coverage(self) -> float:
        """Fraction of the usable area covered by items (0 to 1)."""
        usable = self.document_width * self.document_height
        if usable <= 0:
            return 0.0
        return (self.occupied_width * self.occupied_height) / usable


@dataclass(frozen=True)
class OrientationOutcome:
    """Result of comparing document orientations.

    Square documents carry only `square`. Other documents carry both
    `landscape` and `portrait`, and `preferred` names the one to show when
    a single preview is rendered.
    """

    preferred: Orientation
    square: LayoutResult | None = None
    landscape: LayoutResult | None = None
    portrait: LayoutResult | None = None

    def __post_init__(self) -> None:
        if self.square is not None:
            if self.landscape is not None or self.portrait is not None:
                raise ValueError("Square outcome cannot carry oriented candidates")
            if self.preferred is not Orientation.SQUARE:
                raise ValueError("Square outcome must prefer the square result")
        elif self.landscape is None or self.portrait is None:
            raise ValueError("Outcome needs a square result or both orientations")
        elif self.preferred is Orientation.SQUARE:
            raise ValueError("Rectangular outcome cannot prefer square")

    @property
    def is_square(self) -> bool:
        return self.square is not None

    @property
    def candidates(self) -> dict[Orientation, LayoutResult]:
        """All computed results keyed by orientation."""
        if self.square is not None:
            return {Orientation.SQUARE: self.square}
        if self.landscape is None or self.portrait is None:
            raise ValueError("Outcome needs a square result or both orientations")
        return {
            Orientation.LANDSCAPE: self.landscape,
            Orientation.PORTRAIT: self.portrait,
        }

    @property
    def preferred_result(self) -> LayoutResult:
        """The result to surface in a single preview."""
        return self.candidates[self.preferred]

    def get(self, orientation: Orientation) -> LayoutResult | None:
        return self.candidates.get(orientation)
