"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from stepnrepeat.domain import (
    LayoutRequest,
    Orientation,
    OrientationOutcome,
    PreviewGeometry,
    Unit,
)


@dataclass(frozen=True)
class LayoutInput:
    """Snapshot of the five layout inputs taken once per commit.

    Values are None when the user left a field empty. The margin falls back
    to the domain default; every other empty field fails the computation.
    """

    document_width: float | None
    document_height: float | None
    document_margin: float | None
    item_width: float | None
    item_height: float | None
    unit: Unit = Unit.MM

    def swapped_document(self) -> LayoutInput:
        """Return a copy with document width and height exchanged."""
        return replace(
            self,
            document_width=self.document_height,
            document_height=self.document_width,
        )

    def swapped_item(self) -> LayoutInput:
        """Return a copy with item width and height exchanged."""
        return replace(
            self,
            item_width=self.item_height,
            item_height=self.item_width,
        )

    def to_request(self) -> LayoutRequest:
        """Convert to a domain LayoutRequest."""
        return LayoutRequest(
            document_width=self.document_width,
            document_height=self.document_height,
            document_margin=self.document_margin,
            item_width=self.item_width,
            item_height=self.item_height,
        )


@dataclass(frozen=True)
class LayoutOutput:
    """Output DTO for a computed layout.

    Attributes:
        layout_input: The input snapshot the layout was computed from.
        outcome: Orientation candidates and the preferred one.
        previews: Preview geometry for every candidate.
    """

    layout_input: LayoutInput
    outcome: OrientationOutcome
    previews: dict[Orientation, PreviewGeometry] = field(default_factory=dict)

    @property
    def unit(self) -> Unit:
        return self.layout_input.unit

    @property
    def preferred_preview(self) -> PreviewGeometry:
        return self.previews[self.outcome.preferred]
