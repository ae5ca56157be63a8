"""Preview geometry derived from a layout result.

Converts a LayoutResult into whole preview pixels. The default scale draws
a quarter of a pixel per millimetre, whatever unit the dimensions use.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from stepnrepeat.domain.units import Unit
from stepnrepeat.domain.value_objects import LayoutResult

# Preview pixels per millimetre
PREVIEW_SCALE: float = 0.25


@dataclass(frozen=True)
class PreviewCell:
    """Pixel rectangle of one item in the preview."""

    row: int
    column: int
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class PreviewGeometry:
    """Pixel sizes needed to draw a layout preview.

    Attributes:
        canvas_width: Real document width in preview pixels.
        canvas_height: Real document height in preview pixels.
        margin: Margin in preview pixels.
        item_width: Item width in preview pixels.
        item_height: Item height in preview pixels.
        offset_x: Horizontal shift that centers the grid in the usable area.
        offset_y: Vertical shift that centers the grid in the usable area.
        columns: Number of item columns.
        rows: Number of item rows.
    """

    canvas_width: int
    canvas_height: int
    margin: int
    item_width: int
    item_height: int
    offset_x: int
    offset_y: int
    columns: int
    rows: int

    @classmethod
    def from_result(
        cls,
        result: LayoutResult,
        unit: Unit = Unit.MM,
        scale: float = PREVIEW_SCALE,
    ) -> PreviewGeometry:
        """Derive preview geometry from a layout result.

        Args:
            result: The layout to preview.
            unit: Unit the result's dimensions are expressed in.
            scale: Preview pixels per millimetre.

        Returns:
            PreviewGeometry with floored pixel sizes.
        """
        if scale <= 0:
            raise ValueError("Preview scale must be positive")

        factor = scale * unit.millimeters_per_unit
        return cls(
            canvas_width=math.floor(result.document_width_real * factor),
            canvas_height=math.floor(result.document_height_real * factor),
            margin=math.floor(result.document_margin * factor),
            item_width=math.floor(result.item_width * factor),
            item_height=math.floor(result.item_height * factor),
            offset_x=math.floor(result.leftover_width * factor / 2),
            offset_y=math.floor(result.leftover_height * factor / 2),
            columns=result.max_columns,
            rows=result.max_rows,
        )

    @property
    def item_count(self) -> int:
        return self.rows * self.columns

    @property
    def grid_origin(self) -> tuple[int, int]:
        """Top-left pixel of the first item."""
        return self.margin + self.offset_x, self.margin + self.offset_y

    def cells(self) -> Iterator[PreviewCell]:
        """Yield item rectangles row by row."""
        origin_x, origin_y = self.grid_origin
        for row in range(self.rows):
            for column in range(self.columns):
                yield PreviewCell(
                    row=row,
                    column=column,
                    x=origin_x + column * self.item_width,
                    y=origin_y + row * self.item_height,
                    width=self.item_width,
                    height=self.item_height,
                )
