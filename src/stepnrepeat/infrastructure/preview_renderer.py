"""Preview rendering for step and repeat layouts.

This module provides SVG and ASCII previews of a layout: the document
outline, the margin, and every placed item centered in the usable area.
"""

from __future__ import annotations

from itertools import islice

from stepnrepeat.application.dtos import LayoutOutput
from stepnrepeat.domain import (
    LayoutResult,
    Orientation,
    PreviewGeometry,
)

# Side-by-side order of candidates in the combined preview
PREVIEW_ORDER: tuple[Orientation, ...] = (
    Orientation.SQUARE,
    Orientation.PORTRAIT,
    Orientation.LANDSCAPE,
)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


class PreviewRenderer:
    """Renders layout previews in SVG and ASCII.

    Attributes:
        document_fill: Fill color of the document.
        document_stroke: Stroke color of the document outline.
        margin_stroke: Stroke color of the dashed margin outline.
        item_fill: Fill color of placed items.
        item_stroke: Stroke color of item outlines.
        text_color: Color for legends and captions.
        spacing: Pixels between side-by-side previews.
        max_cells: Item rectangles drawn per SVG panel; the rest are
            summarised in a note.
        max_ascii_rows: Row cap of an ASCII drawing.
    """

    header_height = 20
    caption_height = 20

    def __init__(
        self,
        document_fill: str = "#FFFFFF",
        document_stroke: str = "#000000",
        margin_stroke: str = "#999999",
        item_fill: str = "#ADD8E6",  # Light blue
        item_stroke: str = "#1F4E79",
        text_color: str = "#000000",
        spacing: int = 20,
        max_cells: int = 2000,
        max_ascii_rows: int = 60,
    ) -> None:
        self.document_fill = document_fill
        self.document_stroke = document_stroke
        self.margin_stroke = margin_stroke
        self.item_fill = item_fill
        self.item_stroke = item_stroke
        self.text_color = text_color
        self.spacing = spacing
        self.max_cells = max_cells
        self.max_ascii_rows = max_ascii_rows

    def _panel_size(self, geometry: PreviewGeometry) -> tuple[int, int]:
        """Pixel size of one preview panel including legend and caption."""
        width = max(geometry.canvas_width, 80)
        height = self.header_height + geometry.canvas_height + self.caption_height
        return width, height

    def _render_panel(self, geometry: PreviewGeometry, label: str) -> list[str]:
        """SVG elements for one preview panel, origin at (0, 0)."""
        top = self.header_height
        parts: list[str] = [
            f'    <text x="0" y="{top - 6}" font-family="sans-serif" '
            f'font-size="12" fill="{self.text_color}">{label}</text>',
            f'    <rect class="document" x="0" y="{top}" '
            f'width="{geometry.canvas_width}" height="{geometry.canvas_height}" '
            f'fill="{self.document_fill}" stroke="{self.document_stroke}"/>',
        ]

        if geometry.margin > 0:
            parts.append(
                f'    <rect class="margin" x="{geometry.margin}" '
                f'y="{top + geometry.margin}" '
                f'width="{geometry.canvas_width - 2 * geometry.margin}" '
                f'height="{geometry.canvas_height - 2 * geometry.margin}" '
                f'fill="none" stroke="{self.margin_stroke}" stroke-dasharray="4,4"/>'
            )

        for cell in islice(geometry.cells(), self.max_cells):
            parts.append(
                f'    <rect class="item" x="{cell.x}" y="{top + cell.y}" '
                f'width="{cell.width}" height="{cell.height}" '
                f'fill="{self.item_fill}" stroke="{self.item_stroke}"/>'
            )

        caption_y = top + geometry.canvas_height + self.caption_height - 6
        parts.append(
            f'    <text x="0" y="{caption_y}" font-family="sans-serif" '
            f'font-size="12" fill="{self.text_color}">'
            f"{_plural(geometry.item_count, 'item')}</text>"
        )
        hidden = geometry.item_count - self.max_cells
        if hidden > 0:
            parts.append(
                f'    <text class="truncated" x="0" y="{top + 12}" '
                f'font-family="sans-serif" font-size="10" fill="{self.text_color}">'
                f"+{_plural(hidden, 'item')} not drawn</text>"
            )
        return parts

    def render_svg(self, geometry: PreviewGeometry, label: str) -> str:
        """Generate an SVG preview of a single layout.

        Args:
            geometry: Preview geometry of the layout.
            label: Legend shown above the document (e.g. "landscape").

        Returns:
            SVG document string.
        """
        width, height = self._panel_size(geometry)
        parts = [
            f'<svg width="{width}" height="{height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{width}" height="{height}" fill="white"/>',
            f'  <g class="preview preview-{label}">',
            *self._render_panel(geometry, label),
            "  </g>",
            "</svg>",
        ]
        return "\n".join(parts)

    def render_outcome_svg(
        self, output: LayoutOutput, preferred_only: bool = False
    ) -> str:
        """Generate one SVG with every candidate side by side.

        Portrait is drawn before landscape. The preferred candidate's legend
        is marked "(preferred)" when more than one candidate is shown.

        Args:
            output: Computed layout output.
            preferred_only: Draw only the preferred orientation.

        Returns:
            SVG document string.
        """
        outcome = output.outcome
        if preferred_only:
            orientations = [outcome.preferred]
        else:
            orientations = [o for o in PREVIEW_ORDER if o in output.previews]

        panels: list[tuple[Orientation, PreviewGeometry, int, int]] = []
        for orientation in orientations:
            geometry = output.previews[orientation]
            panel_width, panel_height = self._panel_size(geometry)
            panels.append((orientation, geometry, panel_width, panel_height))

        svg_width = sum(p[2] for p in panels) + self.spacing * (len(panels) - 1)
        svg_height = max(p[3] for p in panels)

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
        ]

        x_offset = 0
        for orientation, geometry, panel_width, _ in panels:
            label = orientation.value
            if len(panels) > 1 and orientation is outcome.preferred:
                label += " (preferred)"
            parts.append(
                f'  <g class="preview preview-{orientation.value}" '
                f'transform="translate({x_offset}, 0)">'
            )
            parts.extend(self._render_panel(geometry, label))
            parts.append("  </g>")
            x_offset += panel_width + self.spacing

        parts.append("</svg>")
        return "\n".join(parts)

    def render_ascii(
        self,
        result: LayoutResult,
        label: str,
        width: int = 60,
    ) -> str:
        """Generate an ASCII preview of a single layout.

        The document border is drawn with `=`/`#`, items as `+--+` boxes.
        Terminal characters are about twice as tall as wide, so rows are
        scaled at half the horizontal rate. Tall documents are squeezed to
        `max_ascii_rows`, and grids too dense to outline item by item are
        shaded with `.` over the occupied area.

        Args:
            result: Layout to draw.
            label: Header label (e.g. "portrait").
            width: Width of the drawing in characters, border included.

        Returns:
            ASCII string representation of the layout.
        """
        header = (
            f"{label}: {result.max_columns} x {result.max_rows} = "
            f"{_plural(result.item_count, 'item')}"
        )
        if result.document_width_real <= 0 or result.document_height_real <= 0:
            return header

        inner_width = max(width - 2, 10)
        scale_x = inner_width / result.document_width_real
        scale_y = scale_x * 0.5
        inner_height = max(int(result.document_height_real * scale_y), 4)
        if inner_height > self.max_ascii_rows:
            inner_height = self.max_ascii_rows
            scale_y = inner_height / result.document_height_real

        grid = [[" " for _ in range(inner_width)] for _ in range(inner_height)]

        origin_x = result.document_margin + result.leftover_width / 2
        origin_y = result.document_margin + result.leftover_height / 2
        too_dense = (
            result.max_columns * 2 > inner_width or result.max_rows * 2 > inner_height
        )
        if result.item_count and too_dense:
            self._fill_ascii(
                grid,
                int(origin_x * scale_x),
                int(origin_y * scale_y),
                int((origin_x + result.occupied_width) * scale_x) - 1,
                int((origin_y + result.occupied_height) * scale_y) - 1,
            )
        else:
            for row in range(result.max_rows):
                for column in range(result.max_columns):
                    x = origin_x + column * result.item_width
                    y = origin_y + row * result.item_height
                    self._draw_box_ascii(
                        grid,
                        int(x * scale_x),
                        int(y * scale_y),
                        int((x + result.item_width) * scale_x) - 1,
                        int((y + result.item_height) * scale_y) - 1,
                    )

        lines = [header, "#" + "=" * inner_width + "#"]
        lines.extend("#" + "".join(row) + "#" for row in grid)
        lines.append("#" + "=" * inner_width + "#")
        return "\n".join(lines)

    @staticmethod
    def _clamp_box(
        grid: list[list[str]], x1: int, y1: int, x2: int, y2: int
    ) -> tuple[int, int, int, int]:
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0
        x1 = max(0, min(x1, grid_width - 1))
        x2 = max(x1, min(x2, grid_width - 1))
        y1 = max(0, min(y1, grid_height - 1))
        y2 = max(y1, min(y2, grid_height - 1))
        return x1, y1, x2, y2

    def _fill_ascii(
        self,
        grid: list[list[str]],
        x1: int,
        y1: int,
        x2: int,
        y2: int,
    ) -> None:
        """Shade a rectangle of the grid with `.`."""
        x1, y1, x2, y2 = self._clamp_box(grid, x1, y1, x2, y2)
        for y in range(y1, y2 + 1):
            for x in range(x1, x2 + 1):
                grid[y][x] = "."

    def _draw_box_ascii(
        self,
        grid: list[list[str]],
        x1: int,
        y1: int,
        x2: int,
        y2: int,
    ) -> None:
        """Draw a box outline onto the grid, clamped to its bounds."""
        x1, y1, x2, y2 = self._clamp_box(grid, x1, y1, x2, y2)

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for x, y in ((x1, y1), (x2, y1), (x1, y2), (x2, y2)):
            grid[y][x] = "+"

    def render_outcome_ascii(
        self,
        output: LayoutOutput,
        width: int = 60,
        preferred_only: bool = False,
    ) -> str:
        """Generate ASCII previews for every candidate, stacked vertically."""
        outcome = output.outcome
        if preferred_only:
            orientations = [outcome.preferred]
        else:
            orientations = [o for o in PREVIEW_ORDER if o in outcome.candidates]

        parts: list[str] = []
        for orientation in orientations:
            label = orientation.value
            if len(orientations) > 1 and orientation is outcome.preferred:
                label += " (preferred)"
            parts.append(self.render_ascii(outcome.candidates[orientation], label, width))
            parts.append("")
        return "\n".join(parts).rstrip("\n")
