"""Unit tests for the preview renderer."""

import xml.etree.ElementTree as ET

import pytest

from stepnrepeat.application import ComputeLayoutCommand, LayoutInput, LayoutOutput
from stepnrepeat.domain import LayoutResult, Orientation, PreviewGeometry
from stepnrepeat.infrastructure import PREVIEW_ORDER, PreviewRenderer

SVG_NS = "{http://www.w3.org/2000/svg}"


def _rects(svg: str, css_class: str) -> list[ET.Element]:
    root = ET.fromstring(svg)
    return [r for r in root.iter(f"{SVG_NS}rect") if r.get("class") == css_class]


def _groups(svg: str) -> list[str]:
    root = ET.fromstring(svg)
    return [g.get("class", "") for g in root.iter(f"{SVG_NS}g")]


@pytest.fixture
def renderer() -> PreviewRenderer:
    return PreviewRenderer()


@pytest.fixture
def cards_output(sra3_cards_input: LayoutInput) -> LayoutOutput:
    return ComputeLayoutCommand().execute(sra3_cards_input)


@pytest.fixture
def square_output() -> LayoutOutput:
    return ComputeLayoutCommand().execute(LayoutInput(100, 100, 0, 30, 30))


class TestPreviewOrder:
    def test_portrait_drawn_before_landscape(self) -> None:
        assert PREVIEW_ORDER.index(Orientation.PORTRAIT) < PREVIEW_ORDER.index(
            Orientation.LANDSCAPE
        )


class TestRenderSvg:
    """Tests for single-layout SVG rendering."""

    def test_valid_svg(self, renderer: PreviewRenderer, cards_output: LayoutOutput) -> None:
        geometry = cards_output.previews[Orientation.LANDSCAPE]

        svg = renderer.render_svg(geometry, "landscape")

        root = ET.fromstring(svg)
        assert root.tag == f"{SVG_NS}svg"
        assert _groups(svg) == ["preview preview-landscape"]

    def test_one_rect_per_item(
        self, renderer: PreviewRenderer, cards_output: LayoutOutput
    ) -> None:
        svg = renderer.render_svg(cards_output.previews[Orientation.LANDSCAPE], "landscape")

        items = _rects(svg, "item")
        assert len(items) == 30
        assert items[0].get("width") == "22"
        assert items[0].get("height") == "12"

    def test_document_rect_matches_canvas(
        self, renderer: PreviewRenderer, cards_output: LayoutOutput
    ) -> None:
        svg = renderer.render_svg(cards_output.previews[Orientation.LANDSCAPE], "landscape")

        (document,) = _rects(svg, "document")
        assert document.get("width") == "122"
        assert document.get("height") == "82"

    def test_margin_outline_drawn(
        self, renderer: PreviewRenderer, cards_output: LayoutOutput
    ) -> None:
        svg = renderer.render_svg(cards_output.previews[Orientation.LANDSCAPE], "landscape")

        assert len(_rects(svg, "margin")) == 1

    def test_no_margin_outline_without_margin(
        self, renderer: PreviewRenderer, square_output: LayoutOutput
    ) -> None:
        svg = renderer.render_svg(square_output.previews[Orientation.SQUARE], "square")

        assert _rects(svg, "margin") == []
        assert len(_rects(svg, "item")) == 9

    def test_caption_counts_items(
        self, renderer: PreviewRenderer, square_output: LayoutOutput
    ) -> None:
        svg = renderer.render_svg(square_output.previews[Orientation.SQUARE], "square")

        assert ">9 items</text>" in svg

    def test_empty_grid(self, renderer: PreviewRenderer) -> None:
        output = ComputeLayoutCommand().execute(LayoutInput(100, 80, 10, 90, 90))

        svg = renderer.render_svg(output.previews[Orientation.LANDSCAPE], "landscape")

        assert _rects(svg, "item") == []
        assert ">0 items</text>" in svg


class TestRenderOutcomeSvg:
    """Tests for side-by-side SVG rendering."""

    def test_both_orientations_side_by_side(
        self, renderer: PreviewRenderer, cards_output: LayoutOutput
    ) -> None:
        svg = renderer.render_outcome_svg(cards_output)

        assert _groups(svg) == ["preview preview-portrait", "preview preview-landscape"]
        assert len(_rects(svg, "item")) == 27 + 30

    def test_second_panel_translated(
        self, renderer: PreviewRenderer, cards_output: LayoutOutput
    ) -> None:
        svg = renderer.render_outcome_svg(cards_output)

        root = ET.fromstring(svg)
        transforms = [g.get("transform") for g in root.iter(f"{SVG_NS}g")]
        portrait_width = cards_output.previews[Orientation.PORTRAIT].canvas_width
        assert transforms == [
            "translate(0, 0)",
            f"translate({portrait_width + renderer.spacing}, 0)",
        ]

    def test_preferred_marked(
        self, renderer: PreviewRenderer, cards_output: LayoutOutput
    ) -> None:
        svg = renderer.render_outcome_svg(cards_output)

        assert "landscape (preferred)" in svg
        assert "portrait (preferred)" not in svg

    def test_preferred_only(
        self, renderer: PreviewRenderer, cards_output: LayoutOutput
    ) -> None:
        svg = renderer.render_outcome_svg(cards_output, preferred_only=True)

        assert _groups(svg) == ["preview preview-landscape"]
        assert len(_rects(svg, "item")) == 30
        assert "(preferred)" not in svg

    def test_square_single_panel(
        self, renderer: PreviewRenderer, square_output: LayoutOutput
    ) -> None:
        svg = renderer.render_outcome_svg(square_output)

        assert _groups(svg) == ["preview preview-square"]
        assert "(preferred)" not in svg


class TestRenderAscii:
    """Tests for ASCII rendering."""

    def test_header(self, renderer: PreviewRenderer, square_output: LayoutOutput) -> None:
        art = renderer.render_ascii(square_output.outcome.square, "square")

        assert art.splitlines()[0] == "square: 3 x 3 = 9 items"

    def test_border_width(
        self, renderer: PreviewRenderer, square_output: LayoutOutput
    ) -> None:
        lines = renderer.render_ascii(square_output.outcome.square, "square", width=40).splitlines()

        assert lines[1] == "#" + "=" * 38 + "#"
        assert lines[-1] == lines[1]
        assert all(len(line) == 40 for line in lines[1:])

    def test_items_drawn(self, renderer: PreviewRenderer, square_output: LayoutOutput) -> None:
        art = renderer.render_ascii(square_output.outcome.square, "square")

        assert "+" in art
        assert "|" in art

    def test_single_item_header(self, renderer: PreviewRenderer) -> None:
        output = ComputeLayoutCommand().execute(LayoutInput(100, 100, 5, 60, 60))

        art = renderer.render_ascii(output.outcome.square, "square")

        assert art.splitlines()[0] == "square: 1 x 1 = 1 item"

    def test_zero_sized_document(self, renderer: PreviewRenderer) -> None:
        result = LayoutResult(
            document_width_real=0,
            document_height_real=0,
            document_width=0,
            document_height=0,
            document_margin=0,
            item_width=10,
            item_height=10,
            max_columns=0,
            max_rows=0,
        )

        assert renderer.render_ascii(result, "square") == "square: 0 x 0 = 0 items"

    def test_outcome_ascii(self, renderer: PreviewRenderer, cards_output: LayoutOutput) -> None:
        art = renderer.render_outcome_ascii(cards_output)

        assert art.index("portrait: 3 x 9") < art.index("landscape (preferred): 5 x 6")

    def test_outcome_ascii_preferred_only(
        self, renderer: PreviewRenderer, cards_output: LayoutOutput
    ) -> None:
        art = renderer.render_outcome_ascii(cards_output, preferred_only=True)

        assert art.startswith("landscape: 5 x 6 = 30 items")
        assert "portrait" not in art


class TestPreviewGeometryInput:
    def test_geometry_from_output_is_used(
        self, renderer: PreviewRenderer, cards_output: LayoutOutput
    ) -> None:
        geometry = PreviewGeometry.from_result(
            cards_output.outcome.landscape, scale=1.0
        )

        svg = renderer.render_svg(geometry, "landscape")

        (document,) = _rects(svg, "document")
        assert document.get("width") == "488"


class TestPreviewLimits:
    """Previews stay small however many items fit."""

    @pytest.fixture
    def dense_output(self) -> LayoutOutput:
        return ComputeLayoutCommand().execute(LayoutInput(1000, 1000, 0, 1, 1))

    def test_svg_draws_at_most_max_cells(self, dense_output: LayoutOutput) -> None:
        renderer = PreviewRenderer(max_cells=500)

        svg = renderer.render_svg(dense_output.previews[Orientation.SQUARE], "square")

        assert len(_rects(svg, "item")) == 500
        assert "+999500 items not drawn" in svg
        assert ">1000000 items</text>" in svg

    def test_svg_size_bounded(
        self, renderer: PreviewRenderer, dense_output: LayoutOutput
    ) -> None:
        svg = renderer.render_outcome_svg(dense_output)

        assert len(svg) < 1_000_000
        assert len(_rects(svg, "item")) == renderer.max_cells

    def test_no_note_below_limit(
        self, renderer: PreviewRenderer, square_output: LayoutOutput
    ) -> None:
        svg = renderer.render_svg(square_output.previews[Orientation.SQUARE], "square")

        assert "not drawn" not in svg

    def test_ascii_rows_capped_for_tall_document(self, renderer: PreviewRenderer) -> None:
        output = ComputeLayoutCommand().execute(LayoutInput(1, 100000, 0, 1, 1))

        art = renderer.render_ascii(output.outcome.portrait, "portrait")

        lines = art.splitlines()
        assert len(lines) == renderer.max_ascii_rows + 3
        assert lines[0] == "portrait: 1 x 100000 = 100000 items"

    def test_dense_grid_is_shaded(
        self, renderer: PreviewRenderer, dense_output: LayoutOutput
    ) -> None:
        art = renderer.render_ascii(dense_output.outcome.square, "square")

        body = [line[1:-1] for line in art.splitlines()[2:-1]]
        cells = sum(len(line) for line in body)
        assert sum(line.count(".") for line in body) >= 0.9 * cells
        assert not any("+" in line for line in body)
