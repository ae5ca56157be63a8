"""Unit tests for ComputeLayoutCommand and its DTOs."""

import pytest

from stepnrepeat.application import ComputeLayoutCommand, LayoutInput
from stepnrepeat.domain import (
    MarginExceedsDimensionError,
    MissingFieldError,
    Orientation,
    Unit,
)


class TestLayoutInput:
    """Tests for LayoutInput."""

    def test_default_unit(self, sra3_cards_input: LayoutInput) -> None:
        assert sra3_cards_input.unit is Unit.MM

    def test_swapped_document(self, sra3_cards_input: LayoutInput) -> None:
        swapped = sra3_cards_input.swapped_document()

        assert swapped.document_width == 488
        assert swapped.document_height == 330
        assert swapped.item_width == 90
        assert sra3_cards_input.document_width == 330

    def test_swapped_item(self, sra3_cards_input: LayoutInput) -> None:
        swapped = sra3_cards_input.swapped_item()

        assert swapped.item_width == 50
        assert swapped.item_height == 90
        assert swapped.document_width == 330

    def test_to_request(self, sra3_cards_input: LayoutInput) -> None:
        request = sra3_cards_input.to_request()

        assert request.document_width == 330
        assert request.document_margin is None
        assert request.item_height == 50


class TestComputeLayoutCommand:
    """Tests for ComputeLayoutCommand."""

    def test_execute_rectangular(
        self, compute_command: ComputeLayoutCommand, sra3_cards_input: LayoutInput
    ) -> None:
        output = compute_command.execute(sra3_cards_input)

        assert output.outcome.preferred is Orientation.LANDSCAPE
        assert output.outcome.preferred_result.item_count == 30
        assert set(output.previews) == {Orientation.LANDSCAPE, Orientation.PORTRAIT}
        assert output.preferred_preview.columns == 5
        assert output.layout_input is sra3_cards_input
        assert output.unit is Unit.MM

    def test_execute_square(self, compute_command: ComputeLayoutCommand) -> None:
        output = compute_command.execute(LayoutInput(100, 100, 0, 30, 30))

        assert output.outcome.is_square
        assert list(output.previews) == [Orientation.SQUARE]
        assert output.preferred_preview.canvas_width == 25

    def test_preview_scale_used(self, sra3_cards_input: LayoutInput) -> None:
        output = ComputeLayoutCommand(preview_scale=1.0).execute(sra3_cards_input)

        assert output.preferred_preview.canvas_width == 488

    def test_preview_unit_used(self, compute_command: ComputeLayoutCommand) -> None:
        output = compute_command.execute(LayoutInput(10, 10, 0, 5, 5, unit=Unit.CM))

        assert output.preferred_preview.canvas_width == 25

    def test_invalid_preview_scale(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            ComputeLayoutCommand(preview_scale=0)

    def test_execute_propagates_layout_errors(
        self, compute_command: ComputeLayoutCommand
    ) -> None:
        with pytest.raises(MarginExceedsDimensionError):
            compute_command.execute(LayoutInput(100, 100, 60, 10, 10))

    def test_execute_missing_field(self, compute_command: ComputeLayoutCommand) -> None:
        with pytest.raises(MissingFieldError):
            compute_command.execute(LayoutInput(330, 488, None, None, 50))

    def test_optimize_keeps_given_orientation(
        self, compute_command: ComputeLayoutCommand, sra3_cards_input: LayoutInput
    ) -> None:
        result = compute_command.optimize(sra3_cards_input)

        assert result.document_width_real == 330
        assert result.max_columns == 3
        assert result.max_rows == 9
