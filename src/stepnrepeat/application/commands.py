"""Application commands (use cases) for step and repeat layouts."""

from __future__ import annotations

import logging

from stepnrepeat.domain import (
    PREVIEW_SCALE,
    LayoutResult,
    PreviewGeometry,
    optimize_step_and_repeat,
    select_orientation,
)

from .dtos import LayoutInput, LayoutOutput

logger = logging.getLogger(__name__)


class ComputeLayoutCommand:
    """Command to recompute the step and repeat layout for one commit.

    Each execution is a complete, stateless recomputation. Layout errors
    propagate to the caller so it can report them and keep showing the
    previous result.
    """

    def __init__(self, preview_scale: float = PREVIEW_SCALE) -> None:
        if preview_scale <= 0:
            raise ValueError("Preview scale must be positive")
        self.preview_scale = preview_scale

    def execute(self, layout_input: LayoutInput) -> LayoutOutput:
        """Compare orientations and derive preview geometry.

        Args:
            layout_input: Snapshot of the document, margin and item values.

        Returns:
            LayoutOutput with the orientation outcome and one preview
            geometry per candidate.

        Raises:
            LayoutError: If the optimizer rejects the input.
        """
        outcome = select_orientation(
            layout_input.document_width,
            layout_input.document_height,
            layout_input.document_margin,
            layout_input.item_width,
            layout_input.item_height,
        )

        previews = {
            orientation: PreviewGeometry.from_result(
                result, unit=layout_input.unit, scale=self.preview_scale
            )
            for orientation, result in outcome.candidates.items()
        }

        logger.info(
            "Preferred %s layout: %d columns x %d rows (%d items)",
            outcome.preferred.value,
            outcome.preferred_result.max_columns,
            outcome.preferred_result.max_rows,
            outcome.preferred_result.item_count,
        )
        return LayoutOutput(
            layout_input=layout_input,
            outcome=outcome,
            previews=previews,
        )

    def optimize(self, layout_input: LayoutInput) -> LayoutResult:
        """Optimize the input exactly as given, without comparing orientations.

        Raises:
            LayoutError: If the optimizer rejects the input.
        """
        return optimize_step_and_repeat(layout_input.to_request())
