"""Orientation selection for step and repeat layouts."""

from __future__ import annotations

import logging

from stepnrepeat.domain.exceptions import MissingFieldError
from stepnrepeat.domain.services.optimizer import optimize_step_and_repeat
from stepnrepeat.domain.value_objects import (
    LayoutRequest,
    Orientation,
    OrientationOutcome,
)

logger = logging.getLogger(__name__)


def select_orientation(
    document_width: float | None,
    document_height: float | None,
    document_margin: float | None,
    item_width: float | None,
    item_height: float | None,
) -> OrientationOutcome:
    """Optimize a document in every orientation it supports.

    Square documents are optimized once. Other documents are optimized as
    landscape (long axis across) and portrait (long axis down), and the
    orientation holding more items is preferred. Ties prefer landscape.

    Args:
        document_width: Raw document width, before the margin.
        document_height: Raw document height, before the margin.
        document_margin: Margin shared by every candidate (None for default).
        item_width: Item width shared by every candidate.
        item_height: Item height shared by every candidate.

    Returns:
        OrientationOutcome holding the computed candidates.

    Raises:
        LayoutError: Any optimizer failure; no fallback orientation is tried.
    """
    if document_width is None:
        raise MissingFieldError("document_width")
    if document_height is None:
        raise MissingFieldError("document_height")

    if document_width == document_height:
        square = optimize_step_and_repeat(
            LayoutRequest(
                document_width=document_width,
                document_height=document_height,
                document_margin=document_margin,
                item_width=item_width,
                item_height=item_height,
            )
        )
        logger.debug("Square document: %d items", square.item_count)
        return OrientationOutcome(preferred=Orientation.SQUARE, square=square)

    lowest = min(document_width, document_height)
    highest = max(document_width, document_height)

    landscape = optimize_step_and_repeat(
        LayoutRequest(
            document_width=highest,
            document_height=lowest,
            document_margin=document_margin,
            item_width=item_width,
            item_height=item_height,
        )
    )
    portrait = optimize_step_and_repeat(
        LayoutRequest(
            document_width=lowest,
            document_height=highest,
            document_margin=document_margin,
            item_width=item_width,
            item_height=item_height,
        )
    )

    if portrait.item_count > landscape.item_count:
        preferred = Orientation.PORTRAIT
    else:
        preferred = Orientation.LANDSCAPE

    logger.debug(
        "Landscape %d items, portrait %d items: preferring %s",
        landscape.item_count,
        portrait.item_count,
        preferred.value,
    )
    return OrientationOutcome(
        preferred=preferred,
        landscape=landscape,
        portrait=portrait,
    )
