"""Step and repeat optimization for a single document orientation.

Finds how many whole rows and columns of identical items fit on a document
once a uniform margin is removed from every side.
"""

from __future__ import annotations

import logging
import math

from stepnrepeat.domain.exceptions import (
    InvalidItemSizeError,
    MarginExceedsDimensionError,
    MissingFieldError,
    NonFiniteValueError,
)
from stepnrepeat.domain.value_objects import (
    REQUEST_FIELDS,
    LayoutRequest,
    LayoutResult,
)

logger = logging.getLogger(__name__)


def count_fitting(usable: float, size: float) -> int:
    """Count how many items of `size` fit along `usable`.

    An item counts when it fits within, or ends exactly on, the usable
    length. The count is estimated by division, then settled by at most one
    step so that `count * size <= usable < (count + 1) * size`. The work is
    constant regardless of the ratio between usable length and item size.

    Args:
        usable: Available length (positive).
        size: Length of one item (positive).

    Returns:
        Number of whole items that fit.

    Raises:
        ValueError: If size is not positive.
    """
    if size <= 0:
        raise ValueError("Item size must be positive")

    count = max(math.floor(usable / size), 0)
    # Division rounding can land one item off at the exact-fit boundary
    if count > 0 and count * size > usable:
        count -= 1
    elif count * size < (count + 1) * size <= usable:
        count += 1
    return count


def _normalized_values(request: LayoutRequest) -> dict[str, float]:
    """Validate presence and finiteness, then flip negative values."""
    values: dict[str, float] = {}
    for name in REQUEST_FIELDS:
        value = getattr(request, name)
        if value is None:
            raise MissingFieldError(name)
        value = float(value)
        if not math.isfinite(value):
            raise NonFiniteValueError(name, value)
        values[name] = abs(value)
    return values


def optimize_step_and_repeat(request: LayoutRequest) -> LayoutResult:
    """Compute the maximal grid of items for one document orientation.

    Algorithm:
    1. Apply the default margin when the request omits it
    2. Reject missing or non-finite fields, make every value positive
    3. Reject zero-sized items
    4. Remove twice the margin from each document axis
    5. Count whole columns and rows within the usable area

    Args:
        request: Document, margin and item dimensions.

    Returns:
        LayoutResult with the real and usable document size and the grid.

    Raises:
        MissingFieldError: If a required field is None.
        NonFiniteValueError: If a field is NaN or infinite.
        InvalidItemSizeError: If an item dimension is zero.
        MarginExceedsDimensionError: If the margin leaves no usable width
            or height.
    """
    values = _normalized_values(request.with_default_margin())

    width_real = values["document_width"]
    height_real = values["document_height"]
    margin = values["document_margin"]
    item_width = values["item_width"]
    item_height = values["item_height"]

    if item_width == 0:
        raise InvalidItemSizeError("item_width")
    if item_height == 0:
        raise InvalidItemSizeError("item_height")

    usable_width = width_real
    usable_height = height_real
    if margin != 0:
        usable_width -= margin * 2
        usable_height -= margin * 2

        if usable_width <= 0:
            raise MarginExceedsDimensionError("width", usable_width)
        if usable_height <= 0:
            raise MarginExceedsDimensionError("height", usable_height)

    max_columns = count_fitting(usable_width, item_width)
    max_rows = count_fitting(usable_height, item_height)

    logger.debug(
        "Document %gx%g (usable %gx%g), item %gx%g: %d columns x %d rows",
        width_real,
        height_real,
        usable_width,
        usable_height,
        item_width,
        item_height,
        max_columns,
        max_rows,
    )

    return LayoutResult(
        document_width_real=width_real,
        document_height_real=height_real,
        document_width=usable_width,
        document_height=usable_height,
        document_margin=margin,
        item_width=item_width,
        item_height=item_height,
        max_columns=max_columns,
        max_rows=max_rows,
    )
