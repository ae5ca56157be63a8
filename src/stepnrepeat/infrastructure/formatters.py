"""Output formatters for computed layouts."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from stepnrepeat.application.dtos import LayoutOutput
from stepnrepeat.domain import LayoutResult

from .preview_renderer import PREVIEW_ORDER


class LayoutSummaryFormatter:
    """Formats a layout outcome as a text table."""

    def format(self, output: LayoutOutput, preferred_only: bool = False) -> str:
        """Format every candidate (or only the preferred one) as a table.

        The preferred candidate is marked with `*` when several are listed.
        """
        outcome = output.outcome
        unit = output.unit
        first = outcome.preferred_result
        layout_input = output.layout_input

        lines = [
            "STEP AND REPEAT LAYOUT",
            "=" * 70,
            f"Document: {unit.format(first.document_width_real)} x "
            f"{unit.format(first.document_height_real)}   "
            f"Margin: {unit.format(first.document_margin)}   "
            f"Item: {unit.format(first.item_width)} x {unit.format(first.item_height)}",
            "-" * 70,
            f"  {'Orientation':<12} {'Usable area':<24} {'Cols':<6} {'Rows':<6} "
            f"{'Items':<7} {'Coverage'}",
            "-" * 70,
        ]

        if preferred_only:
            orientations = [outcome.preferred]
        else:
            orientations = [o for o in PREVIEW_ORDER if o in outcome.candidates]

        for orientation in orientations:
            result = outcome.candidates[orientation]
            marker = "*" if len(orientations) > 1 and orientation is outcome.preferred else " "
            usable = (
                f"{unit.format(result.document_width)} x "
                f"{unit.format(result.document_height)}"
            )
            lines.append(
                f"{marker} {orientation.value:<12} {usable:<24} "
                f"{result.max_columns:<6} {result.max_rows:<6} "
                f"{result.item_count:<7} {result.coverage:.1%}"
            )

        lines.append("-" * 70)
        lines.append(
            f"Preferred: {outcome.preferred.value} ({outcome.preferred_result.item_count} items)"
        )
        if layout_input.document_margin is None:
            lines.append(f"(default margin of {unit.format(first.document_margin)} applied)")
        return "\n".join(lines)


def result_to_dict(result: LayoutResult) -> dict[str, Any]:
    """Serialize a LayoutResult including its derived values."""
    data = asdict(result)
    data["item_count"] = result.item_count
    data["leftover_width"] = result.leftover_width
    data["leftover_height"] = result.leftover_height
    data["coverage"] = result.coverage
    return data


class LayoutJsonFormatter:
    """Formats a layout outcome as a JSON document."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def to_dict(self, output: LayoutOutput) -> dict[str, Any]:
        outcome = output.outcome
        candidates: dict[str, Any] = {}
        for orientation, result in outcome.candidates.items():
            entry = result_to_dict(result)
            entry["preview"] = asdict(output.previews[orientation])
            candidates[orientation.value] = entry

        layout_input = output.layout_input
        return {
            "unit": output.unit.value,
            "input": {
                "document_width": layout_input.document_width,
                "document_height": layout_input.document_height,
                "document_margin": layout_input.document_margin,
                "item_width": layout_input.item_width,
                "item_height": layout_input.item_height,
            },
            "is_square": outcome.is_square,
            "preferred": outcome.preferred.value,
            "candidates": candidates,
        }

    def format(self, output: LayoutOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)
