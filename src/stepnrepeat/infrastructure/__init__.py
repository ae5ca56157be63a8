"""Infrastructure layer - preview rendering and output formatting."""

from .formatters import LayoutJsonFormatter, LayoutSummaryFormatter, result_to_dict
from .preview_renderer import PREVIEW_ORDER, PreviewRenderer

__all__ = [
    "LayoutJsonFormatter",
    "LayoutSummaryFormatter",
    "PREVIEW_ORDER",
    "PreviewRenderer",
    "result_to_dict",
]
