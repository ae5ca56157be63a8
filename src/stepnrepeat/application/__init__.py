"""Application layer - use cases, input parsing and configuration."""

from .commands import ComputeLayoutCommand
from .dtos import LayoutInput, LayoutOutput
from .expressions import ExpressionError, evaluate_expression, parse_dimension

__all__ = [
    "ComputeLayoutCommand",
    "ExpressionError",
    "LayoutInput",
    "LayoutOutput",
    "evaluate_expression",
    "parse_dimension",
]
