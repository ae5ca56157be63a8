"""Domain services for layout optimization."""

from .optimizer import count_fitting, optimize_step_and_repeat
from .orientation import select_orientation

__all__ = [
    "count_fitting",
    "optimize_step_and_repeat",
    "select_orientation",
]
