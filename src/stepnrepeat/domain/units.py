"""Measurement units for document and item dimensions.

The core never converts units; these factors only size the preview.
"""

from __future__ import annotations

from enum import Enum

# Screen pixels per unit
PIXELS_PER_UNIT: dict[str, float] = {
    "mm": 3.779527,
    "cm": 37.795275,
    "pt": 1.333,
    "pica": 15.940224,  # printer's pica
    "px": 1.0,
}


class Unit(str, Enum):
    """Supported measurement units."""

    MM = "mm"
    CM = "cm"
    PT = "pt"
    PICA = "pica"
    PX = "px"

    @property
    def pixels_per_unit(self) -> float:
        """Screen pixels represented by one unit."""
        return PIXELS_PER_UNIT[self.value]

    @property
    def millimeters_per_unit(self) -> float:
        """Millimetres represented by one unit."""
        return self.pixels_per_unit / PIXELS_PER_UNIT["mm"]

    def to_millimeters(self, value: float) -> float:
        """Convert a value in this unit to millimetres."""
        return value * self.millimeters_per_unit

    def format(self, value: float) -> str:
        """Format a value with this unit's label, dropping a zero fraction."""
        return f"{value:.2f}".rstrip("0").rstrip(".") + f" {self.value}"
