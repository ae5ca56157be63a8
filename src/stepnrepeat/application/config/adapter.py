"""Conversion of configuration models into application DTOs."""

from stepnrepeat.application.config.schema import StepRepeatConfiguration
from stepnrepeat.application.dtos import LayoutInput


def config_to_layout_input(config: StepRepeatConfiguration) -> LayoutInput:
    """Snapshot a configuration as a LayoutInput."""
    return LayoutInput(
        document_width=config.document.width,
        document_height=config.document.height,
        document_margin=config.document.margin,
        item_width=config.item.width,
        item_height=config.item.height,
        unit=config.unit,
    )
