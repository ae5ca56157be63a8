"""Merging of CLI arguments into a loaded configuration.

Precedence is CLI args > config values > defaults. Only arguments that are
not None override the configuration.
"""

from typing import Any

from stepnrepeat.application.config.schema import StepRepeatConfiguration
from stepnrepeat.domain import Unit


def _pick(override: Any, current: Any) -> Any:
    return override if override is not None else current


def merge_config_with_cli(
    config: StepRepeatConfiguration,
    *,
    width: float | None = None,
    height: float | None = None,
    margin: float | None = None,
    item_width: float | None = None,
    item_height: float | None = None,
    unit: Unit | None = None,
    preferred_only: bool | None = None,
) -> StepRepeatConfiguration:
    """Return a new configuration with CLI overrides applied.

    Example:
        >>> config = load_config(Path("cards.json"))
        >>> merge_config_with_cli(config, margin=0).document.margin
        0.0
    """
    data: dict[str, Any] = {
        "schema_version": config.schema_version,
        "unit": _pick(unit, config.unit),
        "document": {
            "width": _pick(width, config.document.width),
            "height": _pick(height, config.document.height),
            "margin": _pick(margin, config.document.margin),
        },
        "item": {
            "width": _pick(item_width, config.item.width),
            "height": _pick(item_height, config.item.height),
        },
        "preview": {
            "scale": config.preview.scale,
            "preferred_only": _pick(preferred_only, config.preview.preferred_only),
        },
    }
    return StepRepeatConfiguration.model_validate(data)
