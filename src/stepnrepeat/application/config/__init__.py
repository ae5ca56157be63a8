"""Configuration file support for step and repeat layouts.

This package provides:
- Pydantic schema models for JSON configuration files
- Loading with readable error reporting (ConfigError)
- CLI override merging
- Layout validation with errors and advisory warnings
"""

from stepnrepeat.application.config.adapter import config_to_layout_input
from stepnrepeat.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from stepnrepeat.application.config.merger import merge_config_with_cli
from stepnrepeat.application.config.schema import (
    SUPPORTED_VERSIONS,
    DocumentConfig,
    ItemConfig,
    PreviewConfig,
    StepRepeatConfiguration,
)
from stepnrepeat.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "ConfigError",
    "DocumentConfig",
    "ItemConfig",
    "PreviewConfig",
    "SUPPORTED_VERSIONS",
    "StepRepeatConfiguration",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_layout_input",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
