"""Validation results and layout advisories for configurations.

A configuration that passes schema validation can still be unusable (the
margin swallows the document) or wasteful (nothing fits, or most of the
usable area stays empty). These checks run the real optimizer.
"""

from dataclasses import dataclass, field
from typing import Any

from stepnrepeat.application.commands import ComputeLayoutCommand
from stepnrepeat.application.dtos import LayoutOutput
from stepnrepeat.application.config.adapter import config_to_layout_input
from stepnrepeat.application.config.schema import StepRepeatConfiguration
from stepnrepeat.domain import (
    InvalidItemSizeError,
    LayoutError,
    MarginExceedsDimensionError,
    MissingFieldError,
)

# Minimum share of the usable area items should cover
MIN_RECOMMENDED_COVERAGE = 0.5


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: Dotted path to the offending field (e.g. "document.margin")
        message: Human-readable description of the error
        value: The value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: Dotted path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: Findings that make the configuration unusable
        warnings: Advisories about a usable but doubtful layout
        output: The computed layout, when the optimizer accepted the input
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    output: LayoutOutput | None = None

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def _error_path(error: LayoutError) -> str:
    """Map a layout error to the configuration field it concerns."""
    if isinstance(error, MarginExceedsDimensionError):
        return "document.margin"
    if isinstance(error, (MissingFieldError, InvalidItemSizeError)):
        section, _, axis = error.name.partition("_")
        if section == "item":
            return f"item.{axis}"
        return f"document.{axis}"
    return "document"


def validate_config(config: StepRepeatConfiguration) -> ValidationResult:
    """Run the optimizer against a configuration and collect findings.

    Errors:
    - Any layout error raised by the optimizer

    Warnings:
    - No item fits in any orientation
    - Items cover less than half of the usable area
    - Zero margin

    Args:
        config: A schema-validated configuration

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()
    command = ComputeLayoutCommand(preview_scale=config.preview.scale)
    layout_input = config_to_layout_input(config)

    try:
        result.output = command.execute(layout_input)
    except LayoutError as e:
        return result.add_error(_error_path(e), str(e))

    best = result.output.outcome.preferred_result
    unit = config.unit.value
    if best.item_count == 0:
        result.add_warning(
            path="item",
            message=(
                f"No item fits: the {config.item.width:g}x{config.item.height:g} {unit} "
                f"item exceeds the {best.document_width:g}x{best.document_height:g} "
                f"{unit} usable area left by a {best.document_margin:g} {unit} margin "
                f"in either orientation"
            ),
            suggestion="Reduce the margin or the item size",
        )
        return result

    if best.coverage < MIN_RECOMMENDED_COVERAGE:
        result.add_warning(
            path="item",
            message=(
                f"Items cover only {best.coverage:.0%} of the usable area "
                f"({best.item_count} items)"
            ),
            suggestion="Adjust the item size or margin to reduce waste",
        )

    if config.document.margin == 0:
        result.add_warning(
            path="document.margin",
            message="Margin is zero; items run to the edge of the document",
            suggestion="Most printers cannot print to the sheet edge, consider a margin",
        )

    return result
