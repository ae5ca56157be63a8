"""Error taxonomy for layout optimization.

Every failure of the core is raised as a subclass of LayoutError so callers
can present a message and keep the previously displayed result untouched.
"""


class LayoutError(ValueError):
    """Base class for layout optimization failures.

    Attributes:
        error_type: Machine-readable category used by the CLI and REST API.
    """

    error_type: str = "layout"


class MissingFieldError(LayoutError):
    """Raised when a required request field is absent."""

    error_type = "missing_field"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Property "{name}" is missing')


class NonFiniteValueError(LayoutError):
    """Raised when a request field is NaN or infinite."""

    error_type = "non_finite_value"

    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f'Property "{name}" must be a finite number (got {value})')


class InvalidItemSizeError(LayoutError):
    """Raised when an item dimension is zero."""

    error_type = "invalid_item_size"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Property "{name}" must be greater than zero')


class MarginExceedsDimensionError(LayoutError):
    """Raised when the margin consumes an entire document axis."""

    error_type = "margin_exceeds_dimension"

    def __init__(self, axis: str, usable: float) -> None:
        self.axis = axis
        self.usable = usable
        super().__init__(
            f"Too much margin; document {axis} is {usable:g} after margin "
            "(must be above 0)"
        )
