"""Bundled step and repeat templates.

This package provides template configurations for common sheet and item
combinations and a TemplateManager class for accessing them.
"""

from stepnrepeat.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = [
    "TEMPLATE_METADATA",
    "TemplateManager",
    "TemplateNotFoundError",
]
