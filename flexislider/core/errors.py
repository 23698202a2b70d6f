"""Configuration error classification.

A slider must never take down the page that hosts it, so every error in this
package is a recoverable configuration error: it is raised by the pure
components (layout resolution, value validation), caught where the engine
applies a setting, logged, and replaced by a fallback value.

Example:
    from flexislider.core.errors import ConfigurationError, ErrorCategory

    try:
        rules = resolve(value)
    except LayoutError as ex:
        logger.error("layout_rejected", category=ex.category.name, error=str(ex))
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of configuration problems."""

    INVALID_LAYOUT = auto()  # Layout is not a non-empty list of valid rules
    MISSING_BASE_RULE = auto()  # No rule covering width 0
    SELECTOR_NOT_FOUND = auto()  # Selector resolved to no element
    INVALID_VALUE = auto()  # Option value of the wrong type or range
    PROTECTED_OPTION = auto()  # Init-only or internal option set from outside
    UNKNOWN_OPTION = auto()  # Option or method name that does not exist
    MISSING_SCHEDULER = auto()  # No scheduler given and no running event loop


class ConfigurationError(Exception):
    """A configuration value was rejected.

    Attributes:
        category: What kind of configuration problem occurred.
        original_error: The underlying exception, e.g. a pydantic
            ValidationError, if there was one.
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.original_error = original_error

    @classmethod
    def from_exception(
        cls,
        ex: Exception,
        category: ErrorCategory = ErrorCategory.INVALID_VALUE,
    ) -> "ConfigurationError":
        """Create a ConfigurationError from an existing exception."""
        return cls(message=str(ex), category=category, original_error=ex)


class LayoutError(ConfigurationError):
    """The layout rule list cannot be resolved."""
