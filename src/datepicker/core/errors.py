class DatePickerError(Exception):
    """Base error."""

class ConfigError(DatePickerError, ValueError):
    """Raised when a picker configuration cannot be built."""

class MinAfterMaxError(ConfigError):
    """min_date is later than max_date."""

class InitialViewFinerThanSelectionError(ConfigError):
    """initial_view_type is more specific than selection_type."""

class InitialDateForbiddenError(ConfigError):
    """initial_date is not selectable under the date constraints."""

class InvalidConstraintError(ConfigError):
    """A raw constraint value (weekday, month, day of month, ...) is malformed."""

class ConflictingConstraintsError(ConfigError):
    """Both a ready constraint provider and raw constraint fields were given."""
