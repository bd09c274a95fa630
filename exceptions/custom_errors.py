class InvalidDayBoundsError(Exception):
    """Raised when the day start is not strictly before the day end."""

    pass


class InvalidActivityError(Exception):
    """Raised when an activity carries impossible bounds or negative times."""

    pass


class TemplateImportError(Exception):
    """Raised when an exported template store cannot be parsed back."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    InvalidDayBoundsError: 400,
    InvalidActivityError: 400,
    TemplateImportError: 400,
}
