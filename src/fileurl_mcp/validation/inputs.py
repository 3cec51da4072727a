"""Input validation for MCP tool parameters."""

from typing import Any

from .errors import ValidationError

# Characters that cannot appear in a path or URL handed to a tool
_FORBIDDEN_CHARS = ("\x00", "\n", "\r")


def _validate_string(field: str, value: Any) -> str:
    if value is None:
        raise ValidationError(field, f"{field} parameter is required")
    if not isinstance(value, str):
        raise ValidationError(field, f"{field} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise ValidationError(field, f"{field} parameter cannot be empty")
    for char in _FORBIDDEN_CHARS:
        if char in value:
            raise ValidationError(field, f"{field} contains forbidden character {char!r}")
    return value


def validate_path_input(path: Any) -> str:
    """Validate path parameter for the path_to_url tool.

    Args:
        path: Local path as supplied by the client

    Returns:
        The path, unchanged (surrounding whitespace can be part of a path)

    Raises:
        ValidationError: If path is None, not a string, empty, or contains
            control characters

    Note:
        Whether the path is absolute is decided by the converter, which
        reports it as a conversion error rather than a validation error.
    """
    return _validate_string("path", path)


def validate_url_input(url: Any) -> str:
    """Validate url parameter for the url_to_path tool.

    Args:
        url: URL string as supplied by the client

    Returns:
        The URL, unchanged

    Raises:
        ValidationError: If url is None, not a string, empty, or contains
            control characters
    """
    return _validate_string("url", url)
