"""Input validation utilities."""

from .errors import ValidationError
from .inputs import validate_path_input, validate_url_input

__all__ = [
    "ValidationError",
    "validate_path_input",
    "validate_url_input",
]
