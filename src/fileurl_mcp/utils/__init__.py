"""Utility modules for fileurl-mcp."""

from .uri import (
    ConversionError,
    ErrorKind,
    has_drive_prefix,
    is_drive_letter,
    local_to_url,
    url_to_local,
    url_to_local_relaxed,
)

__all__ = [
    "ConversionError",
    "ErrorKind",
    "has_drive_prefix",
    "is_drive_letter",
    "local_to_url",
    "url_to_local",
    "url_to_local_relaxed",
]
