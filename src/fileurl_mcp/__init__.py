"""Round-trip local file paths through file:// URLs."""

from .utils.uri import (
    ConversionError,
    ErrorKind,
    local_to_url,
    url_to_local,
    url_to_local_relaxed,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ErrorKind",
    "__version__",
    "local_to_url",
    "url_to_local",
    "url_to_local_relaxed",
]
