"""MCP tool implementations."""

from .convert import path_to_url, url_to_path
from .health_check import health_check

__all__ = [
    "health_check",
    "path_to_url",
    "url_to_path",
]
