"""Runtime configuration management.

Environment Variables:
    FILEURL_MCP_LOG_LEVEL: Logging level (default: INFO)
    FILEURL_MCP_LOG_MODE: Logging mode: stderr, file, both (default: stderr)
    FILEURL_MCP_LOG_FILE: Log file path (optional, for file/both modes)
    FILEURL_MCP_RELAXED: Accept file://c:/path URLs in url_to_path by default (default: false)
    FILEURL_MCP_ENABLE_HEALTH_CHECK: Enable health_check tool (default: true)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, cast


@dataclass
class Config:
    """Runtime configuration for fileurl-mcp."""

    log_level: str  # Logging level: DEBUG, INFO, WARNING, ERROR
    log_mode: Literal["stderr", "file", "both"]  # Logging mode
    log_file: Path | None  # Log file path (for file/both modes)
    relaxed: bool  # Default for url_to_path's relaxed parameter
    enable_health_check: bool  # Enable health_check tool


_config: Config | None = None

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def _parse_bool(name: str, default: str) -> bool:
    value = os.getenv(name, default).strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be true or false, got: {value}")


def load_config() -> Config:
    """
    Load configuration from environment variables.

    Validates all configuration values and returns a Config instance with
    defaults applied.

    Returns:
        Config instance with validated values

    Raises:
        ValueError: If configuration values are invalid
    """
    # Parse log level
    log_level = os.getenv("FILEURL_MCP_LOG_LEVEL", "INFO").upper()
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if log_level not in valid_levels:
        raise ValueError(
            f"FILEURL_MCP_LOG_LEVEL must be one of {valid_levels}, got: {log_level}"
        )

    # Parse log mode
    log_mode_str = os.getenv("FILEURL_MCP_LOG_MODE", "stderr").lower()
    valid_modes = {"stderr", "file", "both"}
    if log_mode_str not in valid_modes:
        raise ValueError(
            f"FILEURL_MCP_LOG_MODE must be one of {valid_modes}, got: {log_mode_str}"
        )
    log_mode = cast(Literal["stderr", "file", "both"], log_mode_str)

    # Parse log file
    log_file = None
    if log_file_str := os.getenv("FILEURL_MCP_LOG_FILE"):
        log_file = Path(log_file_str).resolve()

    relaxed = _parse_bool("FILEURL_MCP_RELAXED", "false")
    enable_health_check = _parse_bool("FILEURL_MCP_ENABLE_HEALTH_CHECK", "true")

    return Config(
        log_level=log_level,
        log_mode=log_mode,
        log_file=log_file,
        relaxed=relaxed,
        enable_health_check=enable_health_check,
    )


def get_config() -> Config:
    """
    Get singleton config instance.

    Loads configuration on first call and caches the result.

    Returns:
        Config instance (loads on first call)
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """
    Reset cached config (for testing only).

    This clears the singleton config instance, forcing load_config() to be
    called again on the next get_config() call.
    """
    global _config
    _config = None
