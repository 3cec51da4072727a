"""FastMCP server for fileurl-mcp.

NOTE: Do NOT initialize logging here at import time.
Logging is initialized in __main__.py to avoid import side effects.

Tools:
- path_to_url: Local path to file:// URL
- url_to_path: file:// URL to local path (strict or relaxed)
- health_check: Server health, configuration, and metrics
"""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP


def create_mcp_server() -> FastMCP:
    """Create and initialize the MCP server instance.

    Initializes logging only if no handlers exist yet, so creating the
    server multiple times (e.g., in tests) does not duplicate handlers.

    Returns:
        FastMCP server instance
    """
    root_logger = logging.getLogger()
    if not root_logger.hasHandlers():
        from .config import get_config
        from .logging_config import setup_logging

        config = get_config()
        setup_logging(config)

    return FastMCP("fileurl-mcp")


# Create server instance
mcp = create_mcp_server()


@mcp.tool()
async def path_to_url(path: str) -> dict[str, Any]:
    """
    Convert a local filesystem path to a file:// URL.

    Accepts absolute POSIX paths (/usr/bin/vi) and Windows drive-letter paths
    (c:/windows/notepad.exe). Relative paths and network shares
    (//server/share) are rejected.

    Args:
        path: Absolute local path

    Returns:
        Dictionary with status field indicating success or error.
        Success includes path and url.
        Error includes error_code ("relative", "remote", ...) and message.

    Example:
        path "c:/windows/notepad.exe" -> url "file:///c:/windows/notepad.exe"
    """
    # Lazy import to avoid circular dependencies and import-time side effects
    from .tools.convert import path_to_url as path_to_url_impl

    return await path_to_url_impl(path)


@mcp.tool()
async def url_to_path(url: str, relaxed: bool | None = None) -> dict[str, Any]:
    """
    Convert a file:// URL to a local filesystem path.

    In strict mode any URL with a host is rejected as remote. In relaxed mode
    the malformed form file://c:/windows/notepad.exe is accepted and converted
    to c:/windows/notepad.exe.

    Args:
        url: file:// URL
        relaxed: Accept a drive letter in the host position. Defaults to the
                 server configuration (FILEURL_MCP_RELAXED).

    Returns:
        Dictionary with status field indicating success or error.
        Success includes url, path, and relaxed.
        Error includes error_code ("remote", "unsupported", ...) and message.
    """
    from .tools.convert import url_to_path as url_to_path_impl

    return await url_to_path_impl(url, relaxed)


@mcp.tool()
async def health_check() -> dict[str, Any]:
    """
    Check server health.

    Returns:
        Dictionary with status field.
        Success includes version, config, uptime_seconds, and metrics.
        Error includes error_code and message.
    """
    from .config import get_config
    from .tools.health_check import health_check as health_check_impl

    config = get_config()
    if not config.enable_health_check:
        return {
            "status": "error",
            "error_code": "disabled",
            "message": "Health check tool is disabled. Set FILEURL_MCP_ENABLE_HEALTH_CHECK=true to enable.",
        }

    return await health_check_impl()
