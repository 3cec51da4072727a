"""Conversion tool implementations.

This module provides the path_to_url and url_to_path MCP tools, which wrap
the converters in utils.uri with input validation, logging, and metrics.
"""

import time
from typing import Any

from ..config import get_config
from ..logging_config import get_logger
from ..metrics import get_metrics_collector
from ..utils.uri import ConversionError, local_to_url, url_to_local, url_to_local_relaxed
from ..validation import ValidationError, validate_path_input, validate_url_input

logger = get_logger("tools.convert")


async def _record(operation: str, start: float, error_code: str | None = None) -> None:
    duration_ms = (time.perf_counter() - start) * 1000
    await get_metrics_collector().record(operation, duration_ms, error_code)


async def path_to_url(path: str) -> dict[str, Any]:
    """
    Convert a local filesystem path to a file:// URL.

    Args:
        path: Absolute POSIX path (/usr/bin/vi) or drive-letter path
              (c:/windows/notepad.exe)

    Returns:
        Discriminated union dict with status field:

        Success:
            {
                "status": "success",
                "path": "c:/windows/notepad.exe",
                "url": "file:///c:/windows/notepad.exe"
            }

        Error:
            {
                "status": "error",
                "error_code": "relative" | "remote" | "validation_error" | ...,
                "message": "Human-readable error message"
            }
    """
    logger.info(f"path_to_url called: path={path!r}")
    start = time.perf_counter()

    try:
        path = validate_path_input(path)
    except ValidationError as e:
        logger.warning(f"Input validation failed: {e}")
        await _record("to_url", start, "validation_error")
        return e.to_error_response()

    try:
        url = local_to_url(path).geturl()
    except ConversionError as e:
        logger.warning(
            f"Conversion failed: {e.kind.value} - {e.message}",
            extra={"path": path, "error_code": e.kind.value},
        )
        await _record("to_url", start, e.kind.value)
        return e.to_error_response()
    except Exception as e:
        logger.error(f"Unexpected error during path_to_url: {e}", exc_info=True)
        await _record("to_url", start, "execution_error")
        return {
            "status": "error",
            "error_code": "execution_error",
            "message": f"Unexpected error during path_to_url: {e}",
        }

    await _record("to_url", start)
    logger.debug(f"Converted path to URL: {url}")
    return {"status": "success", "path": path, "url": url}


async def url_to_path(url: str, relaxed: bool | None = None) -> dict[str, Any]:
    """
    Convert a file:// URL to a local filesystem path.

    Args:
        url: file:// URL string
        relaxed: Accept the malformed file://c:/path form. None uses the
                 FILEURL_MCP_RELAXED configuration default.

    Returns:
        Discriminated union dict with status field:

        Success:
            {
                "status": "success",
                "url": "file:///usr/bin/vi",
                "path": "/usr/bin/vi",
                "relaxed": false
            }

        Error:
            {
                "status": "error",
                "error_code": "remote" | "unsupported" | "validation_error" | ...,
                "message": "Human-readable error message"
            }
    """
    if relaxed is None:
        try:
            relaxed = get_config().relaxed
        except ValueError as e:
            logger.error(f"Invalid configuration: {e}")
            return {
                "status": "error",
                "error_code": "execution_error",
                "message": f"Invalid configuration: {e}",
            }
    operation = "to_local_relaxed" if relaxed else "to_local"

    logger.info(f"url_to_path called: url={url!r}, relaxed={relaxed}")
    start = time.perf_counter()

    try:
        url = validate_url_input(url)
    except ValidationError as e:
        logger.warning(f"Input validation failed: {e}")
        await _record(operation, start, "validation_error")
        return e.to_error_response()

    convert = url_to_local_relaxed if relaxed else url_to_local
    try:
        path = convert(url)
    except ConversionError as e:
        logger.warning(
            f"Conversion failed: {e.kind.value} - {e.message}",
            extra={"url": url, "error_code": e.kind.value},
        )
        await _record(operation, start, e.kind.value)
        return e.to_error_response()
    except Exception as e:
        logger.error(f"Unexpected error during url_to_path: {e}", exc_info=True)
        await _record(operation, start, "execution_error")
        return {
            "status": "error",
            "error_code": "execution_error",
            "message": f"Unexpected error during url_to_path: {e}",
        }

    await _record(operation, start)
    logger.debug(f"Converted URL to path: {path}")
    return {"status": "success", "url": url, "path": path, "relaxed": relaxed}
