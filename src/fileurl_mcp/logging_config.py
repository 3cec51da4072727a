"""Logging configuration for fileurl-mcp.

stdout carries the MCP transport, so nothing is ever logged there. Records go
to stderr as JSON lines, to a rotating human-readable file, or both.

No logging happens at import time; call setup_logging() once at startup.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

# Request ID for correlation across concurrent tool calls
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

# Attributes passed via ``extra=`` by the conversion tools
EXTRA_FIELDS = ("path", "url", "operation", "duration", "error_code")

HUMAN_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
HUMAN_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


class JsonFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if request_id := request_id_var.get():
            log_obj["request_id"] = request_id
        log_obj.update(
            {key: getattr(record, key) for key in EXTRA_FIELDS if hasattr(record, key)}
        )
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj)


class RequestIdFilter(logging.Filter):
    """Copy the current request_id onto each record, if one is set."""

    def filter(self, record: logging.LogRecord) -> bool:
        if request_id := request_id_var.get():
            record.request_id = request_id  # type: ignore[attr-defined]
        return True


def default_log_file() -> Path:
    """Timestamped log file under the per-user log directory."""
    if sys.platform == "win32":
        log_dir = Path.home() / "AppData" / "Local" / "fileurl-mcp" / "logs"
    else:
        log_dir = Path.home() / ".fileurl-mcp" / "logs"
    return log_dir / f"fileurl-mcp-{datetime.now():%Y%m%d-%H%M%S}.log"


def _stderr_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
    )
    handler.setFormatter(logging.Formatter(HUMAN_FORMAT, datefmt=HUMAN_DATEFMT))
    return handler


def setup_logging(config: "Config") -> None:
    """
    Configure the root logger from config.log_mode and config.log_level.

    Args:
        config: Configuration instance with logging settings

    Logging Modes:
        - "stderr": JSON lines to stderr (default)
        - "file": human-readable lines to config.log_file, or to
          default_log_file() when unset
        - "both": both outputs

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.
    """
    handlers: list[logging.Handler] = []
    if config.log_mode in ("stderr", "both"):
        handlers.append(_stderr_handler())
    if config.log_mode in ("file", "both"):
        handlers.append(_file_handler(config.log_file or default_log_file()))

    request_id_filter = RequestIdFilter()
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(config.log_level)
    for handler in handlers:
        handler.addFilter(request_id_filter)
        root_logger.addHandler(handler)

    logging.getLogger("fileurl_mcp").setLevel(config.log_level)

    logging.info(
        "Logging initialized",
        extra={"log_mode": config.log_mode, "log_level": config.log_level},
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the fileurl_mcp namespace.

    Example:
        >>> get_logger("tools.convert").name
        'fileurl_mcp.tools.convert'
    """
    return logging.getLogger(f"fileurl_mcp.{name}")
