"""Health check tool implementation.

Reports server version, sanitized configuration, uptime, and per-operation
conversion metrics.
"""

from typing import Any

from .. import __version__
from ..config import get_config
from ..logging_config import get_logger
from ..metrics import get_metrics_collector

logger = get_logger("tools.health_check")


async def health_check() -> dict[str, Any]:
    """
    Check server health.

    Returns:
        Success:
            {
                "status": "healthy",
                "version": "0.1.0",
                "config": {
                    "log_level": "INFO",
                    "log_mode": "stderr",
                    "relaxed": false,
                    "enable_health_check": true
                },
                "uptime_seconds": 123.45,
                "metrics": [
                    {"operation": "to_url", "count": 3, "avg_ms": 0.02,
                     "errors": 1, "errors_by_code": {"relative": 1}}
                ]
            }

        Error:
            {
                "status": "error",
                "error_code": "execution_error",
                "message": "Human-readable error message"
            }
    """
    logger.info("health_check called")

    try:
        config = get_config()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return {
            "status": "error",
            "error_code": "execution_error",
            "message": f"Invalid configuration: {e}",
        }

    collector = get_metrics_collector()

    response: dict[str, Any] = {
        "status": "healthy",
        "version": __version__,
        "config": {
            "log_level": config.log_level,
            "log_mode": config.log_mode,
            "relaxed": config.relaxed,
            "enable_health_check": config.enable_health_check,
        },
        "uptime_seconds": round(collector.uptime_seconds(), 2),
        "metrics": [m.to_dict() for m in collector.get_all_metrics()],
    }

    logger.info("Health check completed")
    return response
