"""Centralized logging configuration for presencekit.

Console output always, plus rotating log files when a log directory is set.
Call setup_logging() once at application startup.

Usage:
    # At startup (api/app.py)
    from presencekit.utilities.logging import setup_logging
    setup_logging()

    # In any module (standard Python pattern)
    import logging
    logger = logging.getLogger(__name__)
    logger.info("[MODULE] Something happened: %s", value)

Environment variables:
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
    LOG_DIR: Directory for log files (default: none, console only)
    LOG_FORMAT: "text" or "json" (default: text)
"""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Track if logging has been configured
_configured = False


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging (ELK, Loki, etc.)."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def _get_log_level(override: str | None = None) -> int:
    """Get log level from override or environment."""
    level_name = (override or os.getenv("LOG_LEVEL", "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def _get_formatter(use_json: bool = False) -> logging.Formatter:
    if use_json:
        return JSONFormatter()

    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _file_handlers(log_path: Path, formatter: logging.Formatter) -> list[logging.Handler]:
    """Main log (everything) and error log (errors only)."""
    log_path.mkdir(parents=True, exist_ok=True)

    main_handler = RotatingFileHandler(
        log_path / "presencekit.log",
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8",
    )
    main_handler.setLevel(logging.DEBUG)
    main_handler.setFormatter(formatter)

    error_handler = RotatingFileHandler(
        log_path / "presencekit_errors.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    return [main_handler, error_handler]


def setup_logging(
    log_level: str | None = None,
    log_dir: str | Path | None = None,
    use_json: bool | None = None,
) -> None:
    """Initialize the logging system.

    Safe to call multiple times (subsequent calls are no-ops).

    Args:
        log_level: Override LOG_LEVEL env var
        log_dir: Override LOG_DIR env var
        use_json: Override LOG_FORMAT env var (True for JSON output)
    """
    global _configured
    if _configured:
        return

    level = _get_log_level(log_level)
    dir_setting = log_dir or os.getenv("LOG_DIR")
    log_path = Path(dir_setting) if dir_setting else None

    if use_json is None:
        use_json = os.getenv("LOG_FORMAT", "text").lower() == "json"

    formatter = _get_formatter(use_json)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Handlers filter from here
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    if log_path is not None:
        for handler in _file_handlers(log_path, formatter):
            root_logger.addHandler(handler)

    # Quiet noisy loggers
    for name in ("uvicorn.access", "httpx", "httpcore", "watchfiles"):
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True

    from presencekit.config import VERSION

    logger = logging.getLogger("presencekit")
    logger.info("[STARTUP] presencekit %s", VERSION)
    logger.info("[STARTUP] Log level: %s", logging.getLevelName(level))
    logger.info("[STARTUP] Log directory: %s", log_path or "(console only)")
    logger.info("[STARTUP] Log format: %s", "JSON" if use_json else "text")
