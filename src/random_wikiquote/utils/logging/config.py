# ABOUTME: Logging configuration: structlog events are routed into loguru sinks
# ABOUTME: Dual-mode operation: interactive log files vs production JSON on stderr

import logging
import os
import sys
import time
from pathlib import Path
from typing import Any

import structlog
from loguru import logger

LOG_DIR = Path("logs")

# Libraries whose stdlib loggers are pinned to WARNING
QUIET_LOGGERS = ["httpx", "httpcore", "asyncio", "urllib3"]

_LOGURU_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class LoggingMode:
    """Logging mode constants."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


def detect_logging_mode() -> str:
    """Detect whether we're running in interactive or production mode."""
    mode = os.getenv("RANDOM_WIKIQUOTE_LOG_MODE")
    if mode and mode.lower() in [LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION]:
        return mode.lower()

    return LoggingMode.INTERACTIVE if sys.stdout.isatty() else LoggingMode.PRODUCTION


def setup_third_party_logging() -> None:
    """Keep HTTP client chatter out of the CLI output."""
    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


def _forward_to_loguru(_, method_name: str, event_dict: dict) -> dict:
    """Final structlog processor: hand the event to loguru with its key/value pairs as extras."""
    level = event_dict.pop("level", method_name).upper()
    message = str(event_dict.pop("event", ""))
    logger.bind(**event_dict).log(level if level in _LOGURU_LEVELS else "INFO", message)
    raise structlog.DropEvent


def setup_structlog(numeric_level: int) -> None:
    """Send structlog events below ``numeric_level`` nowhere and the rest to loguru."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            _forward_to_loguru,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _stderr_sink(message) -> None:
    # Resolve sys.stderr per message so redirected streams keep receiving logs
    sys.stderr.write(message)


def _ensure_log_dir(log_dir: Path) -> bool:
    """Create the log directory, tolerating races with parallel processes."""
    max_retries = 3
    for attempt in range(max_retries):
        try:
            log_dir.mkdir(exist_ok=True)
            return True
        except OSError:
            if attempt == max_retries - 1:
                return False
            time.sleep(0.01 * (attempt + 1))
    return False


def configure_logging(mode: str | None = None, log_level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging using loguru.

    Args:
        mode: Logging mode (interactive/production), auto-detected if None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Custom log file path, uses default if None
    """
    if mode is None:
        mode = detect_logging_mode()

    setup_third_party_logging()

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(numeric_level)
    setup_structlog(numeric_level)

    # Remove default loguru handler
    logger.remove()

    # Without a log directory there is nowhere to write files; fall back to stderr JSON
    if mode == LoggingMode.INTERACTIVE and not _ensure_log_dir(LOG_DIR):
        mode = LoggingMode.PRODUCTION

    if mode == LoggingMode.PRODUCTION:
        logger.add(_stderr_sink, level=log_level, format="{time} | {level} | {name} | {message}", serialize=True)
        return

    log_file_path = log_file or str(LOG_DIR / "random-wikiquote.log")

    # Human-readable logs
    logger.add(
        log_file_path,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}",
        rotation="10 MB",
        retention="7 days",
    )

    # JSON logs for machine processing
    logger.add(
        LOG_DIR / "random-wikiquote.json",
        level=log_level,
        format="{time} | {level} | {name} | {message}",
        serialize=True,
        rotation="10 MB",
        retention="7 days",
    )

    # Errors only
    logger.add(
        LOG_DIR / "errors.log",
        level="ERROR",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        backtrace=True,
        diagnose=True,
    )


def get_logging_status() -> dict[str, Any]:
    """Get current logging configuration status."""
    mode = detect_logging_mode()
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "log_directory": str(LOG_DIR.absolute()) if LOG_DIR.exists() else None,
        "log_files": {
            "main": str(LOG_DIR / "random-wikiquote.log") if interactive else None,
            "json": str(LOG_DIR / "random-wikiquote.json") if interactive else None,
            "errors": str(LOG_DIR / "errors.log") if interactive else None,
        },
        "third_party_suppressed": [*QUIET_LOGGERS, "py.warnings"],
    }

