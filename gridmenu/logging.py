from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger

DEFAULT_LOG_DIR = Path(
    os.environ.get(
        "GRIDMENU_LOG_DIR",
        Path.home() / ".local" / "state" / "gridmenu" / "logs",
    )
)


def _should_log_key(record) -> bool:
    """Filter key press logs - only show in TRACE mode."""
    message = record["message"].lower()
    tags = record["extra"].get("tags", [])

    # Key presses are TRACE-level only
    if "key" in tags or "input" in tags:
        if "key" in message or "press" in message:
            return record["level"].no <= logger.level("TRACE").no

    return True


def _should_log_render(record) -> bool:
    """Filter per-frame render logs - one per state change is noise."""
    message = record["message"].lower()
    tags = record["extra"].get("tags", [])

    if "layout" in tags and "frame" in message:
        return record["level"].no <= logger.level("TRACE").no

    return True


def _combined_filter(record) -> bool:
    """Combined filter for all log suppression rules."""
    return _should_log_key(record) and _should_log_render(record)


_FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{extra[source]: <8} | "
    "{message}"
)
_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[source]: <8}</cyan> | "
    "{message}"
)


def setup_logging(
    *,
    debug: bool = False,
    trace: bool = False,
    log_dir: Path | None = None,
    console: bool = False,
) -> Logger:
    """
    Route gridmenu logs to rotating files and, on request, to stderr.

    Log Files:
    - menu.log: INFO+ (input loop start/stop, program lifecycle), 7 days
    - debug.log: only with debug or trace; DEBUG+ (option mutations,
      callback triggers), or TRACE+ with trace (every key and frame), 3 days

    The console sink is off unless ``console`` is set: the menu owns the
    terminal and stderr output would tear the rendered frame.

    Args:
        debug: Enable DEBUG level logging
        trace: Enable TRACE level logging (very verbose)
        log_dir: Custom log directory (defaults to ~/.local/state/gridmenu/logs)
        console: Also log to stderr
    """
    logger.remove()
    logger.configure(extra={"tags": [], "source": "APP"})
    logger.enable("gridmenu")

    level = "TRACE" if trace else "DEBUG" if debug else "INFO"
    log_dir = Path(log_dir or DEFAULT_LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    if console:
        logger.add(
            sys.stderr,
            level=level,
            filter=_combined_filter,
            colorize=True,
            format=_CONSOLE_FORMAT,
        )

    file_options = {
        "rotation": "5 MB",
        "compression": "zip",
        "enqueue": True,
        "format": _FILE_FORMAT,
    }
    logger.add(log_dir / "menu.log", level="INFO", retention="7 days", **file_options)
    if level != "INFO":
        logger.add(
            log_dir / "debug.log",
            level=level,
            retention="3 days",
            filter=_combined_filter,
            backtrace=True,
            diagnose=True,
            **file_options,
        )

    return logger


def get_logger(
    *,
    tags: Iterable[str] | None = None,
    source: str | None = None,
) -> Logger:
    """
    Get a logger with bound context.

    Args:
        tags: Tags for filtering (e.g., ["menu", "options"])
        source: Source component (e.g., "menu", "input", "layout")

    Returns:
        Logger with bound context
    """
    extras: dict[str, object] = {}
    if tags is not None:
        extras["tags"] = list(tags)
    if source is not None:
        extras["source"] = source
    return logger.bind(**extras)


class LoggerFactory:
    """
    Factory for creating domain-specific loggers with automatic context.

    Each factory method returns a logger pre-configured with appropriate
    source and tags for the component.
    """

    @staticmethod
    def for_menu() -> Logger:
        """Logger for option store mutations and callback dispatch."""
        return logger.bind(source="menu", tags=["ui", "menu"])

    @staticmethod
    def for_input() -> Logger:
        """Logger for the input loop and key handling."""
        return logger.bind(source="input", tags=["input", "key"])

    @staticmethod
    def for_layout() -> Logger:
        """Logger for frame rendering."""
        return logger.bind(source="layout", tags=["ui", "layout"])

    @staticmethod
    def for_system() -> Logger:
        """Logger for program startup, shutdown and configuration."""
        return logger.bind(source="system", tags=["system"])
