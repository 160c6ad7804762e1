"""
Logging utilities for listview.

Provides a centralized logging configuration for the widget package.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Package root logger
_root_logger = logging.getLogger("listview")


def setup_logging(
    level: str | int = "INFO",
    format: str | None = None,
    stream: TextIO | None = None,
    file: str | None = None,
) -> None:
    """
    Configure logging for listview.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int
        format: Custom log format string
        stream: Output stream (defaults to stderr)
        file: Optional file path to write logs

    Example:
        from listview.logging import setup_logging

        # Widgets log to a file so they don't draw over the terminal
        setup_logging("DEBUG", file="listview.log")
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    if format is None:
        format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    formatter = logging.Formatter(format)

    # A full-screen UI owns stdout, so only attach a stream when asked to
    # or when no file is given.
    if stream is not None or not file:
        stream_handler = logging.StreamHandler(stream or sys.stderr)
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(level)
        _root_logger.addHandler(stream_handler)

    if file:
        file_handler = logging.FileHandler(file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        _root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a submodule.

    Args:
        name: Submodule name (e.g., "widget", "context_menu")

    Returns:
        Logger instance
    """
    if name.startswith("listview."):
        return logging.getLogger(name)
    return logging.getLogger(f"listview.{name}")


def set_level(level: str | int) -> None:
    """Set the log level for listview."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _root_logger.setLevel(level)


def disable() -> None:
    """Disable all logging for listview."""
    _root_logger.disabled = True


def enable() -> None:
    """Re-enable logging for listview."""
    _root_logger.disabled = False
