"""
Logging Utilities

Thin wrapper around the standard logging module. All loggers live under the
``ssm_param_resolver`` namespace so the CLI can tune verbosity in one place.
"""

import logging
from typing import Optional

import click

PACKAGE_LOGGER = "ssm_param_resolver"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: Optional[logging.Handler] = None


class ClickEchoHandler(logging.Handler):
    """Write records to stderr through click, which picks up the current stream on every call."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """
    Install the stderr handler on the package logger.

    Safe to call repeatedly; the handler is only added once, later calls
    just update level and format.

    Args:
        level: Level name (e.g. 'INFO', 'DEBUG')
        fmt: logging format string

    Returns:
        The package root logger
    """
    global _handler

    root = logging.getLogger(PACKAGE_LOGGER)

    if _handler is None:
        _handler = ClickEchoHandler()
        root.addHandler(_handler)
    _handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    if level:
        root.setLevel(level.upper())

    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the package namespace.

    Module names that already start with the package name are used as-is,
    anything else is nested under it.

    Args:
        name: Module or component name

    Returns:
        logging.Logger instance
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
