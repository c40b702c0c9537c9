"""
Logging configuration module.

Provides centralized logging setup. Harness diagnostics always go to
stderr so stdout carries only progress lines and the target's own output.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: str) -> int:
	"""Map a level name to its numeric value, defaulting to WARNING."""
	return logging._nameToLevel.get(level.upper(), logging.WARNING)


def configure_logging(level: str = "warning") -> None:
	"""
	Configure basic logging with level and format on stderr.

	Repeated calls only adjust the root level.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = resolve_level(level)
	logging.basicConfig(level=lvl, format=LOG_FORMAT, stream=sys.stderr)
	logging.getLogger().setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "resolve_level"]
