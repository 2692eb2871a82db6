"""
yamlenv Logger Module

Usage:
    from yamlenv.logger import get_logger, create_logger

    logger = get_logger()
    logger.debug("Loaded config file", path="config.yaml")

    logger = create_logger(level=logging.DEBUG, json_format=True)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name ("yamlenv" -> "YAMLENV")
"""

import logging
import os
from typing import Dict, Optional

from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter, close_handlers

# Loggers handed out per name; get_logger() reuses these
_loggers: Dict[str, Logger] = {}


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix ("yaml-env" -> "YAML_ENV")."""
    return name.upper().replace("-", "_").replace(".", "_")


def create_logger(
    name: str = "yamlenv",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Parameters left as None are read from {PREFIX}_LOG_LEVEL,
    {PREFIX}_LOG_FILE and {PREFIX}_LOG_JSON, where PREFIX is derived
    from the name.

    Args:
        name: Logger name
        level: Logging level (defaults to WARNING or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = os.environ.get(f"{env_prefix}_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_str, logging.WARNING)

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    logger = StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )
    _loggers[name] = logger
    return logger


def get_logger(name: str = "yamlenv") -> Logger:
    """Get the logger for a name, configuring it from the environment only once.

    A logger previously returned by create_logger() or get_logger() is
    reused. If the stdlib logger already has handlers (set up by the
    caller), it is wrapped as-is rather than reconfigured.
    """
    existing = _loggers.get(name)
    if existing is not None:
        return existing

    if logging.getLogger(name).handlers:
        logger: Logger = StructuredLogger(name=name, configure=False)
        _loggers[name] = logger
        return logger

    return create_logger(name=name)


def reset_loggers() -> None:
    """Forget every logger handed out and close the handlers yamlenv installed.

    Handlers on stdlib loggers configured by the caller are left alone.
    """
    for name, logger in list(_loggers.items()):
        if isinstance(logger, StructuredLogger) and logger.configured:
            close_handlers(logging.getLogger(name))
    _loggers.clear()


__all__ = [
    "Logger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "create_logger",
    "get_logger",
    "reset_loggers",
]
