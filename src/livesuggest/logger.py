"""
Logging for the livesuggest package using loguru.

livesuggest is a library first: its records are disabled on import and the
host's loguru sinks are left alone. Applications (the ``livesuggest`` CLI
among them) opt in with ``setup_logger``, which adds sinks that only carry
livesuggest records.
"""

import sys
from pathlib import Path
from loguru import logger
from typing import Optional

PACKAGE = "livesuggest"

# Sinks added by setup_logger, so reconfiguring never touches the host's
_sink_ids: list[int] = []

logger.disable(PACKAGE)


def _remove_own_sinks() -> None:
    while _sink_ids:
        logger.remove(_sink_ids.pop())


def setup_logger(
    log_file: Optional[str | Path] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> Path:
    """
    Enable livesuggest logging to a rotating file and optionally the console.

    Calling it again replaces the sinks of the previous call.

    Args:
        log_file: Path to the log file (defaults to ``livesuggest.log`` in the working directory)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to console

    Returns:
        The log file path
    """
    log_path = Path(log_file) if log_file is not None else Path.cwd() / f"{PACKAGE}.log"

    _remove_own_sinks()

    if console_output:
        _sink_ids.append(
            logger.add(
                sys.stderr,
                level=log_level,
                filter=PACKAGE,
                format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
                colorize=True,
            )
        )

    _sink_ids.append(
        logger.add(
            log_path,
            level=log_level,
            filter=PACKAGE,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
        )
    )
    logger.enable(PACKAGE)
    return log_path


def disable_logging() -> None:
    """Remove the sinks added by ``setup_logger`` and silence livesuggest again."""
    _remove_own_sinks()
    logger.disable(PACKAGE)


def get_logger(name: Optional[str] = None):
    """
    Get a logger instance, bound to ``name`` when one is given.
    """
    if name:
        return logger.bind(name=name)
    return logger
