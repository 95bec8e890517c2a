"""
Logging utilities for evm_signature.

The package's own records are disabled on import (see ``evm_signature``);
applications opt in with ``logger.enable("evm_signature")``, which the CLI
does before calling ``setup_logger``.
"""
import os
import sys
from typing import List, Optional

from loguru import logger

from ..config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

# sinks added by setup_logger; other sinks on the shared logger are left alone
_handler_ids: List[int] = []


def setup_logger(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None
) -> List[int]:
    """
    Configure the package's log sinks.

    Sinks from a previous call are replaced. Variable values are left out of
    tracebacks (``diagnose=False``) so that private keys passed to the
    helpers never reach a sink.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file

    Returns:
        List[int]: Handler ids of the sinks that were added
    """
    log_level = log_level or settings.LOG_LEVEL
    log_file = log_file or settings.LOG_FILE

    reset_logger()

    _handler_ids.append(
        logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, diagnose=False)
    )

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        _handler_ids.append(
            logger.add(
                log_file,
                level=log_level,
                format=FILE_FORMAT,
                filter="evm_signature",
                diagnose=False,
                rotation="10 MB",
                retention=5,
            )
        )

    return list(_handler_ids)


def reset_logger() -> None:
    """Remove the sinks added by ``setup_logger``, flushing any log file."""
    while _handler_ids:
        logger.remove(_handler_ids.pop())


__all__ = ["logger", "setup_logger", "reset_logger"]
