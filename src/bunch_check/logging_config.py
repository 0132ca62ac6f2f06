"""
Logging configuration for bunch-check.

Records go to stderr through a rich handler so they never mix with the
report on stdout. ``--log-file`` adds a plain-text copy for CI artifacts.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "bunch_check"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI flags to a level; ``quiet`` wins over ``verbose``."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Route bunch_check records to stderr and, optionally, to a log file.

    Handlers are attached to the ``bunch_check`` logger only and replaced
    on every call, so repeated runs in one process do not duplicate output.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging
        log_file: Append plain-text records to this file as well

    Returns:
        The configured bunch_check logger
    """
    level = log_level(verbose, quiet)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]
    if log_file is not None:
        file_handler = logging.FileHandler(str(log_file), mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    logger = logging.getLogger(ROOT_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the bunch_check logger, or a child of it for ``name``."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
