"""
Helper utility functions for the Transit Network library.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "transit_network"


def apply_log_level(level: Union[int, str]) -> int:
    """
    Set the level of the package logger without touching any handlers.

    Args:
        level: Logging level, as a number or a level name

    Returns:
        int: The numeric level applied
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    return level


def setup_logging(level: Union[int, str] = logging.WARNING,
                  log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Setup logging with console and optional file output.

    Args:
        level: Logging level, as a number or a level name
        log_file: Optional path of a log file to write as well
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_path)))

    level = apply_log_level(level)
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
