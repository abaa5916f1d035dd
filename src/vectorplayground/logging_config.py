"""
Logging Configuration
Sets up the package logger for the playground. Every module logs through
`logging.getLogger(__name__)`, so all records end up under this package.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER: str = __package__ or "vectorplayground"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'


def resolve_level(level: Union[int, str]) -> int:
    """
    Turn a level name ("debug", "INFO") or number into a logging level.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger: stdout always, plus a file when given.

    Args:
        level: Logging level as a number or a name, e.g. "DEBUG".
        log_file: Optional path; the file is overwritten on every start.

    Returns:
        The configured package logger.
    """
    numeric_level = resolve_level(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    # Re-running setup replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(numeric_level)}.")
    return logger
