"""
passcraft structured logging.

Provides a consistent logging interface for the core modules.
CLI output (cli.py) intentionally uses print() for the secrets themselves.
Generated secrets are never passed to a logger, at any level.
"""

import logging
from typing import Optional, Union

from passcraft.core.errors import InvalidArgument

LOG_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under 'passcraft'."""
    return logging.getLogger(f'passcraft.{name}')


def resolve_level(level: Union[int, str]) -> int:
    """
    Turn a config or CLI level into a logging level number.

    Accepts a level number or one of LEVEL_NAMES in any case.

    Raises:
        InvalidArgument: If the name is unknown
    """
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    name = str(level).strip().upper()
    if name not in LEVEL_NAMES:
        raise InvalidArgument(
            f"Unknown log level {level!r}, expected one of {', '.join(LEVEL_NAMES)}"
        )
    return getattr(logging, name)


def setup_logging(level: Union[int, str] = logging.INFO,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the passcraft root logger.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        level: Logging level or level name (default INFO)
        log_file: Optional file path for file logging

    Raises:
        InvalidArgument: If level is an unknown name
    """
    logger = logging.getLogger('passcraft')
    logger.setLevel(resolve_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(LOG_FORMAT)

    handler = logging.StreamHandler()
    handler.setFormatter(fmt)
    logger.addHandler(handler)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
