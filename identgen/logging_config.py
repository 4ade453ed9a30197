"""Logging configuration for identgen.

Library modules obtain their logger through :func:`get_logger`. Nothing is
emitted until the embedding application calls :func:`setup_logging` (or
configures the ``identgen`` logger itself).
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "identgen"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the ``identgen`` root logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Attach a rich console handler to the ``identgen`` logger.

    Calling it again replaces the previously installed rich handler.

    Args:
        level: Logging level name or number.
        console: Console to write to; defaults to stderr.

    Returns:
        The configured root ``identgen`` logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
