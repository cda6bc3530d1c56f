import logging
from typing import Optional


LOG_FORMAT = "[%(asctime)s] %(levelname)s — %(name)s: %(message)s"


def get_logger(name: str = "salesboard", level: Optional[int] = None) -> logging.Logger:
    """
    Logger with a single stderr handler.

    Configure the ``salesboard`` package logger once (CLI / UI entry points)
    and module loggers (``logging.getLogger(__name__)``) propagate to it.
    A later call with ``level`` only adjusts the level.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    if logger.handlers:
        return logger

    if level is None:
        logger.setLevel(logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    return logger
