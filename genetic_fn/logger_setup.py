"""Loguru console configuration."""

import sys

from loguru import logger


def setup_logger(level: str = "INFO", enable_colors: bool = True) -> None:
    """
    Replace loguru's default sink with a single stderr sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_colors: Whether to colour output when stderr is a terminal
    """
    colorize = enable_colors and sys.stderr.isatty()
    if colorize:
        console_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<blue>{function}</blue>:<yellow>{line}</yellow> | "
            "<level>{message}</level>"
        )
    else:
        console_format = (
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{name}:{function}:{line} | "
            "{message}"
        )

    logger.remove()
    logger.add(
        lambda msg: sys.stderr.write(msg),
        level=level.upper(),
        format=console_format,
        colorize=colorize,
    )
