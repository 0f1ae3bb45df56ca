import sys

from loguru import logger


def setup_logging(debug: bool = False, level: str = "INFO", log_file: str = "") -> None:
    """Route loguru to stderr (DEBUG when ``debug``) and optionally to a file."""
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else level,
        format="<level>{level: <8}</level> | {message}",
    )
    if log_file:
        logger.add(log_file, rotation="10 MB", retention="30 days", level="DEBUG")
