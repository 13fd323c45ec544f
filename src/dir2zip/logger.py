import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from dir2zip.defaults import DEBUG_ENV_VAR


def get_logger(name: str, show_time: bool = False) -> logging.Logger:
    """
    Return a logger writing rich-formatted records to stderr.

    The level is INFO, or DEBUG when the DIR2ZIP_DEBUG environment variable is set.
    Calling this twice for the same name does not attach a second handler.
    """
    logger = logging.getLogger(name)

    debug_mode = os.environ.get(DEBUG_ENV_VAR) is not None
    logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        console = Console(stderr=True)
        handler = RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=True,
            show_time=show_time or debug_mode,
        )
        handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
        logger.addHandler(handler)

    logger.propagate = False

    return logger
