from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "foldergen"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the package logger once per process entry point.
    Modules just call logging.getLogger(__name__) and inherit this setup.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    # Re-running setup (tests, repeated CLI calls) must not stack handlers.
    if logger.handlers:
        logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
