"""
autocorrelation Logging
=======================
Provides consistent, scoped loggers for the package.
"""

import logging
import sys

CONSOLE_FMT = "[%(name)s] %(levelname)s: %(message)s"


def get_logger(name: str, console_level: int = logging.INFO) -> logging.Logger:
    """
    Creates or retrieves a logger with a single console handler.

    Calling it again for the same name reuses the existing handler and only
    updates its level.

    Args:
        name: Dot-separated module name (e.g., 'autocorrelation.tools.series').
        console_level: Logging level for the console handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)  # handlers filter it down
    logger.propagate = False

    console = [h for h in logger.handlers
               if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)]

    if console:
        console[0].setLevel(console_level)
    else:
        c_handler = logging.StreamHandler(sys.stdout)
        c_handler.setLevel(console_level)
        c_handler.setFormatter(logging.Formatter(CONSOLE_FMT))
        logger.addHandler(c_handler)

    return logger
