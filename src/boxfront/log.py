"""Opt-in console logging for boxfront.

Library modules only create loggers (``logging.getLogger(__name__)``) and
emit DEBUG records. Nothing is printed unless the application configures
logging, either itself or through configure_logging.
"""

import logging


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a console handler to the ``boxfront`` logger.

    Does nothing if the root logger or the ``boxfront`` logger already has
    handlers, so an application's own configuration always wins.

    Args:
        level: Level for the ``boxfront`` logger.
    """
    root = logging.getLogger()
    logger = logging.getLogger("boxfront")
    if root.handlers or logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
