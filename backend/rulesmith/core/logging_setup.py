import logging
import sys

from rulesmith.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Route the package's diagnostics to stderr.

    Stdout carries generated documents only, so every handler installed here
    writes to stderr. Calling it again replaces the previous handler.
    """
    logger = logging.getLogger("rulesmith")
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    for handler in list(logger.handlers):
        if getattr(handler, "_rulesmith_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._rulesmith_handler = True
    logger.addHandler(handler)
    logger.propagate = False
    return logger
