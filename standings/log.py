import logging

from standings.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """
    Return a module logger writing to stderr.

    The handler is attached once on the package root logger so that every
    module logger shares it.
    """
    root = logging.getLogger("standings")

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(LOG_LEVEL)

    return logging.getLogger(name)


def set_level(level: str):
    logging.getLogger("standings").setLevel(level.upper())
