"""Logging configuration for benchman."""

import logging
import os
import sys

_FORMAT = "%(levelname)s %(asctime)s %(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"

_root_logger = logging.getLogger("benchman")
_default_handler = None


def _setup_logger():
    global _default_handler

    _root_logger.setLevel(os.environ.get("BENCHMAN_LOGGING_LEVEL", "INFO").upper())
    if _default_handler is None:
        _default_handler = logging.StreamHandler(sys.stdout)
        _default_handler.setLevel(logging.DEBUG)
        _root_logger.addHandler(_default_handler)
    _default_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    # keep messages out of the application's root handlers
    _root_logger.propagate = False


_setup_logger()


def init_logger(name: str) -> logging.Logger:
    # children of "benchman" inherit the handler configured above
    return logging.getLogger(name)
