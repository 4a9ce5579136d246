"""Logger setup.

curses owns the terminal while the interface runs, so records only go
somewhere when a log file is configured.

Usage:
    from logger import get_logger
    logger = get_logger(__name__)
"""
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level="INFO", filename=None):
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if filename:
        # replace whatever handlers were installed before, ours or a host's
        logging.basicConfig(filename=filename, format=LOG_FORMAT, force=True)
    elif not root.handlers:
        # stderr would scribble over the curses screen
        root.addHandler(logging.NullHandler())


def get_logger(name):
    return logging.getLogger(name)
