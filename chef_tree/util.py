import logging

from rich.console import Console
from rich.logging import RichHandler

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
}

# anything not in LEVELS silences the logs
SILENT = logging.CRITICAL + 10


def loglevel(name: str) -> int:
    return LEVELS.get(name, SILENT)


def setup_logging(level: str, name: str = "chef_tree") -> logging.Logger:
    "log to stderr, keeping stdout for the tree"
    log = logging.getLogger(name)
    log.setLevel(loglevel(level))
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.addHandler(RichHandler(console=Console(stderr=True), show_time=False, show_path=False))
    return log
