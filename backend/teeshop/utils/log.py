import logging
import sys

from teeshop.config import settings


def get_logger(name: str) -> logging.Logger:
    """Named logger writing `[NAME] LEVEL message` lines to stdout."""
    log = logging.getLogger(name)
    log.setLevel(settings.LOG_LEVEL.upper())
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(f"[{name.upper()}] %(levelname)s %(message)s"))
        log.addHandler(h)
    return log
