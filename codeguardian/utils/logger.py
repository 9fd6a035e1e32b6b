import logging
import sys
from logging.handlers import RotatingFileHandler, SysLogHandler

from codeguardian.config import settings


class LevelFilter(logging.Filter):
    def __init__(self, min_level, max_level):
        super().__init__()
        self.min_level = min_level
        self.max_level = max_level

    def filter(self, record):
        return self.min_level <= record.levelno <= self.max_level


formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger()

# Handlers added by setup_logger, so a second call replaces them instead of
# stacking duplicates.
_installed_handlers = []


def setup_logger():
    """Installs the handlers selected by LOG_DRIVER on the root logger."""
    log_driver = settings.LOG_DRIVER
    if log_driver not in ["console", "file", "syslog"]:
        raise ValueError(
            f"Invalid LOG_DRIVER: {log_driver}. Must be one of ['console', 'file', 'syslog']"
        )

    while _installed_handlers:
        logger.removeHandler(_installed_handlers.pop())
    logger.setLevel(logging.DEBUG)

    if log_driver == "file":
        handler = RotatingFileHandler(
            settings.LOG_FILE, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        handler.setFormatter(formatter)
        _installed_handlers.append(handler)
    elif log_driver == "syslog":
        handler = SysLogHandler()
        handler.setFormatter(formatter)
        _installed_handlers.append(handler)
    else:
        # Handler for stdout (INFO and below)
        stdout_handler = logging.StreamHandler(stream=sys.stdout)
        stdout_handler.setFormatter(formatter)
        stdout_handler.addFilter(LevelFilter(logging.DEBUG, logging.INFO))
        _installed_handlers.append(stdout_handler)

        # Handler for stderr (WARNING and above)
        stderr_handler = logging.StreamHandler(stream=sys.stderr)
        stderr_handler.setFormatter(formatter)
        stderr_handler.addFilter(LevelFilter(logging.WARNING, logging.CRITICAL))
        _installed_handlers.append(stderr_handler)

    for handler in _installed_handlers:
        logger.addHandler(handler)
