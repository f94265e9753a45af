import logging
from prompthub.config import settings

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("apscheduler", "aiosqlite")

def setup_logger():
    """Configure the `prompthub` logger once; later calls return it unchanged."""

    level = getattr(logging, settings.log_level.upper())
    logger = logging.getLogger("prompthub")
    logger.setLevel(level)

    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))
    logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return logger

logger = setup_logger()
