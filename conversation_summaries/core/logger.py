import logging

from conversation_summaries.core.config import settings


LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)

formatter = logging.Formatter(LOG_FORMAT)

console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)

logger = logging.getLogger("conversation_summaries")
logger.setLevel(settings.LOG_LEVEL.upper())

# Prevent duplicate handlers when reloading app
if not logger.handlers:
    logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Child of the package logger, so it shares the console handler."""
    if name == logger.name or name.startswith(logger.name + "."):
        return logging.getLogger(name)
    return logger.getChild(name)
