import json
import logging
import sys

from prime_client.common.config import get_settings


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line, for log shippers in non-local environments.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "timestamp": self.formatTime(record, self.datefmt),
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record, default=str)


PACKAGE_LOGGER = "prime_client"
LOCAL_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> logging.Logger:
    """
    Attach a stdout handler to the package logger and return it.

    Only ``prime_client.*`` loggers are touched; the host application's root
    logger and its handlers are left alone. Calling this again replaces the
    handler installed by the previous call.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if settings.ENVIRONMENT == "local":
        handler.setFormatter(logging.Formatter(LOCAL_FORMAT))
    else:
        handler.setFormatter(JsonFormatter())

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    # Own handler only; records would otherwise print twice under a configured root
    package_logger.propagate = False

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger for a specific module.
    """
    return logging.getLogger(name)
