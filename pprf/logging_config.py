"""
Logging Configuration

Console logging in JSON or plain text. Library modules only emit DEBUG
records and never include generator values or punctured indices.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from pythonjsonlogger import jsonlogger

from .config import Settings, get_settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with timestamp and service fields."""

    def __init__(self, *args: Any, version: str = "", **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.version = version

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['service'] = 'rsa-pprf'
        log_record['version'] = self.version
        log_record['level'] = record.levelname


def setup_logging(settings: Optional[Settings] = None, stream: Optional[TextIO] = None) -> None:
    """
    Configure the `pprf` logger hierarchy.

    Args:
        settings: Logging level and format, defaults to get_settings()
        stream: Output stream, defaults to stdout
    """
    settings = settings or get_settings()

    package_logger = logging.getLogger('pprf')
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    package_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)

    if settings.log_format == 'json':
        formatter = CustomJsonFormatter(
            fmt='%(timestamp)s %(level)s %(name)s %(message)s',
            version=settings.app_version,
        )
    else:
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    package_logger.debug("Logging configured - level: %s, format: %s", settings.log_level, settings.log_format)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)
