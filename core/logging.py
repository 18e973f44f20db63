"""
Logging configuration with JSON formatter for structured logging.
"""
import logging
import sys
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from core.config import Settings, settings as default_settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields."""

    def __init__(self, *args: Any, app_name: str = "", environment: str = "", **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.app_name = app_name
        self.environment = environment

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any]
    ) -> None:
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = self.formatTime(record, self.datefmt)
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        log_record['app_name'] = self.app_name
        log_record['environment'] = self.environment

        if record.exc_info:
            log_record['exc_info'] = self.formatException(record.exc_info)


def build_formatter(settings: Settings) -> logging.Formatter:
    """
    Pick the formatter for the configured environment.

    Staging and production emit one JSON object per line; development
    keeps the plain human-readable format.
    """
    if settings.app_env in ["production", "staging"]:
        return CustomJsonFormatter(
            fmt='%(timestamp)s %(level)s %(name)s %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            app_name=settings.app_name,
            environment=settings.app_env,
        )
    return logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure application logging.

    Args:
        settings: Settings to read level and environment from (defaults to
            the global instance)
    """
    settings = settings or default_settings
    formatter = build_formatter(settings)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    if settings.is_development and settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    logging.info(
        "Logging configured",
        extra={
            "log_level": settings.log_level,
            "environment": settings.app_env,
            "json_logging": isinstance(formatter, CustomJsonFormatter)
        }
    )
