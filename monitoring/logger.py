import json
import logging
import sys
import traceback
from datetime import datetime
from decimal import Decimal
from logging.handlers import RotatingFileHandler
from pathlib import Path

from domain.models.upstream import FetchResult


class CustomJSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, Decimal):
            return str(o)
        return super().default(o)


class JSONFormatter(logging.Formatter):
    """
    Formatter that writes one JSON object per log record.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info and record.exc_info[0] is not None:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        if hasattr(record, 'extra_data'):
            log_entry['data'] = record.extra_data

        return json.dumps(log_entry, ensure_ascii=False, cls=CustomJSONEncoder)


def setup_logging(level: str = "INFO",
                  log_directory: str | None = None,
                  max_file_size: int = 10 * 1024 * 1024,
                  backup_count: int = 5) -> None:
    """
    Configure the root logger once at startup.

    Console output is always on. When ``log_directory`` is given, JSON logs
    are also written to ``system/app.log`` and warnings and above to
    ``errors/errors.log`` under that directory.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)

    logging.getLogger("httpx").setLevel(logging.WARNING)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    console_format = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'
    console_handler.setFormatter(logging.Formatter(console_format, datefmt='%H:%M:%S'))
    root_logger.addHandler(console_handler)

    if not log_directory:
        return

    base = Path(log_directory)
    for subdir, filename, file_level in (
        ("system", "app.log", logging.DEBUG),
        ("errors", "errors.log", logging.WARNING),
    ):
        target = base / subdir
        target.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            target / filename,
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        handler.setLevel(file_level)
        handler.setFormatter(JSONFormatter())
        root_logger.addHandler(handler)


def log_upstream_call(logger: logging.Logger, endpoint: str, result: FetchResult) -> None:
    extra = {
        "extra_data": {
            "provider": result.provider_name,
            "endpoint": endpoint,
            "status": result.status.value,
            "http_status_code": result.http_status_code,
            "response_time_ms": result.response_time_ms,
            "error_message": result.error_message,
        }
    }
    if result.is_successful:
        logger.info(
            f"API call to {result.provider_name}: SUCCESS ({result.response_time_ms}ms)",
            extra=extra,
        )
    else:
        logger.warning(
            f"API call to {result.provider_name}: FAILED [{result.status.value}] {result.error_message}",
            extra=extra,
        )
