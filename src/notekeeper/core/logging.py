"""
Logging configuration for NoteKeeper.

Console output is colored while debugging and JSON lines otherwise. When
``log_dir`` is set, everything is also written to rotating files there.
"""
import json
import logging
import logging.config
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..config import get_settings

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

_MAX_LOG_BYTES = 10 * 1024 * 1024
_LOG_BACKUPS = 5


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with ``extra`` fields kept apart."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry = {
            'timestamp': created.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}:{record.funcName}:{record.lineno}",
        }

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        extra = {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}
        if extra:
            entry['extra'] = extra

        return json.dumps(entry, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """ANSI-colored level names for a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[1;35m',
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers share the record
        colored = logging.makeLogRecord(vars(record))
        color = self.LEVEL_COLORS.get(record.levelno, '')
        colored.levelname = f"{color}{record.levelname:<8}{self.RESET}"
        return super().format(colored)


def get_log_level(level_str: Optional[str] = None) -> int:
    """Numeric level for a level name; unknown names fall back to INFO."""
    level = logging.getLevelName((level_str or get_settings().log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _rotating_file(path: Path, formatter: str, level: str) -> dict:
    return {
        'class': 'logging.handlers.RotatingFileHandler',
        'filename': str(path),
        'maxBytes': _MAX_LOG_BYTES,
        'backupCount': _LOG_BACKUPS,
        'encoding': 'utf-8',
        'formatter': formatter,
        'level': level,
    }


def build_logging_config(settings=None) -> dict:
    """dictConfig mapping for the given settings."""
    settings = settings or get_settings()

    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'stream': sys.stdout,
            'formatter': 'colored' if settings.debug or settings.log_format == 'text' else 'json',
            'level': get_log_level(settings.log_level),
        },
    }

    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers['file'] = _rotating_file(log_dir / 'notekeeper.log', 'plain', 'DEBUG')
        handlers['error_file'] = _rotating_file(log_dir / 'error.log', 'json', 'ERROR')

    app_handlers = list(handlers)
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'json': {'()': JSONFormatter},
            'colored': {
                '()': ColoredFormatter,
                'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
                'datefmt': '%H:%M:%S',
            },
            'plain': {
                'format': '%(asctime)s %(levelname)-8s %(name)s [%(module)s:%(lineno)d] %(message)s',
            },
        },
        'handlers': handlers,
        'loggers': {
            'notekeeper': {'handlers': app_handlers, 'level': 'DEBUG', 'propagate': False},
            'uvicorn': {'handlers': ['console'], 'level': 'INFO', 'propagate': False},
        },
    }


def setup_logging() -> None:
    """Apply the logging configuration from the current settings."""
    settings = get_settings()
    logging.config.dictConfig(build_logging_config(settings))
    get_logger('logging').debug(
        "Logging configured",
        extra={'log_level': settings.log_level, 'log_dir': settings.log_dir or None},
    )


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``notekeeper`` namespace."""
    return logging.getLogger(f"notekeeper.{name}")


class LoggingMiddleware:
    """ASGI middleware writing one log line per HTTP request."""

    def __init__(self, app, logger_name: str = "http"):
        self.app = app
        self.logger = get_logger(logger_name)

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = time.perf_counter()
        request = {'method': scope['method'], 'path': scope['path']}
        status_code = 500

        async def send_wrapper(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            self.logger.exception("Unhandled error", extra=request)
            raise
        finally:
            request['status_code'] = status_code
            request['duration_ms'] = round((time.perf_counter() - started) * 1000, 2)
            level = logging.WARNING if status_code >= 500 else logging.INFO
            self.logger.log(level, f"{request['method']} {request['path']} {status_code}", extra=request)
