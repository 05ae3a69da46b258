"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once at process start (ShortenerApp
does this for you) before any other logging is done.

Two output formats are supported, selected by `LOG_FORMAT`:

json (default):
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "ttlshortener.sweeper",
    "message": "Swept expired short URLs.",
    "evicted": 3
}

text:
[2025-12-26T12:00:00.000Z] [INFO] [ttlshortener.sweeper] Swept expired short URLs.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from ttlshortener.utils.constants import ENV, Defaults


LOG_FORMATS = frozenset({'json', 'text'})


def _timestamp(record: logging.LogRecord) -> str:
    # fmt: off
    return datetime.fromtimestamp(record.created, tz=UTC) \
                   .isoformat(timespec='milliseconds') \
                   .replace('+00:00', 'Z')
    # fmt: on


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'module',
            'msecs',
            'msg',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': _timestamp(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


class TextFormatter(logging.Formatter):
    """Plain console formatter: [timestamp] [LEVEL] [logger] message"""

    def format(self, record: logging.LogRecord) -> str:
        line = f'[{_timestamp(record)}] [{record.levelname}] [{record.name}] {record.getMessage()}'
        if record.exc_info:
            line = f'{line}\n{self.formatException(record.exc_info)}'
        return line


def initialize_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure the root logger to write formatted records to stdout.

    Args:
        level (str | None):
            Log level name. Defaults to `LOG_LEVEL` or 'INFO'.
        fmt (str | None):
            'json' or 'text'. Defaults to `LOG_FORMAT` or 'json'.

    Raises:
        ValueError: If `fmt` is not a supported format.
    """
    log_level = (level or os.getenv(ENV.App.LOG_LEVEL, Defaults.LOG_LEVEL)).upper()
    log_format = (fmt or os.getenv(ENV.App.LOG_FORMAT, Defaults.LOG_FORMAT)).lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unsupported log format '{log_format}' (expected one of: {', '.join(sorted(LOG_FORMATS))}).")

    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                },
                'text': {
                    '()': TextFormatter,
                },
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': log_format,
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
