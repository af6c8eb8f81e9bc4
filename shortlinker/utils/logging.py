"""JSON logging for the shortlink lambdas

Each lambda package calls `initialize_logging()` from its `__init__.py`, so
every record the handlers and the DAO emit reaches CloudWatch as one JSON
object per line. Fields passed through `extra=` become top-level keys:

    >>> logger.info('Shortened URL. Responding with 201.', extra={'shortlink': '1', 'event': 'SHORTLINK_CREATED'})
    {"timestamp": "2025-10-15T00:00:00.000Z", "level": "INFO", "logger": "shortlinker.lambdas.shorten_url.app",
     "message": "Shortened URL. Responding with 201.", "shortlink": "1", "event": "SHORTLINK_CREATED"}

Store failures additionally carry the Redis `operation` and `key`, and
records logged with `logger.exception()` carry the formatted traceback
under `exception`.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shortlinker.constants import ENV


# Attributes every LogRecord has; anything else on a record came from `extra=`
_RECORD_ATTRS = frozenset(vars(logging.LogRecord('', logging.NOTSET, '', 0, '', (), None))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Render a LogRecord, its `extra` fields and its traceback as a JSON line"""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update((key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS)

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)
        if record.stack_info:
            log['stack'] = self.formatStack(record.stack_info)

        # extras such as exceptions or datetimes fall back to their str()
        return json.dumps(log, default=str)


def initialize_logging() -> None:
    """Send JSON lines to stdout at LOG_LEVEL (default INFO)."""
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper(),
                'handlers': ['stdout'],
            },
        }
    )
