"""One-JSON-object-per-line logging for the API and the subscriber.

Context goes through ``extra``::

    logger.info("User created", extra={"userId": user.id})

and comes out as a top-level key of the JSON line.
"""

import json
import logging
from datetime import datetime, timezone

# Attribute names every LogRecord carries; anything else on a record came from ``extra``
_RESERVED = frozenset(vars(logging.LogRecord('', logging.INFO, '', 0, '', (), None))) | {'message', 'asctime'}


def _iso_utc(created: float) -> str:
    return datetime.fromtimestamp(created, timezone.utc).isoformat().replace('+00:00', 'Z')


class JSONFormatter(logging.Formatter):

    def __init__(self, service: str | None = None):
        super().__init__()
        self.service = service

    def _context(self, record: logging.LogRecord) -> dict:
        return {
            key: value for key, value in vars(record).items()
            if key not in _RESERVED and not callable(value)
        }

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": _iso_utc(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.service:
            entry["service"] = self.service
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        entry.update(self._context(record))
        return json.dumps(entry, default=str)


def setup_structured_logging(level: str = 'INFO', service: str | None = None) -> None:
    """Install a single JSON stderr handler on the root logger.

    uvicorn's access logger shares the handler and only reports warnings;
    pymongo is held at WARNING.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter(service))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]

    access = logging.getLogger("uvicorn.access")
    access.handlers = [handler]
    access.setLevel(logging.WARNING)

    logging.getLogger('pymongo').setLevel(logging.WARNING)
