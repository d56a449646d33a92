"""
Snippetbox: Structured Logging
=================================

What:  Formatters that render log records as structured lines, plus the
       one-time logging setup used by the CLI.
Why:   Key/value lines are greppable by humans and parseable by log
       shippers without a separate pipeline.
How:   Anything passed through `extra=` on a logging call becomes a field.

Text format (default):
    time=2026-01-15T12:00:00.000+00:00 level=INFO msg="starting server" addr=:4000

JSON format (LOG_FORMAT=json, rendered by python-json-logger):
    {"time": "2026-01-15T12:00:00.000+00:00", "level": "INFO", "msg": "starting server", "addr": ":4000"}

Loggers are never reached through a module global by request handlers:
the CLI builds one here and passes it into create_app().
"""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Iterator, Tuple

from pythonjsonlogger.json import JsonFormatter

from snippetbox.config import Settings

LOGGER_NAME = "snippetbox"

# Attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
    for key, value in record.__dict__.items():
        if key not in _RESERVED_ATTRS and not key.startswith("_"):
            yield key, value


def _timestamp(record: logging.LogRecord) -> str:
    moment = datetime.fromtimestamp(record.created).astimezone()
    return moment.isoformat(timespec="milliseconds")


def _needs_quoting(text: str) -> bool:
    if not text:
        return True
    return any(ch.isspace() or ch in '="\\' or not ch.isprintable() for ch in text)


def format_value(value: Any) -> str:
    """Render a single value, quoting it when it would break the key=value grammar."""
    text = value if isinstance(value, str) else str(value)
    if _needs_quoting(text):
        return json.dumps(text)
    return text


class KeyValueFormatter(logging.Formatter):
    """
    Renders records as `key=value` pairs separated by spaces.

    Field order: time, level, [source], msg, then extras in the order given.
    Exception tracebacks are appended as a quoted `exc` field so each
    record stays on one line.
    """

    def __init__(self, add_source: bool = False):
        super().__init__()
        self.add_source = add_source

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return _timestamp(record)

    def fields(self, record: logging.LogRecord) -> list[Tuple[str, Any]]:
        pairs: list[Tuple[str, Any]] = [
            ("time", self.formatTime(record)),
            ("level", record.levelname),
        ]
        if self.add_source:
            pairs.append(("source", f"{record.pathname}:{record.lineno}"))
        pairs.append(("msg", record.getMessage()))
        pairs.extend(_extra_fields(record))
        if record.exc_info:
            pairs.append(("exc", self.formatException(record.exc_info)))
        return pairs

    def format(self, record: logging.LogRecord) -> str:
        return " ".join(f"{key}={format_value(value)}" for key, value in self.fields(record))


class JSONFormatter(JsonFormatter):
    """
    Same fields as KeyValueFormatter, one JSON object per line.

    python-json-logger collects the message, extras and traceback; the
    fields are then put back in key/value order under the same names.
    Values json cannot encode are rendered with str().
    """

    def __init__(self, add_source: bool = False):
        super().__init__(json_default=str)
        self.add_source = add_source

    def add_fields(
        self,
        log_data: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_data, record, message_dict)
        collected = dict(log_data)
        log_data.clear()

        log_data["time"] = _timestamp(record)
        log_data["level"] = record.levelname
        if self.add_source:
            log_data["source"] = f"{record.pathname}:{record.lineno}"
        log_data["msg"] = collected.pop("message", record.getMessage())
        exc = collected.pop("exc_info", None)
        log_data.update(collected)
        if exc:
            log_data["exc"] = exc


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Configure the root logger and return the application logger.

    What:    Installs a single stdout handler with the configured formatter.
    When:    Called once by the CLI before the server starts.
    Returns: The "snippetbox" logger, to be injected into create_app().

    uvicorn's own loggers propagate to the root logger, so server startup
    errors (e.g. address already in use) come out in the same format.
    """
    formatter: logging.Formatter
    if settings.log_format == "json":
        formatter = JSONFormatter(add_source=settings.log_add_source)
    else:
        formatter = KeyValueFormatter(add_source=settings.log_add_source)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        handlers=[handler],
        force=True,  # Override any existing logging config
    )

    # Requests are logged by RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger(LOGGER_NAME)
