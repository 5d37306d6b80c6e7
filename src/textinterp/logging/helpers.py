from __future__ import annotations

"""Logger names, base configuration and substitution tracing for textinterp.

Library modules only call get_logger(); handlers are installed once by the
CLI (or the embedding application) through setup_base_logger.

Engine records may carry extra attributes that JsonLogFormatter lifts into
top-level keys:
    - template / depth: set by trace_substitution (TEXTINTERP_TRACE=1)
    - error_kind: set when an interpolation call is aborted by its guard
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from textinterp.constants import ENV_TRACE

BASE_LOGGER = 'textinterp'

ENGINE_FIELDS = ('template', 'depth', 'error_kind')


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line: time, level, logger, message plus engine fields."""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            'time': stamp.strftime('%Y-%m-%dT%H:%M:%S.') + f'{int(record.msecs):03d}Z',
            'level': record.levelname.lower(),
            'logger': record.name,
            'message': record.getMessage(),
        }
        for key in ENGINE_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'textinterp' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER)
    if base.handlers:
        base.setLevel(level)
        return base

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    base.addHandler(handler)

    return base


def reset_base_logger() -> None:
    """Drop handlers installed by setup_base_logger (used between CLI runs)."""
    base = logging.getLogger(BASE_LOGGER)
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.propagate = True
    base.setLevel(logging.NOTSET)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'textinterp'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{BASE_LOGGER}.{name}')


def is_trace_enabled() -> bool:
    return os.getenv(ENV_TRACE) == '1'


def trace_substitution(logger: logging.Logger, name: str, replacement: str, depth: int) -> None:
    """Log one substitution at debug level when TEXTINTERP_TRACE=1."""
    if not is_trace_enabled():
        return
    logger.debug(
        'substitute %r -> %r (depth %d)',
        name,
        replacement,
        depth,
        extra={'template': name, 'depth': depth},
    )
