"""
Structured logging for the process hosting the comment API.

Call :func:`setup_logger` once at startup, e.g.
``setup_logger(load_settings())``. Modules log through
``logging.getLogger(__name__)`` as usual, and records come out as one JSON
object per line.
"""

import logging
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from .config import Settings, load_settings

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'
RENAMED_FIELDS = {'levelname': 'level', 'asctime': 'timestamp'}


class _JsonHandler(logging.StreamHandler):
    """Marks the handler installed here, so it is installed only once."""


def setup_logger(settings: Optional[Settings] = None) -> logging.Logger:
    """Send root log records to stderr as JSON, at the configured level."""
    if settings is None:
        settings = load_settings()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, _JsonHandler):
            root.removeHandler(handler)
    handler = _JsonHandler()
    handler.setFormatter(JsonFormatter(LOG_FORMAT,
                                       rename_fields=RENAMED_FIELDS))
    root.addHandler(handler)
    root.setLevel(settings.log_level)
    return root
