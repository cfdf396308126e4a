"""Pull resource ids out of REST-style request paths."""

import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

MAX_PATH_SEGMENTS = 32
"""Paths with more segments than this are never scanned."""


def _segments(path: str, max_segments: int) -> Optional[List[str]]:
    dirs = path.split('/', max_segments)
    if len(dirs) > max_segments:
        logger.debug('Rejecting path with more than %i segments',
                     max_segments)
        return None
    return dirs


def is_valid_path(path: str, max_segments: int = MAX_PATH_SEGMENTS) -> bool:
    """Check that ``path`` has no more than ``max_segments`` segments."""
    return _segments(path, max_segments) is not None


def get_target_id(path: str, anchor: str) -> Optional[str]:
    """
    Get the path segment that follows ``anchor``, or ``None``.

    ``/dir1/endpoint/somestring/anotherstring`` gives ``somestring``,
    ``/dir1/endpoint/somestring`` gives ``somestring``,
    ``/dir1/endpoint`` gives ``None`` and
    ``/dir1/somestring/anotherstring`` gives ``None``.
    """
    dirs = _segments(path, MAX_PATH_SEGMENTS)
    if dirs is None:
        return None
    for i, segment in enumerate(dirs[:-1]):
        if segment == anchor:
            return dirs[i + 1]
    return None
