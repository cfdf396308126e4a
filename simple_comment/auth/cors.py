"""
Cross-origin policy.

Two related checks live here. :func:`get_allow_origin_headers` decides
which ``Access-Control-Allow-Origin`` headers go on a response, based on an
exact match of the request ``Origin`` against the configured allow-list.
:func:`is_allowed_referer` is looser. It compares a normalized URL against
glob patterns, so that a whole site, or a section of one, can be allowed
with a single entry.
"""

import logging
import re
from typing import Dict, Iterable, List
from urllib.parse import urlsplit

from wcmatch import glob

from ..config import Settings
from ..domain import HeaderMap
from .headers import get_header_value

logger = logging.getLogger(__name__)

ALLOW_ORIGIN_HEADER = 'Access-Control-Allow-Origin'
WILDCARD = '*'

DEFAULT_PORTS = {'http': 80, 'https': 443}
DIRECTORY_INDEX = re.compile(r'/index\.[a-z]+$', re.IGNORECASE)
WWW = re.compile(r'^www\.(?!www\.)[a-z\-\d]{1,63}\.[a-z.\-\d]{2,63}$')
MATCH_FLAGS = glob.GLOBSTAR


def get_allowed_origins(settings: Settings) -> List[str]:
    """The configured CORS allow-list."""
    return list(settings.allow_origin)


def normalize_url(url: str) -> str:
    """
    Normalize a URL for comparison against allowed patterns.

    Strips the fragment, the query string, any credentials, the protocol,
    a leading ``www.``, default ports, a trailing directory index such as
    ``/index.html`` and a trailing slash. The host is lowercased.

    Raises
    ------
    ValueError
        If ``url`` cannot be parsed, e.g. because its port is not a number.

    """
    url = url.strip()
    if url.startswith('//'):
        url = f'http:{url}'
    elif '://' not in url:
        url = f'http://{url}'

    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = (parts.hostname or '').lower()
    if WWW.match(host):
        host = host[len('www.'):]
    if ':' in host:
        host = f'[{host}]'
    port = parts.port
    if port is not None and DEFAULT_PORTS.get(scheme) != port:
        host = f'{host}:{port}'

    path = re.sub(r'/{2,}', '/', parts.path)
    path = DIRECTORY_INDEX.sub('', path)
    return f'{host}{path}'.rstrip('/')


def _matches(url: str, pattern: str) -> bool:
    return glob.globmatch(url, pattern, flags=MATCH_FLAGS)


def is_allowed_referer(url: str, allowed_patterns: Iterable[str]) -> bool:
    """
    Check whether ``url`` matches the allowed patterns.

    Patterns are shell globs: ``*`` matches within a path segment and
    ``**`` across segments. A pattern starting with ``!`` excludes what it
    matches. Patterns are applied in order and the last one to match
    decides, as in a ``.gitignore`` file.
    """
    try:
        normalized = normalize_url(url)
    except ValueError as e:
        logger.debug('Could not normalize referer %r: %s', url, e)
        return False

    allowed = False
    for pattern in allowed_patterns:
        if pattern.startswith('!'):
            if allowed and _matches(normalized, pattern[1:]):
                allowed = False
        elif not allowed and _matches(normalized, pattern):
            allowed = True
    return allowed


def get_allow_origin_headers(headers: HeaderMap,
                             allowed_origins: Iterable[str] = ()
                             ) -> Dict[str, str]:
    """
    Get the ``Access-Control-Allow-Origin`` headers for a response.

    - If the allow-list contains ``*``, allow any origin.
    - If the allow-list contains the request origin exactly, echo it back
      along with ``Vary: Origin``, since the response now depends on it.
    - Otherwise return no headers at all, which denies the origin.
    """
    allowed_origins = list(allowed_origins)
    if WILDCARD in allowed_origins:
        return {ALLOW_ORIGIN_HEADER: WILDCARD}
    origin = get_header_value(headers, 'origin')
    if origin is not None and origin in allowed_origins:
        return {ALLOW_ORIGIN_HEADER: origin, 'Vary': 'Origin'}
    return {}
