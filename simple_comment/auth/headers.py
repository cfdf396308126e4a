"""Case-insensitive access to HTTP request headers."""

from typing import Dict, Mapping, Optional

from ..domain import HeaderMap


def get_header_name(headers: HeaderMap, header: str) -> Optional[str]:
    """
    Return the name under which ``header`` is stored, if at all.

    If the header is stored under more than one name, a name with a value is
    preferred over one whose value is ``None``.
    """
    target = header.lower()
    found = None
    for name, value in headers.items():
        if name.lower() != target:
            continue
        if value is not None:
            return name
        if found is None:
            found = name
    return found


def has_header(headers: HeaderMap, header: str) -> bool:
    """
    Check whether ``header`` is present with a value.

    A header present with a value of ``None`` counts as absent.
    """
    target = header.lower()
    return any(name.lower() == target and value is not None
               for name, value in headers.items())


def get_header_value(headers: HeaderMap, header: str) -> Optional[str]:
    """Get the value of ``header``, matching its name case-insensitively."""
    name = get_header_name(headers, header)
    if name is None:
        return None
    return headers[name]


def merge_headers(base: Optional[Mapping[str, str]],
                  extra: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Return a new header dict with ``extra`` layered over ``base``."""
    return {**(base or {}), **(extra or {})}
