"""Process-wide configuration, read once from the environment at startup."""

import os
from functools import lru_cache
from typing import Mapping, NamedTuple, Optional, Tuple

from dotenv import load_dotenv

DEFAULT_TOKEN_LIFETIME_MINUTES = 60 * 24 * 7
"""Issued tokens are good for a week unless configured otherwise."""

DEFAULT_LOG_LEVEL = 'INFO'


class Settings(NamedTuple):
    """Immutable configuration passed into every function that needs it."""

    allow_origin: Tuple[str, ...] = ()
    """Origins, or URL glob patterns, allowed to receive CORS headers.

    May contain the literal ``*``.
    """

    jwt_secret: Optional[str] = None
    """Shared secret used to sign and verify authentication tokens."""

    token_lifetime_minutes: int = DEFAULT_TOKEN_LIFETIME_MINUTES
    """How long a freshly issued token remains valid."""

    log_level: str = DEFAULT_LOG_LEVEL


def split_origins(value: Optional[str]) -> Tuple[str, ...]:
    """Split a comma-separated ``ALLOW_ORIGIN`` value into its entries."""
    if not value:
        return ()
    return tuple(o.strip() for o in value.split(',') if o.strip())


def from_environ(environ: Mapping[str, str]) -> Settings:
    """Build :class:`.Settings` from an environment-like mapping."""
    lifetime = environ.get('TOKEN_LIFETIME_MINUTES')
    return Settings(
        allow_origin=split_origins(environ.get('ALLOW_ORIGIN')),
        jwt_secret=environ.get('JWT_SECRET') or None,
        token_lifetime_minutes=(int(lifetime) if lifetime
                                else DEFAULT_TOKEN_LIFETIME_MINUTES),
        log_level=environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """
    Load settings for this process.

    Values in a ``.env`` file are merged into the environment first, without
    overriding anything already set. The result is cached, so the
    environment is only consulted on the first call.
    """
    load_dotenv()
    return from_environ(os.environ)
