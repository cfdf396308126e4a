"""Functions for working with authentication tokens on user requests."""

import logging
from datetime import datetime, timedelta
from typing import Optional

import jwt
from pytz import UTC

from ..domain import HeaderMap, TokenClaim, TokenOutcome, TokenStatus, UserId
from .credentials import (get_auth_credentials, get_auth_header_value,
                          get_cookie_token, has_bearer_scheme,
                          has_token_cookie)
from .exceptions import (AuthenticationError, ConfigurationError,
                         ExpiredToken, InvalidToken)

logger = logging.getLogger(__name__)

ALGORITHM = 'HS256'


def _now() -> datetime:
    return datetime.now(tz=UTC)


def _epoch_millis(t: datetime) -> int:
    return int(t.timestamp() * 1000)


def now_plus_minutes(minutes: float, now: Optional[datetime] = None) -> int:
    """Get the epoch time, in milliseconds, ``minutes`` from now."""
    return _epoch_millis((now or _now()) + timedelta(minutes=minutes))


def encode(claim: TokenClaim, secret: str) -> str:
    """Encode a claim as a signed JWT."""
    if not secret:
        raise ConfigurationError('Missing signing secret')
    return jwt.encode(claim._asdict(), secret, algorithm=ALGORITHM)


def issue_token(user_id: UserId, secret: str, minutes: float,
                now: Optional[datetime] = None) -> str:
    """Create a token for ``user_id`` that expires after ``minutes``."""
    exp = now_plus_minutes(minutes, now) // 1000
    return encode(TokenClaim(user=user_id, exp=exp), secret)


def decode(token: str, secret: str) -> TokenClaim:
    """
    Verify the signature on a token and unpack its claim.

    Expiry is not checked here; see :func:`get_token_claim`.

    Raises
    ------
    :class:`.InvalidToken`
        If the token is malformed, its signature does not verify, or its
        payload lacks a subject or an expiry.
    :class:`.ConfigurationError`
        If no secret is available.

    """
    if not secret:
        raise ConfigurationError('Missing decryption secret')
    try:
        data: dict = jwt.decode(token, secret, algorithms=[ALGORITHM],
                                options={'verify_exp': False})
    except jwt.exceptions.InvalidTokenError as e:
        raise InvalidToken('Not a valid token') from e

    user, exp = data.get('user'), data.get('exp')
    if not isinstance(user, str) or not user:
        raise InvalidToken('Token has no subject')
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        raise InvalidToken('Token has no expiry')
    return TokenClaim(user=user, exp=int(exp))


def get_token_claim(headers: HeaderMap, secret: str,
                    now: Optional[datetime] = None) -> Optional[TokenClaim]:
    """
    Get the verified claim from the token on a request, if there is one.

    The token cookie is preferred over a ``Bearer`` Authorization header.

    Returns
    -------
    :class:`.TokenClaim` or None
        ``None`` if the request carries no token at all.

    Raises
    ------
    :class:`.InvalidToken`
        If the token does not verify.
    :class:`.ExpiredToken`
        If the token verifies but has expired.

    """
    token: Optional[str] = None
    if has_token_cookie(headers):
        token = get_cookie_token(headers)
    if token is None and has_bearer_scheme(headers):
        token = get_auth_credentials(get_auth_header_value(headers)) or None
    if token is None:
        return None

    claim = decode(token, secret)

    # claim.exp is in seconds, while we compare in milliseconds.
    if claim.exp * 1000 <= _epoch_millis(now or _now()):
        expired_at = datetime.fromtimestamp(claim.exp, tz=UTC)
        raise ExpiredToken('jwt expired', expired_at)
    return claim


def check_token(headers: HeaderMap, secret: str,
                now: Optional[datetime] = None) -> TokenOutcome:
    """Check the token on a request without raising."""
    try:
        claim = get_token_claim(headers, secret, now)
    except ExpiredToken as e:
        return TokenOutcome(TokenStatus.EXPIRED, error=e)
    except AuthenticationError as e:
        return TokenOutcome(TokenStatus.INVALID, error=e)
    if claim is None:
        return TokenOutcome(TokenStatus.ABSENT)
    return TokenOutcome(TokenStatus.VALID, claim=claim)


def get_user_id(headers: HeaderMap, secret: str,
                now: Optional[datetime] = None) -> Optional[UserId]:
    """
    Get the id of the authenticated user, if any.

    A missing, invalid or expired token all leave the request anonymous.
    """
    outcome = check_token(headers, secret, now)
    if outcome.status is TokenStatus.EXPIRED:
        logger.error('Auth token expired at %s', outcome.error.expired_at)
    elif outcome.status is TokenStatus.INVALID:
        logger.error('Auth token not valid: %s', outcome.error)
    return outcome.user
