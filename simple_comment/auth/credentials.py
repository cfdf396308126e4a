"""
Extract credentials from the ``Authorization`` and ``Cookie`` headers.

Two schemes are recognized in the ``Authorization`` header: ``Bearer``,
carrying a signed token, and ``Basic``, carrying a base64-encoded
``user:password`` pair used only to log in. Browsers send the token in the
``simple_comment_token`` cookie instead.
"""

import binascii
import logging
from base64 import b64decode
from itertools import islice
from typing import Dict, Optional

from ..domain import AuthorizationValue, BasicCredentials, HeaderMap
from .headers import get_header_value, has_header

logger = logging.getLogger(__name__)

REALM = 'Access to restricted resources'
AUTHORIZATION_HEADER = 'Authorization'
COOKIE_HEADER = 'Cookie'
BEARER_SCHEME = 'Bearer'
BASIC_SCHEME = 'Basic'

TOKEN_COOKIE_NAME = 'simple_comment_token'

COOKIE_SEPARATOR = '; '
"""Pairs in a Cookie header are separated by a semicolon and a space."""

MAX_COOKIE_PAIRS = 64
"""Cookie pairs beyond this many are never inspected."""


def parse_authorization_value(value: str) -> AuthorizationValue:
    """
    Split an Authorization value into scheme and credentials.

    Only the first space is a delimiter; the credentials are returned
    verbatim, whatever they contain.
    """
    scheme, _, credentials = value.partition(' ')
    return AuthorizationValue(scheme=scheme, credentials=credentials)


def get_auth_header_value(headers: HeaderMap) -> Optional[str]:
    """Get the raw value of the Authorization header, if any."""
    return get_header_value(headers, AUTHORIZATION_HEADER)


def get_auth_credentials(value: str) -> str:
    """Get the credentials part of an Authorization value."""
    return parse_authorization_value(value).credentials


def _has_scheme(headers: HeaderMap, scheme: str) -> bool:
    if not has_header(headers, AUTHORIZATION_HEADER):
        return False
    parsed = parse_authorization_value(get_auth_header_value(headers))
    return parsed.scheme.lower() == scheme.lower()


def has_bearer_scheme(headers: HeaderMap) -> bool:
    """Check the Authorization header for the ``Bearer`` scheme."""
    return _has_scheme(headers, BEARER_SCHEME)


def has_basic_scheme(headers: HeaderMap) -> bool:
    """Check the Authorization header for the ``Basic`` scheme."""
    return _has_scheme(headers, BASIC_SCHEME)


def decode_basic_credentials(value: str) -> Optional[str]:
    """
    Decode a value of the form ``Basic someBase64String==`` to plaintext.

    Decoding is lenient: missing padding is restored, and bytes that are not
    UTF-8 become U+FFFD. Returns ``None`` if the remainder still cannot be
    decoded as base64.
    """
    encoded = value[len(BASIC_SCHEME) + 1:].strip().rstrip('=')
    encoded += '=' * (-len(encoded) % 4)
    try:
        return b64decode(encoded).decode('utf-8', errors='replace')
    except binascii.Error as e:
        logger.debug('Basic credentials are not valid base64: %s', e)
        return None


def parse_basic_credentials(plaintext: str) -> BasicCredentials:
    """
    Split ``user:password`` plaintext on the first colon.

    A user name that itself contains ``:`` cannot be represented; everything
    after its first colon would be read as the password.
    """
    user, _, password = plaintext.partition(':')
    return BasicCredentials(user=user, password=password)


def get_user_id_password(headers: HeaderMap) -> Optional[BasicCredentials]:
    """
    Read the user and password from a ``Basic`` Authorization header.

    A missing or undecodable header is treated as absent, and gives ``None``.
    """
    value = get_auth_header_value(headers)
    if value is None:
        return None
    plaintext = decode_basic_credentials(value)
    if plaintext is None:
        return None
    return parse_basic_credentials(plaintext)


def basic_challenge_headers() -> Dict[str, str]:
    """Headers for a 401 response that asks for Basic credentials."""
    return {'WWW-Authenticate': f'Basic realm="{REALM}"'}


def has_token_cookie(headers: HeaderMap) -> bool:
    """Check the Cookie header for the authentication token cookie."""
    if not has_header(headers, COOKIE_HEADER):
        return False
    return f'{TOKEN_COOKIE_NAME}=' in get_header_value(headers, COOKIE_HEADER)


def get_cookie_token(headers: HeaderMap) -> Optional[str]:
    """
    Get the authentication token from the Cookie header.

    Returns the value of the first pair whose key starts with
    ``simple_comment_token`` and whose value is not empty, or ``None`` if
    there is no such pair.
    """
    cookie = get_header_value(headers, COOKIE_HEADER)
    if not cookie:
        return None
    pairs = cookie.split(COOKIE_SEPARATOR, MAX_COOKIE_PAIRS)
    for pair in islice(pairs, MAX_COOKIE_PAIRS):
        if pair.startswith(TOKEN_COOKIE_NAME) and '=' in pair:
            token = pair.split('=')[1]
            if token:
                return token
    if len(pairs) > MAX_COOKIE_PAIRS:
        logger.debug('Gave up looking for token after %i cookies',
                     MAX_COOKIE_PAIRS)
    return None
