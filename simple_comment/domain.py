"""Defines the request-scoped concepts handled by the comment API boundary."""

from enum import Enum
from typing import Any, Mapping, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict
from typing_extensions import TypedDict


UserId = str
"""Either a guest id (UUID-formatted) or a registered user id."""

HeaderMap = Mapping[str, Optional[str]]
"""HTTP headers as received; names are matched case-insensitively."""

GenericObj = Mapping[str, Any]
"""A loosely-typed payload, e.g. the output of a parsed request body."""


class TokenClaim(NamedTuple):
    """The verified payload of an authentication token."""

    user: UserId
    """The subject of the token."""

    exp: int
    """Expiry, in whole seconds since the epoch."""


class TokenStatus(Enum):
    """Closed set of outcomes when checking a request for a token."""

    VALID = 'valid'
    ABSENT = 'absent'
    INVALID = 'invalid'
    EXPIRED = 'expired'


class TokenOutcome(NamedTuple):
    """Result of checking the authentication token on a request."""

    status: TokenStatus
    claim: Optional[TokenClaim] = None
    error: Optional[Exception] = None

    @property
    def user(self) -> Optional[UserId]:
        """The authenticated user id, if the token was valid."""
        if self.status is TokenStatus.VALID and self.claim is not None:
            return self.claim.user
        return None


class AuthorizationValue(NamedTuple):
    """An ``Authorization`` header value split into its two parts."""

    scheme: str
    credentials: str


class BasicCredentials(NamedTuple):
    """Plaintext credentials from a ``Basic`` Authorization header."""

    user: str
    password: str


class ValidationResult(NamedTuple):
    """
    A pass/fail verdict with an optional explanation.

    A valid result never carries a reason.
    """

    is_valid: bool
    reason: Optional[str] = None

    @classmethod
    def valid(cls) -> 'ValidationResult':
        """A passing verdict."""
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: str) -> 'ValidationResult':
        """A failing verdict that explains itself."""
        return cls(is_valid=False, reason=reason)


class User(BaseModel):
    """A registered or guest user, as stored by the persistence service."""

    model_config = ConfigDict(extra='ignore')

    id: UserId
    """Unique identifier; UUID-formatted for guests only."""

    name: str
    """Display name."""

    email: str
    """Contact address. Never shown to the public."""

    hash: Optional[str] = None
    """Credential digest. Never leaves this package."""

    isAdmin: bool = False
    """Only admins may change this."""

    isVerified: bool = False
    """Whether the e-mail address has been verified. Only admins may change
    this."""


class NewUser(TypedDict, total=False):
    """
    Fields a request may supply when creating a user.

    Flags arrive as text and are coerced to ``bool``; ``'true'``/``'false'``,
    ``'1'``/``'0'``, ``'yes'``/``'no'`` and ``'on'``/``'off'`` are understood.
    """

    id: UserId
    isAdmin: bool
    email: str
    isVerified: bool
    name: str
    password: str


class UpdateUser(TypedDict, total=False):
    """Fields a request may supply when updating a user."""

    isAdmin: bool
    email: str
    isVerified: bool
    name: str


class Topic(TypedDict, total=False):
    """A discussion topic."""

    id: str
    title: str
    isLocked: bool


class PublicSafeUser(TypedDict, total=False):
    """The user fields any viewer may see."""

    id: UserId
    name: str
    isAdmin: bool


class AdminSafeUser(TypedDict, total=False):
    """The user fields an admin viewer may see."""

    id: UserId
    name: str
    email: str
    isAdmin: bool
    isVerified: bool
