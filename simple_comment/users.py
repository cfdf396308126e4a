"""
Shape user records, and comment threads, for the viewer.

A full user record carries a credential digest and storage internals that
must never leave the service. :func:`to_safe_user` is applied to every user
record on its way out.
"""

import re
import uuid
from typing import Any, FrozenSet, Mapping, Optional, Union

from .domain import AdminSafeUser, PublicSafeUser, User, UserId

ADMIN_UNSAFE_USER_PROPERTIES: FrozenSet[str] = frozenset({'hash', '_id'})
"""User properties that are unsafe to return even to admins."""

PUBLIC_UNSAFE_USER_PROPERTIES: FrozenSet[str] = \
    ADMIN_UNSAFE_USER_PROPERTIES | {'email', 'isVerified'}
"""User properties that are unsafe to return to ordinary users and the
public."""

ADMIN_ONLY_MODIFIABLE_USER_PROPERTIES: FrozenSet[str] = \
    frozenset({'isVerified', 'isAdmin'})
"""User properties that only admins may modify."""

ADMIN_SAFE_FIELDS = ('id', 'name', 'email', 'isAdmin', 'isVerified')
PUBLIC_SAFE_FIELDS = ('id', 'name', 'isAdmin')

# Versions 1-8, plus the nil and max UUIDs, in canonical hyphenated form.
_UUID = re.compile(
    r'^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-'
    r'[0-9a-f]{12}|00000000-0000-0000-0000-000000000000|'
    r'ffffffff-ffff-ffff-ffff-ffffffffffff)$',
    re.IGNORECASE
)
_EMAIL = re.compile(r'\S+@\S+\.\S+')

UserRecord = Union[User, Mapping[str, Any]]


def create_guest_id() -> UserId:
    """Create an id specifically for a guest."""
    return str(uuid.uuid4())


def is_guest_id(user_id: Optional[UserId]) -> bool:
    """Guest ids, and only guest ids, are UUIDs."""
    return isinstance(user_id, str) and bool(_UUID.match(user_id))


def is_email(value: str) -> bool:
    """Loosely check that ``value`` looks like an e-mail address."""
    return bool(_EMAIL.search(value.strip()))


def as_record(user: UserRecord) -> Mapping[str, Any]:
    """Get a plain mapping for a user, whether a model or a record."""
    if isinstance(user, User):
        return user.model_dump()
    return user


def _project(user: UserRecord, fields: tuple) -> dict:
    record = as_record(user)
    return {key: record[key] for key in fields if key in record}


def to_public_safe_user(user: Optional[UserRecord]
                        ) -> Optional[PublicSafeUser]:
    """Reduce a user record to what any viewer may see."""
    if not user:
        return user
    return PublicSafeUser(**_project(user, PUBLIC_SAFE_FIELDS))


def to_admin_safe_user(user: Optional[UserRecord]
                       ) -> Optional[AdminSafeUser]:
    """Reduce a user record to what an admin may see."""
    if not user:
        return user
    return AdminSafeUser(**_project(user, ADMIN_SAFE_FIELDS))


def to_safe_user(user: Optional[UserRecord], is_admin: bool = False
                 ) -> Optional[Union[PublicSafeUser, AdminSafeUser]]:
    """Return a user record that is clean and secure for the viewer."""
    return to_admin_safe_user(user) if is_admin else to_public_safe_user(user)


def is_admin_safe_user(obj: Mapping[str, Any]) -> bool:
    """Check that ``obj`` has no fields an admin may not see."""
    return all(key in ADMIN_SAFE_FIELDS for key in obj)


def is_public_safe_user(obj: Mapping[str, Any]) -> bool:
    """Check that ``obj`` has no fields the public may not see."""
    return all(key in PUBLIC_SAFE_FIELDS for key in obj)


def has_admin_only_fields(obj: Mapping[str, Any]) -> bool:
    """Check whether ``obj`` would modify something only admins may."""
    return any(key in ADMIN_ONLY_MODIFIABLE_USER_PROPERTIES for key in obj)


def is_comment(target: Optional[Mapping[str, Any]]) -> bool:
    """Comments have a parent; discussions do not."""
    return target is not None and 'parentId' in target


def is_discussion(target: Optional[Mapping[str, Any]]) -> bool:
    """Discussions are the roots of threads, with no parent."""
    return target is not None and target.get('parentId') is None


def is_deleted(target: Optional[Mapping[str, Any]]) -> bool:
    """Deleted comments and discussions carry a deletion date."""
    return target is not None and 'dateDeleted' in target


def is_deleted_comment(target: Optional[Mapping[str, Any]]) -> bool:
    """A comment that has been deleted."""
    return is_comment(target) and is_deleted(target)
