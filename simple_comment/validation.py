"""
Validation rules for user identity and credentials.

Every rule returns a :class:`.ValidationResult` rather than raising, so a
caller can report exactly which rule failed. Rules are combined with
:func:`join_validations`.
"""

import re
from typing import Any, Iterable, Mapping, Optional

from .domain import UserId, ValidationResult
from .passwords import COMMON_PASSWORDS
from .users import UserRecord, as_record, is_email, is_guest_id

USER_ID_MIN_LENGTH = 5
USER_ID_MAX_LENGTH = 36
EMAIL_MAX_LENGTH = 254
DISPLAY_NAME_MAX_LENGTH = 64
PASSWORD_MIN_LENGTH = 7

_USER_ID_CHARACTERS = re.compile(r'^[a-z0-9-]+$')
_CONTROL_CHARACTERS = re.compile(r'[\x00-\x1f\x7f]')


def join_validations(results: Iterable[ValidationResult]) -> ValidationResult:
    """
    Combine several verdicts into one.

    The result is valid only if every verdict is. Otherwise its reason is
    the reasons of every failing verdict, in order, separated by a space.
    """
    reasons = [r.reason or '' for r in results if not r.is_valid]
    if not reasons:
        return ValidationResult.valid()
    return ValidationResult(False, ' '.join(r for r in reasons if r) or None)


def validate_user_id(user_id: Optional[UserId]) -> ValidationResult:
    """User ids are lowercase letters, numbers and dashes."""
    if not user_id:
        return ValidationResult.invalid('User id is missing.')
    if len(user_id) < USER_ID_MIN_LENGTH:
        return ValidationResult.invalid(
            f'User id must be at least {USER_ID_MIN_LENGTH} characters.'
        )
    if len(user_id) > USER_ID_MAX_LENGTH:
        return ValidationResult.invalid(
            f'User id must be at most {USER_ID_MAX_LENGTH} characters.'
        )
    if not _USER_ID_CHARACTERS.match(user_id):
        return ValidationResult.invalid(
            'User id can only contain lowercase letters, numbers and dashes.'
        )
    return ValidationResult.valid()


def validate_email(email: Optional[str]) -> ValidationResult:
    if not email:
        return ValidationResult.invalid('Email is missing.')
    if len(email) > EMAIL_MAX_LENGTH:
        return ValidationResult.invalid(
            f'Email must be at most {EMAIL_MAX_LENGTH} characters.'
        )
    if not is_email(email):
        return ValidationResult.invalid(f"'{email}' is not a valid email.")
    return ValidationResult.valid()


def validate_display_name(name: Optional[str]) -> ValidationResult:
    if not name or not name.strip():
        return ValidationResult.invalid('Display name is missing.')
    if name != name.strip():
        return ValidationResult.invalid(
            'Display name cannot contain leading or trailing spaces.'
        )
    if len(name) > DISPLAY_NAME_MAX_LENGTH:
        return ValidationResult.invalid(
            f'Display name must be at most {DISPLAY_NAME_MAX_LENGTH} '
            'characters.'
        )
    if _CONTROL_CHARACTERS.search(name):
        return ValidationResult.invalid(
            'Display name cannot contain control characters.'
        )
    return ValidationResult.valid()


# Only length and common passwords are checked here; complexity is
# encouraged on the frontend.
def validate_password(password: Optional[str]) -> ValidationResult:
    """Check a plaintext password against the password policy."""
    if not password:
        return ValidationResult.invalid('Password is missing.')
    if password != password.strip():
        return ValidationResult.invalid(
            'Passwords cannot contain leading or trailing spaces'
        )
    if password in COMMON_PASSWORDS:
        return ValidationResult.invalid(f'{password} is too easily guessed')
    if len(password) < PASSWORD_MIN_LENGTH:
        return ValidationResult.invalid(
            f'Passwords must be longer than {PASSWORD_MIN_LENGTH - 1} '
            'characters'
        )
    # No upper bound: the hashing service only considers a bounded prefix.
    return ValidationResult.valid()


def validate_guest_user(guest: Mapping[str, Any],
                        auth_id: Optional[UserId] = None,
                        is_admin: bool = False) -> ValidationResult:
    """
    Check a guest user on behalf of the caller ``auth_id``.

    Only the guest themselves, or an admin, may act on a guest.
    """
    if not auth_id:
        return ValidationResult.invalid('Authorization ID is missing')
    guest_id = guest.get('id')
    if is_admin or guest_id == auth_id:
        auth_check = ValidationResult.valid()
    else:
        auth_check = ValidationResult.invalid(
            f"Guest id '{guest_id}' does not match authorization id "
            f"'{auth_id}'."
        )
    if is_guest_id(guest_id):
        guest_id_check = ValidationResult.valid()
    else:
        guest_id_check = ValidationResult.invalid(
            f"Guest user id '{guest_id}' must be in guest id format."
        )
    return join_validations([
        auth_check,
        validate_user_id(guest_id),
        guest_id_check,
        validate_email(guest.get('email')),
        validate_display_name(guest.get('name')),
    ])


def validate_user(user: UserRecord) -> ValidationResult:
    """
    Check a registered user, with either a stored hash or a new password.

    If these rules change, existing users who no longer satisfy them will
    be unable to update their information until they do.
    """
    user = as_record(user)
    user_id = user.get('id')
    if is_guest_id(user_id):
        not_guest_id_check = ValidationResult.invalid(
            f"User id '{user_id}' must not be a guest id."
        )
    else:
        not_guest_id_check = ValidationResult.valid()
    if user.get('hash'):
        password_check = ValidationResult.valid()
    else:
        password_check = validate_password(user.get('password'))
    return join_validations([
        validate_user_id(user_id),
        not_guest_id_check,
        validate_email(user.get('email')),
        validate_display_name(user.get('name')),
        password_check,
    ])
