"""
Turn untrusted request bodies into known-safe shapes.

Bodies arrive URL-encoded. They are parsed into a plain ``dict`` of strings,
then narrowed against a fixed set of keys per entity, so a request can never
smuggle in fields the entity does not have. What survives is coerced to the
entity's declared field types, so ``isAdmin=false`` becomes ``False`` rather
than the truthy string ``'false'``. Narrowing says nothing about
*who* may set a field. ``isAdmin`` and ``isVerified`` are narrowable here,
and callers must check :func:`simple_comment.users.has_admin_only_fields`
before honoring them.
"""

import logging
import re
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
from urllib.parse import unquote

from pydantic import TypeAdapter, ValidationError

from .domain import GenericObj, NewUser, Topic, UpdateUser

logger = logging.getLogger(__name__)

NEW_USER_KEYS: Tuple[str, ...] = (
    'id', 'isAdmin', 'email', 'isVerified', 'name', 'password'
)
UPDATED_USER_KEYS: Tuple[str, ...] = ('isAdmin', 'email', 'isVerified', 'name')
NEW_TOPIC_KEYS: Tuple[str, ...] = ('id', 'title', 'isLocked')
UPDATE_TOPIC_KEYS: Tuple[str, ...] = ('title', 'isLocked')

# Field name to expected type, per entity.
NEW_USER_SCHEMA = TypeAdapter(NewUser)
UPDATE_USER_SCHEMA = TypeAdapter(UpdateUser)
TOPIC_SCHEMA = TypeAdapter(Topic)

_BAD_ESCAPE = re.compile(r'%(?![0-9a-fA-F]{2})')


def _decode(value: Optional[str]) -> str:
    """Percent-decode a key or value; anything undecodable becomes ``''``."""
    if value is None:
        return ''
    if _BAD_ESCAPE.search(value):
        logger.debug('Malformed percent-escape in payload field')
        return ''
    try:
        return unquote(value, errors='strict')
    except UnicodeDecodeError:
        logger.debug('Payload field is not UTF-8')
        return ''


def parse_query(body: str) -> Dict[str, str]:
    """
    Parse a ``key=value&key2=value2`` body.

    Keys and values are decoded independently. A key without a value maps
    to ``''``. When a key repeats, the last value wins.
    """
    if body == '':
        return {}
    parsed: Dict[str, str] = {}
    for item in body.split('&'):
        parts = item.split('=')
        key = parts[0]
        value = parts[1] if len(parts) > 1 else None
        parsed[_decode(key)] = _decode(value)
    return parsed


def narrow_to_fields(obj: Mapping[str, Any],
                     allowed_keys: Iterable[str]) -> Dict[str, Any]:
    """Remove every entry of ``obj`` whose key is not in ``allowed_keys``."""
    allowed = frozenset(allowed_keys)
    return {key: value for key, value in obj.items() if key in allowed}


def coerce_fields(fields: Mapping[str, Any],
                  schema: TypeAdapter) -> Dict[str, Any]:
    """
    Coerce narrowed fields to the types ``schema`` declares for them.

    A field whose value cannot be coerced, such as ``isAdmin=maybe``, is
    dropped; the remaining fields are still returned.
    """
    try:
        return schema.validate_python(dict(fields))
    except ValidationError as e:
        rejected = {error['loc'][0] for error in e.errors() if error['loc']}
        logger.debug('Dropping payload fields of the wrong type: %s',
                     sorted(rejected))
    return schema.validate_python(
        {key: value for key, value in fields.items() if key not in rejected}
    )


def get_new_user_info(body: str) -> NewUser:
    """The fields of a new user, from a request body."""
    return coerce_fields(narrow_to_fields(parse_query(body), NEW_USER_KEYS),
                         NEW_USER_SCHEMA)


def to_updated_user(obj: GenericObj) -> UpdateUser:
    """Narrow an object to the fields that may be updated on a user."""
    return coerce_fields(narrow_to_fields(obj, UPDATED_USER_KEYS),
                         UPDATE_USER_SCHEMA)


def get_updated_user_info(body: str) -> UpdateUser:
    """The fields of a user update, from a request body."""
    return to_updated_user(parse_query(body))


def to_topic(obj: GenericObj) -> Topic:
    """Narrow an object to the fields of a topic."""
    return coerce_fields(narrow_to_fields(obj, NEW_TOPIC_KEYS), TOPIC_SCHEMA)


def get_new_topic_info(body: str) -> Topic:
    """The fields of a new topic, from a request body."""
    return to_topic(parse_query(body))


def get_update_topic_info(body: str) -> Topic:
    """The fields of a topic update, from a request body."""
    fields = narrow_to_fields(parse_query(body), UPDATE_TOPIC_KEYS)
    return coerce_fields(fields, TOPIC_SCHEMA)
