"""Helpers for shaping responses in the HTTP glue."""

import json
from typing import Any, Mapping

from .auth.headers import merge_headers


def add_headers(response: Mapping[str, Any],
                headers: Mapping[str, str]) -> dict:
    """
    Return a copy of ``response`` with ``headers`` merged into its own.

    A structured body is serialized as JSON; any other body is sent as
    plain text. The ``Content-Type`` header is set to match.
    """
    res_headers = merge_headers(response.get('headers'), headers)
    body = response.get('body')
    if not body:
        return {**response, 'headers': res_headers}

    is_json = isinstance(body, (dict, list))
    return {
        **response,
        'body': json.dumps(body) if is_json else body,
        'headers': {
            **res_headers,
            'Content-Type': 'application/json' if is_json else 'text/plain'
        }
    }


def is_error(response: Mapping[str, Any]) -> bool:
    return response['statusCode'] >= 400
