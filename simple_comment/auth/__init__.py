"""
Authentication and cross-origin checks for comment API requests.

Intended for use by the HTTP glue, for example:

.. code-block:: python

   from simple_comment.config import load_settings
   from simple_comment.auth import get_user_id, get_allow_origin_headers

   settings = load_settings()

   def handler(event):
       user_id = get_user_id(event['headers'], settings.jwt_secret)
       cors = get_allow_origin_headers(event['headers'],
                                       settings.allow_origin)
       ...

"""

from .cors import (get_allow_origin_headers, get_allowed_origins,
                   is_allowed_referer, normalize_url)
from .credentials import (REALM, get_cookie_token, get_user_id_password,
                          has_basic_scheme, has_bearer_scheme,
                          has_token_cookie)
from .exceptions import AuthenticationError, ExpiredToken, InvalidToken
from .tokens import check_token, get_token_claim, get_user_id, issue_token
