"""Tests for :mod:`simple_comment.auth.credentials`."""

from base64 import b64encode
from unittest import TestCase

from .. import credentials


def basic(plaintext: bytes) -> str:
    return 'Basic ' + b64encode(plaintext).decode('ascii')


class TestParseAuthorizationValue(TestCase):
    """Authorization values are split on the first space only."""

    def test_bearer(self):
        parsed = credentials.parse_authorization_value('Bearer xyz')
        self.assertEqual(parsed.scheme, 'Bearer')
        self.assertEqual(parsed.credentials, 'xyz')

    def test_credentials_with_spaces(self):
        """Everything after the first space is kept verbatim."""
        parsed = credentials.parse_authorization_value('Custom a b  c')
        self.assertEqual(parsed.scheme, 'Custom')
        self.assertEqual(parsed.credentials, 'a b  c')

    def test_no_space(self):
        parsed = credentials.parse_authorization_value('Bearer')
        self.assertEqual(parsed.scheme, 'Bearer')
        self.assertEqual(parsed.credentials, '')


class TestSchemes(TestCase):
    """Tests for :func:`.has_bearer_scheme` and :func:`.has_basic_scheme`."""

    def test_bearer_header(self):
        headers = {'Authorization': 'Bearer xyz'}
        self.assertTrue(credentials.has_bearer_scheme(headers))
        self.assertFalse(credentials.has_basic_scheme(headers))

    def test_basic_header(self):
        headers = {'authorization': basic(b'user:password')}
        self.assertTrue(credentials.has_basic_scheme(headers))
        self.assertFalse(credentials.has_bearer_scheme(headers))

    def test_scheme_is_case_insensitive(self):
        self.assertTrue(
            credentials.has_bearer_scheme({'Authorization': 'bEARER xyz'})
        )

    def test_no_header(self):
        """Neither scheme is present without an Authorization header."""
        for headers in ({}, {'Authorization': None}, {'Cookie': 'a=b'}):
            self.assertFalse(credentials.has_bearer_scheme(headers))
            self.assertFalse(credentials.has_basic_scheme(headers))

    def test_empty_duplicate_header(self):
        """An empty duplicate of the header does not hide the real one."""
        headers = {'authorization': None, 'Authorization': 'Bearer xyz'}
        self.assertTrue(credentials.has_bearer_scheme(headers))
        self.assertFalse(credentials.has_basic_scheme(headers))


class TestBasicCredentials(TestCase):
    """Basic credentials decode to a user and a password."""

    def test_decode(self):
        self.assertEqual(
            credentials.decode_basic_credentials(basic(b'user:password')),
            'user:password'
        )

    def test_parse_splits_on_first_colon(self):
        """A colon in the password survives; one in the user would not."""
        parsed = credentials.parse_basic_credentials('user:pass:word')
        self.assertEqual(parsed.user, 'user')
        self.assertEqual(parsed.password, 'pass:word')

    def test_get_user_id_password(self):
        headers = {'Authorization': basic('jan-user:sécret word'.encode())}
        creds = credentials.get_user_id_password(headers)
        self.assertEqual(creds.user, 'jan-user')
        self.assertEqual(creds.password, 'sécret word')

    def test_missing_header(self):
        """No Authorization header means no credentials, not an error."""
        self.assertIsNone(credentials.get_user_id_password({}))

    def test_unpadded(self):
        """Clients that leave off base64 padding are still understood."""
        headers = {'Authorization': 'Basic dXNlcjpwdw'}
        creds = credentials.get_user_id_password(headers)
        self.assertEqual(creds.user, 'user')
        self.assertEqual(creds.password, 'pw')
        self.assertEqual(
            credentials.decode_basic_credentials('Basic dXNlcjpwdw='),
            'user:pw'
        )

    def test_bad_base64(self):
        """A value that cannot be base64 at all is treated as absent."""
        self.assertIsNone(credentials.decode_basic_credentials('Basic a'))
        headers = {'Authorization': 'Basic a'}
        self.assertIsNone(credentials.get_user_id_password(headers))

    def test_not_utf8(self):
        """Bytes that are not UTF-8 are replaced, not rejected."""
        plaintext = credentials.decode_basic_credentials(
            basic(b'\xff\xfe:\xff')
        )
        self.assertEqual(plaintext, '\ufffd\ufffd:\ufffd')
        creds = credentials.get_user_id_password(
            {'Authorization': basic(b'jan-user:\xffpw')}
        )
        self.assertEqual(creds.user, 'jan-user')
        self.assertEqual(creds.password, '\ufffdpw')

    def test_challenge(self):
        self.assertEqual(
            credentials.basic_challenge_headers(),
            {'WWW-Authenticate': f'Basic realm="{credentials.REALM}"'}
        )


class TestCookieToken(TestCase):
    """The token is read from the ``simple_comment_token`` cookie."""

    def test_first_pair(self):
        headers = {'Cookie': 'simple_comment_token=abc123; other=x'}
        self.assertTrue(credentials.has_token_cookie(headers))
        self.assertEqual(credentials.get_cookie_token(headers), 'abc123')

    def test_later_pair(self):
        headers = {'cookie': 'other=x; simple_comment_token=abc123'}
        self.assertEqual(credentials.get_cookie_token(headers), 'abc123')

    def test_no_cookie_header(self):
        self.assertFalse(credentials.has_token_cookie({}))
        self.assertIsNone(credentials.get_cookie_token({}))

    def test_no_token_pair(self):
        headers = {'Cookie': 'other=x; another=y'}
        self.assertFalse(credentials.has_token_cookie(headers))
        self.assertIsNone(credentials.get_cookie_token(headers))

    def test_empty_token_is_skipped(self):
        headers = {
            'Cookie': 'simple_comment_token=; simple_comment_token_v2=def'
        }
        self.assertEqual(credentials.get_cookie_token(headers), 'def')

    def test_too_many_pairs(self):
        """The token is not looked for beyond the cap on cookie pairs."""
        pairs = [f'c{i}=v' for i in range(credentials.MAX_COOKIE_PAIRS)]
        pairs.append('simple_comment_token=abc123')
        headers = {'Cookie': '; '.join(pairs)}
        self.assertIsNone(credentials.get_cookie_token(headers))
