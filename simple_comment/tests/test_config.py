"""Tests for :mod:`simple_comment.config`."""

import os
from unittest import TestCase, mock

from .. import config


class TestFromEnviron(TestCase):
    """Settings are built from environment variables."""

    def test_defaults(self):
        settings = config.from_environ({})
        self.assertEqual(settings.allow_origin, ())
        self.assertIsNone(settings.jwt_secret)
        self.assertEqual(settings.token_lifetime_minutes,
                         config.DEFAULT_TOKEN_LIFETIME_MINUTES)
        self.assertEqual(settings.log_level, 'INFO')

    def test_values(self):
        settings = config.from_environ({
            'ALLOW_ORIGIN': 'https://a.com, https://b.com,,*.c.com/**',
            'JWT_SECRET': 'foosecret',
            'TOKEN_LIFETIME_MINUTES': '30',
            'LOG_LEVEL': 'debug',
        })
        self.assertEqual(settings.allow_origin,
                         ('https://a.com', 'https://b.com', '*.c.com/**'))
        self.assertEqual(settings.jwt_secret, 'foosecret')
        self.assertEqual(settings.token_lifetime_minutes, 30)
        self.assertEqual(settings.log_level, 'DEBUG')

    def test_settings_are_immutable(self):
        settings = config.from_environ({'JWT_SECRET': 'foosecret'})
        with self.assertRaises(AttributeError):
            settings.jwt_secret = 'other'


class TestLoadSettings(TestCase):
    """The environment is read once per process."""

    def setUp(self):
        config.load_settings.cache_clear()

    def tearDown(self):
        config.load_settings.cache_clear()

    @mock.patch(f'{config.__name__}.load_dotenv')
    def test_load_once(self, mock_load_dotenv):
        with mock.patch.dict(os.environ, {'ALLOW_ORIGIN': '*',
                                          'JWT_SECRET': 'foosecret'}):
            settings = config.load_settings()
        with mock.patch.dict(os.environ, {'ALLOW_ORIGIN': 'https://a.com'}):
            self.assertIs(config.load_settings(), settings)
        self.assertEqual(settings.allow_origin, ('*',))
        self.assertEqual(mock_load_dotenv.call_count, 1)
