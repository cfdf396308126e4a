"""Tests for :mod:`simple_comment.auth.headers`."""

from unittest import TestCase

from .. import headers


class TestHeaderAccess(TestCase):
    """Header names are matched without regard to case."""

    def test_get_value_any_case(self):
        """The value is found whatever the case of the stored name."""
        hdrs = {'authorization': 'Bearer xyz', 'X-Thing': 'foo'}
        self.assertEqual(headers.get_header_value(hdrs, 'Authorization'),
                         'Bearer xyz')
        self.assertEqual(headers.get_header_value(hdrs, 'x-thing'), 'foo')
        self.assertEqual(headers.get_header_name(hdrs, 'X-THING'), 'X-Thing')

    def test_missing_header(self):
        """An absent header has no name and no value."""
        self.assertIsNone(headers.get_header_value({}, 'Origin'))
        self.assertIsNone(headers.get_header_name({'Cookie': 'a=b'}, 'Origin'))
        self.assertFalse(headers.has_header({}, 'Origin'))

    def test_present_without_value(self):
        """A header whose value is ``None`` is not considered present."""
        hdrs = {'Origin': None}
        self.assertFalse(headers.has_header(hdrs, 'origin'))
        self.assertEqual(headers.get_header_name(hdrs, 'origin'), 'Origin')
        self.assertIsNone(headers.get_header_value(hdrs, 'origin'))

    def test_duplicate_names(self):
        """A name with a value wins over one without, whatever the order."""
        hdrs = {'authorization': None, 'Authorization': 'Bearer x'}
        self.assertEqual(headers.get_header_name(hdrs, 'authorization'),
                         'Authorization')
        self.assertEqual(headers.get_header_value(hdrs, 'AUTHORIZATION'),
                         'Bearer x')
        self.assertTrue(headers.has_header(hdrs, 'authorization'))

    def test_merge_headers(self):
        """Merging layers the second mapping over the first, without
        modifying either."""
        base = {'Vary': 'Accept', 'X-A': '1'}
        extra = {'Vary': 'Origin'}
        merged = headers.merge_headers(base, extra)
        self.assertEqual(merged, {'Vary': 'Origin', 'X-A': '1'})
        self.assertEqual(base, {'Vary': 'Accept', 'X-A': '1'})
        self.assertEqual(headers.merge_headers(None, None), {})
