"""Tests for data model classes."""

import unittest

from expbackoff.models import BackoffOptions


class TestBackoffOptions(unittest.TestCase):
    """Verify BackoffOptions creation, validation and immutability."""

    def test_create_options_with_defaults(self):
        """Options should be creatable with just the timeout."""
        opts = BackoffOptions(timeout_in_nanosecs=1000)
        self.assertEqual(opts.timeout_in_nanosecs, 1000)
        self.assertIsNone(opts.max_retries)
        self.assertTrue(opts.unlimited)

    def test_create_bounded_options(self):
        """A max_retries value makes the options bounded."""
        opts = BackoffOptions(timeout_in_nanosecs=0, max_retries=0)
        self.assertEqual(opts.max_retries, 0)
        self.assertFalse(opts.unlimited)

    def test_options_are_immutable(self):
        """Frozen dataclass should raise on attribute assignment."""
        opts = BackoffOptions(timeout_in_nanosecs=1000, max_retries=3)
        with self.assertRaises(AttributeError):
            opts.max_retries = 5

    def test_negative_timeout_rejected(self):
        """A negative timeout is invalid."""
        with self.assertRaises(ValueError):
            BackoffOptions(timeout_in_nanosecs=-1)

    def test_negative_max_retries_rejected(self):
        """A negative ceiling is invalid; unlimited is spelled None."""
        with self.assertRaises(ValueError):
            BackoffOptions(timeout_in_nanosecs=10, max_retries=-1)


if __name__ == "__main__":
    unittest.main()
