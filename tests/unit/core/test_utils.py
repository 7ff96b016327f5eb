import unittest

from core import utils
from core.utils import clamp, normalize_text, percentage, round_half_up


class TestUtils(unittest.TestCase):

    def test_round_half_up(self):
        self.assertEqual(round_half_up(17.5), 18)
        self.assertEqual(round_half_up(4.5), 5)
        self.assertEqual(round_half_up(2.25), 2)
        self.assertEqual(round_half_up(0.0), 0)

    def test_clamp(self):
        self.assertEqual(clamp(-3, 0, 10), 0)
        self.assertEqual(clamp(12, 0, 10), 10)
        self.assertEqual(clamp(7, 0, 10), 7)

    def test_percentage(self):
        self.assertEqual(percentage(18, 35), 51)
        self.assertEqual(percentage(5, 0), 0)

    def test_normalize_text(self):
        self.assertEqual(normalize_text("  Web Development "), "web development")

    def test_module_has_no_logger(self):
        self.assertFalse(hasattr(utils, "logger"))


if __name__ == '__main__':
    unittest.main()
