"""Position-relative navigation tests for ``next_name``."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from dircycle.cycler import next_name
from dircycle.ordering import newer_than
from fs_fixtures import touch


class NextNameTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.a = touch(self.root / "a.txt", 1_000)
        self.b = touch(self.root / "b.txt", 2_000)
        self.c = touch(self.root / "c.txt", 3_000)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_steps_forward_and_backward_from_middle(self) -> None:
        self.assertEqual(next_name(self.b, 1, self.root), self.c)
        self.assertEqual(next_name(self.b, -1, self.root), self.a)

    def test_stepping_before_first_file_returns_none(self) -> None:
        self.assertIsNone(next_name(self.b, -2, self.root))
        self.assertIsNone(next_name(self.a, -1, self.root))

    def test_first_file_is_reachable(self) -> None:
        self.assertEqual(next_name(self.c, -2, self.root), self.a)
        self.assertEqual(next_name(self.a, 0, self.root), self.a)

    def test_target_past_end_returns_none(self) -> None:
        self.assertIsNone(next_name(self.b, 2, self.root))
        self.assertIsNone(next_name(self.c, 1, self.root))

    def test_zero_increment_returns_current(self) -> None:
        self.assertEqual(next_name(self.b, 0, self.root), self.b)

    def test_unknown_or_missing_current_file_returns_none(self) -> None:
        outside = self.root / "missing.txt"
        for increment in (-1, 0, 1, 2):
            self.assertIsNone(next_name(outside, increment, self.root))
            self.assertIsNone(next_name(None, increment, self.root))

    def test_current_file_excluded_by_filter_returns_none(self) -> None:
        touch(self.root / "d.log", 4_000)

        self.assertIsNone(next_name(self.root / "d.log", -1, self.root, r"\.txt$"))
        self.assertEqual(next_name(self.b, 1, self.root, r"\.txt$"), self.c)

    def test_empty_directory_returns_none(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsNone(next_name(self.b, 1, Path(tmp)))

    def test_predicate_controls_direction(self) -> None:
        self.assertEqual(next_name(self.b, 1, self.root, predicate=newer_than), self.a)

    def test_relative_current_file_matches_absolute_entry(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            result = next_name("b.txt", 1, ".")
        finally:
            os.chdir(previous_cwd)

        self.assertEqual(result, self.c)


if __name__ == "__main__":
    unittest.main()
