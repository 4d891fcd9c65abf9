"""Tests for approximate ignore-pattern and name-glob matching."""

from __future__ import annotations

import unittest

from repotree.patterns import first_match, is_ignored, keep_file, matches, name_matches_any, name_matches_glob


class IgnorePatternTests(unittest.TestCase):
    def test_directory_only_pattern_matches_directory_but_not_file(self) -> None:
        self.assertTrue(matches("build/", "build", "build", is_dir=True))
        self.assertFalse(matches("build/", "build", "build", is_dir=False))

    def test_directory_only_pattern_matches_nested_directory_by_name(self) -> None:
        self.assertTrue(matches("build/", "src/build", "build", is_dir=True))

    def test_leading_wildcard_matches_suffix_of_relative_path(self) -> None:
        self.assertTrue(matches("*.log", "error.log", "error.log", is_dir=False))
        self.assertTrue(matches("*.log", "logs/error.log", "error.log", is_dir=False))
        self.assertFalse(matches("*.log", "logfile.txt", "logfile.txt", is_dir=False))

    def test_exact_match_on_relative_path_or_name(self) -> None:
        self.assertTrue(matches("docs/readme.md", "docs/readme.md", "readme.md", is_dir=False))
        self.assertTrue(matches("readme.md", "docs/readme.md", "readme.md", is_dir=False))
        self.assertFalse(matches("other.md", "docs/readme.md", "readme.md", is_dir=False))

    def test_segment_pattern_matches_everything_below_prefix(self) -> None:
        self.assertTrue(matches("node_modules", "node_modules/pkg/index.js", "index.js", is_dir=False))
        self.assertFalse(matches("node_modules", "node_modules_backup/x", "x", is_dir=False))

    def test_unsupported_syntax_stays_literal(self) -> None:
        self.assertFalse(matches("**/cache", "a/b/cache", "cache", is_dir=True))
        self.assertFalse(matches("!keep.txt", "keep.txt", "keep.txt", is_dir=False))
        self.assertFalse(matches("file[0-9].txt", "file1.txt", "file1.txt", is_dir=False))

    def test_empty_pattern_never_matches(self) -> None:
        self.assertFalse(matches("", "", "", is_dir=True))

    def test_first_match_returns_earliest_matching_pattern(self) -> None:
        patterns = ["*.txt", "notes.txt", "docs/"]
        self.assertEqual(first_match(patterns, "notes.txt", "notes.txt", False), "*.txt")
        self.assertEqual(first_match(patterns, "docs", "docs", True), "docs/")
        self.assertIsNone(first_match(patterns, "main.py", "main.py", False))
        self.assertTrue(is_ignored(patterns, "docs", "docs", True))


class NameGlobTests(unittest.TestCase):
    def test_star_and_question_mark_wildcards(self) -> None:
        self.assertTrue(name_matches_glob("program.cs", "*.cs"))
        self.assertTrue(name_matches_glob("a.cs", "?.cs"))
        self.assertFalse(name_matches_glob("ab.cs", "?.cs"))
        self.assertFalse(name_matches_glob("program.csx", "*.cs"))

    def test_other_characters_are_literal(self) -> None:
        self.assertTrue(name_matches_glob("[a].cs", "[a].cs"))
        self.assertFalse(name_matches_glob("a.cs", "[a].cs"))
        self.assertFalse(name_matches_glob("aXcs", "a.cs"))

    def test_name_matches_any(self) -> None:
        self.assertTrue(name_matches_any("node_modules", ["*.pyc", "node_*"]))
        self.assertFalse(name_matches_any("src", ["*.pyc", "node_*"]))
        self.assertFalse(name_matches_any("src", []))

    def test_keep_file_never_filters_directories(self) -> None:
        self.assertTrue(keep_file("docs", True, "*.cs"))
        self.assertFalse(keep_file("readme.md", False, "*.cs"))
        self.assertTrue(keep_file("readme.md", False, None))


if __name__ == "__main__":
    unittest.main()
