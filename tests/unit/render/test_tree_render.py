"""Tests for tree line rendering and output-mode resolution."""

from __future__ import annotations

import io
import unittest
from unittest import mock

from repotree.render import (
    file_color_for,
    format_root_error,
    format_root_header,
    format_summary,
    format_visit,
    is_source_file,
    render_tree,
    render_visits,
    resolve_output_theme,
)
from repotree.tree_model import TraversalContext, TreeNode, TreeVisit
from repotree.ui_theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME, resolve_theme


class FormatVisitTests(unittest.TestCase):
    def test_plain_rows_are_indent_plus_name(self) -> None:
        self.assertEqual(format_visit(TreeVisit(0, "src", True)), "src/")
        self.assertEqual(format_visit(TreeVisit(2, "b.cs", False)), "        b.cs")

    def test_error_rows_are_indented_at_their_depth(self) -> None:
        self.assertEqual(format_visit(TreeVisit(1, "", False, error="timeout")), "    <error: timeout>")

    def test_console_rows_use_glyphs_and_colors_without_changing_layout(self) -> None:
        row = format_visit(TreeVisit(1, "src", True), DEFAULT_THEME)

        self.assertTrue(row.startswith("    "))
        self.assertIn(DEFAULT_THEME.dir_glyph, row)
        self.assertIn(DEFAULT_THEME.tree_dir, row)
        self.assertIn("src/", row)

    def test_render_visits_preserves_order(self) -> None:
        visits = [TreeVisit(0, "a", True), TreeVisit(1, "b.txt", False), TreeVisit(0, "c.txt", False)]

        self.assertEqual(list(render_visits(visits)), ["a/", "    b.txt", "c.txt"])

    def test_render_tree_skips_root_row(self) -> None:
        root = TreeNode(name="repo", is_dir=True)
        docs, _created = root.add_child("docs", True)
        docs.add_child("index.md", False)
        root.add_child("LICENSE", False)

        self.assertEqual(list(render_tree(root)), ["docs/", "    index.md", "LICENSE"])


class SummaryTests(unittest.TestCase):
    def test_summary_without_roots(self) -> None:
        context = TraversalContext(directory_count=2, file_count=3, root_count=1)

        self.assertEqual(format_summary(context), "2 directories, 3 files")

    def test_summary_with_root_prefix(self) -> None:
        context = TraversalContext(directory_count=2, file_count=3, root_count=4)

        self.assertEqual(format_summary(context, include_roots=True), "4 repositories, 2 directories, 3 files")

    def test_root_rows(self) -> None:
        self.assertEqual(format_root_header("repo"), "repo/")
        self.assertEqual(format_root_error("repo", "not found"), "<error: repo: not found>")


class OutputModeTests(unittest.TestCase):
    def test_non_tty_stream_resolves_plain_theme(self) -> None:
        self.assertIs(resolve_output_theme("ocean", stream=io.StringIO()), PLAIN_THEME)

    def test_no_color_resolves_plain_theme_even_on_tty(self) -> None:
        with mock.patch("repotree.render.stream_is_interactive", return_value=True):
            self.assertIs(resolve_output_theme(None, no_color=True), PLAIN_THEME)

    def test_tty_resolves_requested_theme(self) -> None:
        with mock.patch("repotree.render.stream_is_interactive", return_value=True):
            self.assertIs(resolve_output_theme("ocean"), OCEAN_THEME)
            self.assertIs(resolve_output_theme("unknown"), DEFAULT_THEME)


class ResolveThemeTests(unittest.TestCase):
    def test_named_themes_resolve_case_insensitively(self) -> None:
        self.assertIs(resolve_theme(" Ocean "), OCEAN_THEME)
        self.assertIs(resolve_theme("DEFAULT"), DEFAULT_THEME)

    def test_missing_or_unknown_names_fall_back_to_default(self) -> None:
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("neon"), DEFAULT_THEME)


class FileColorTests(unittest.TestCase):
    def test_known_source_files_get_source_color(self) -> None:
        self.assertTrue(is_source_file("main.py"))
        self.assertEqual(file_color_for("main.py", DEFAULT_THEME), DEFAULT_THEME.tree_file_source)

    def test_unknown_files_get_default_color(self) -> None:
        self.assertFalse(is_source_file("archive.zzqx"))
        self.assertEqual(file_color_for("archive.zzqx", DEFAULT_THEME), DEFAULT_THEME.tree_file_default)

    def test_filename_only_lexers_and_odd_names_are_looked_up_directly(self) -> None:
        self.assertTrue(is_source_file("Makefile"))
        self.assertFalse(is_source_file("notes[draft].zzqx"))

    def test_plain_theme_never_colors(self) -> None:
        self.assertEqual(file_color_for("main.py", PLAIN_THEME), "")


if __name__ == "__main__":
    unittest.main()
