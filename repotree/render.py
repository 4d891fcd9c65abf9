"""Line rendering for tree visits and summary rows.

Every producer (pre-built tree, incremental walk, local walk) feeds
``render_visits`` so indentation and glyph handling live in one place.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator
from functools import lru_cache
from typing import TextIO

from pygments.lexers import find_lexer_class_for_filename

from .tree_model.traversal import iter_tree_visits
from .tree_model.types import TraversalContext, TreeNode, TreeVisit
from .ui_theme import PLAIN_THEME, UITheme, resolve_theme

INDENT = "    "


def stream_is_interactive(stream: TextIO | None = None) -> bool:
    """Return whether ``stream`` (default stdout) is attached to a terminal."""
    stream = stream if stream is not None else sys.stdout
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def resolve_output_theme(
    theme_name: str | None = None,
    no_color: bool = False,
    stream: TextIO | None = None,
) -> UITheme:
    """Pick the theme once per invocation from the output mode."""
    if no_color or not stream_is_interactive(stream):
        return PLAIN_THEME
    return resolve_theme(theme_name)


@lru_cache(maxsize=4096)
def is_source_file(name: str) -> bool:
    """Return whether Pygments knows a lexer for ``name``."""
    return find_lexer_class_for_filename(name) is not None


def file_color_for(name: str, theme: UITheme) -> str:
    """Return ANSI color used for a file name."""
    if theme is PLAIN_THEME:
        return ""
    if is_source_file(name):
        return theme.tree_file_source
    return theme.tree_file_default


def format_visit(visit: TreeVisit, theme: UITheme = PLAIN_THEME, indent: str = INDENT) -> str:
    """Render one visit as ``indent * depth + glyph + name``."""
    prefix = indent * visit.depth
    reset = theme.reset
    if visit.error is not None:
        return f"{prefix}{theme.tree_error}{theme.error_glyph}<error: {visit.error}>{reset}"
    if visit.is_dir:
        return f"{prefix}{theme.tree_marker}{theme.dir_glyph}{reset}{theme.tree_dir}{visit.name}/{reset}"
    color = file_color_for(visit.name, theme)
    return f"{prefix}{theme.tree_marker}{theme.file_glyph}{reset}{color}{visit.name}{reset}"


def render_visits(
    visits: Iterable[TreeVisit],
    theme: UITheme = PLAIN_THEME,
    indent: str = INDENT,
) -> Iterator[str]:
    for visit in visits:
        yield format_visit(visit, theme, indent)


def render_tree(root: TreeNode, theme: UITheme = PLAIN_THEME, start_depth: int = 0) -> Iterator[str]:
    """Render a pre-built tree; the root row itself is not emitted."""
    return render_visits(iter_tree_visits(root, start_depth), theme)


def format_root_header(name: str, theme: UITheme = PLAIN_THEME) -> str:
    return f"{theme.tree_root}{name}/{theme.reset}"


def format_root_error(name: str, error: str, theme: UITheme = PLAIN_THEME) -> str:
    """Render the row emitted in place of a root whose listing failed."""
    return f"{theme.tree_error}{theme.error_glyph}<error: {name}: {error}>{theme.reset}"


def format_summary(
    context: TraversalContext,
    include_roots: bool = False,
    theme: UITheme = PLAIN_THEME,
    root_label: str = "repositories",
) -> str:
    """Return ``<N> directories, <M> files`` with an optional root prefix."""
    text = f"{context.directory_count} directories, {context.file_count} files"
    if include_roots:
        text = f"{context.root_count} {root_label}, {text}"
    return f"{theme.summary}{text}{theme.reset}"


__all__ = [
    "INDENT",
    "stream_is_interactive",
    "resolve_output_theme",
    "is_source_file",
    "file_color_for",
    "format_visit",
    "render_visits",
    "render_tree",
    "format_root_header",
    "format_root_error",
    "format_summary",
]
