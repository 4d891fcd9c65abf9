"""Tree output themes: ANSI palettes plus branch glyphs.

The plain theme carries no escape codes and no glyphs so piped output is
stable text. Themes only change presentation, never rows or counts.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette and glyph set used by the tree renderer."""

    name: str
    reset: str
    tree_marker: str
    tree_dir: str
    tree_file_source: str
    tree_file_default: str
    tree_root: str
    tree_error: str
    summary: str
    dir_glyph: str
    file_glyph: str
    error_glyph: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file_source="\033[38;5;110m",
    tree_file_default="\033[38;5;252m",
    tree_root="\033[1;38;5;81m",
    tree_error="\033[38;5;203m",
    summary="\033[2;38;5;250m",
    dir_glyph="▾ ",
    file_glyph="· ",
    error_glyph="✗ ",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file_source="\033[38;5;117m",
    tree_file_default="\033[38;5;252m",
    tree_root="\033[1;38;5;45m",
    tree_error="\033[38;5;209m",
    summary="\033[2;38;5;110m",
    dir_glyph="▾ ",
    file_glyph="· ",
    error_glyph="✗ ",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_marker="",
    tree_dir="",
    tree_file_source="",
    tree_file_default="",
    tree_root="",
    tree_error="",
    summary="",
    dir_glyph="",
    file_glyph="",
    error_glyph="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None) -> UITheme:
    """Return concrete theme for requested name, falling back to the default."""
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
