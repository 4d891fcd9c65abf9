"""Approximate ignore-pattern and name-glob matching.

The ignore rules are a loose subset of gitignore: no ``**``, no ``!``
negation, no bracket classes, and no anchoring differences between nested
ignore files.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from functools import lru_cache


def matches(pattern: str, relative_path: str, name: str, is_dir: bool) -> bool:
    """Return whether one ignore ``pattern`` matches a path."""
    if not pattern:
        return False
    if pattern == relative_path or pattern == name:
        return True
    if pattern.endswith("/"):
        if not is_dir:
            return False
        bare = pattern[:-1]
        return relative_path == bare or name == bare
    if pattern.startswith("*"):
        return relative_path.endswith(pattern[1:])
    return relative_path == pattern or relative_path.startswith(pattern + "/") or name == pattern


def first_match(patterns: Iterable[str], relative_path: str, name: str, is_dir: bool) -> str | None:
    """Return the first pattern in ``patterns`` that matches, else ``None``."""
    for pattern in patterns:
        if matches(pattern, relative_path, name, is_dir):
            return pattern
    return None


def is_ignored(patterns: Iterable[str], relative_path: str, name: str, is_dir: bool) -> bool:
    return first_match(patterns, relative_path, name, is_dir) is not None


@lru_cache(maxsize=256)
def _glob_regex(glob: str) -> re.Pattern[str]:
    """Compile a ``?``/``*`` glob; every other character is literal."""
    parts: list[str] = []
    for ch in os.path.normcase(glob):
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.DOTALL)


def name_matches_glob(name: str, glob: str) -> bool:
    """Return whether ``name`` matches ``glob`` under host case rules."""
    return _glob_regex(glob).fullmatch(os.path.normcase(name)) is not None


def name_matches_any(name: str, globs: Iterable[str]) -> bool:
    return any(name_matches_glob(name, glob) for glob in globs)


def keep_file(name: str, is_dir: bool, name_glob: str | None) -> bool:
    """Apply the file-name filter: directories always pass."""
    if is_dir or not name_glob:
        return True
    return name_matches_glob(name, name_glob)


def sort_key(name: str, is_dir: bool) -> tuple[bool, str]:
    """Directories first, then ordinal name order under host case rules."""
    return (not is_dir, os.path.normcase(name))


__all__ = [
    "matches",
    "first_match",
    "is_ignored",
    "name_matches_glob",
    "name_matches_any",
    "keep_file",
    "sort_key",
]
