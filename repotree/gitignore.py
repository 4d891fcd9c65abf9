"""Ignore-file parsing for local tree walks.

Reads a root's ``.gitignore`` into an ordered pattern tuple. Walkers parse it
once per root and thread the same tuple through the whole traversal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .patterns import first_match

logger = logging.getLogger(__name__)

GITIGNORE_FILENAME = ".gitignore"


@dataclass(frozen=True)
class GitignorePatterns:
    """Ordered raw patterns; the first matching pattern wins."""

    patterns: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def first_match(self, relative_path: str, name: str, is_dir: bool) -> str | None:
        return first_match(self.patterns, relative_path, name, is_dir)

    def is_ignored(self, relative_path: str, name: str, is_dir: bool) -> bool:
        return self.first_match(relative_path, name, is_dir) is not None


EMPTY_PATTERNS = GitignorePatterns()


def parse_gitignore(text: str) -> GitignorePatterns:
    """Parse ignore-file text, dropping comments and blank lines.

    One leading ``/`` is stripped from each pattern. Negations are kept as raw
    text and simply never match anything real.
    """
    patterns: list[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("/"):
            line = line[1:]
        if line:
            patterns.append(line)
    return GitignorePatterns(tuple(patterns))


def load_gitignore_patterns(root: Path) -> GitignorePatterns:
    """Return patterns from ``root/.gitignore``.

    A missing or unreadable file yields an empty pattern list.
    """
    ignore_path = root / GITIGNORE_FILENAME
    try:
        text = ignore_path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return EMPTY_PATTERNS
    patterns = parse_gitignore(text)
    logger.debug("loaded %d ignore patterns from %s", len(patterns.patterns), ignore_path)
    return patterns
