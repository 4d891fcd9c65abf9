"""Local filesystem walk with exclude globs and ``.gitignore`` rules.

Rows are yielded as they are discovered (no full tree is materialized).
Unreadable directories are skipped without an error row.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from ..gitignore import EMPTY_PATTERNS, GitignorePatterns, load_gitignore_patterns
from ..patterns import name_matches_any, sort_key
from .types import TraversalContext, TreeVisit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child."""

    name: str
    path: Path
    relative_path: str
    is_dir: bool


def maybe_gitignore_patterns(root: Path, use_gitignore: bool) -> GitignorePatterns:
    """Return the root's ignore patterns when enabled."""
    if not use_gitignore:
        return EMPTY_PATTERNS
    return load_gitignore_patterns(root)


def list_directory_children(
    directory: Path,
    relative_dir: str = "",
    show_hidden: bool = True,
    exclude: Iterable[str] = (),
    ignore_patterns: GitignorePatterns = EMPTY_PATTERNS,
) -> tuple[list[DirectoryChild], Exception | None]:
    """List visible children of ``directory`` in display order.

    Returns ``(children, scan_error)``. ``relative_dir`` is the directory's
    path relative to the walk root and prefixes each child's relative path.
    """
    exclude = tuple(exclude)
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                if exclude and name_matches_any(name, exclude):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                relative_path = f"{relative_dir}/{name}" if relative_dir else name
                if ignore_patterns and ignore_patterns.is_ignored(relative_path, name, is_dir):
                    continue
                children.append(
                    DirectoryChild(
                        name=name,
                        path=Path(child.path),
                        relative_path=relative_path,
                        is_dir=is_dir,
                    )
                )
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: sort_key(item.name, item.is_dir))
    return children, None


def walk_local(
    root: Path,
    context: TraversalContext,
    max_depth: int = 0,
    exclude: Iterable[str] = (),
    use_gitignore: bool = False,
    show_hidden: bool = True,
) -> Iterator[TreeVisit]:
    """Yield visits for everything under ``root`` depth-first.

    Children of ``root`` are yielded at depth 0. The root's ignore file is
    read once and applied at every depth using paths relative to ``root``.
    Counters on ``context`` advance with each yielded row.
    """
    exclude = tuple(exclude)
    ignore_patterns = maybe_gitignore_patterns(root, use_gitignore)

    def scan(directory: Path, relative_dir: str) -> list[DirectoryChild]:
        children, scan_error = list_directory_children(
            directory,
            relative_dir,
            show_hidden=show_hidden,
            exclude=exclude,
            ignore_patterns=ignore_patterns,
        )
        if scan_error is not None:
            logger.debug("skipping unreadable directory %s: %s", directory, scan_error)
        return children

    stack: list[tuple[int, DirectoryChild]] = [(1, child) for child in reversed(scan(root, ""))]
    while stack:
        level, child = stack.pop()
        context.count(child.is_dir)
        yield TreeVisit(depth=level - 1, name=child.name, is_dir=child.is_dir, path=child.relative_path)
        if not child.is_dir or (max_depth > 0 and level >= max_depth):
            continue
        grandchildren = scan(child.path, child.relative_path)
        stack.extend((level + 1, grandchild) for grandchild in reversed(grandchildren))


def count_local_tree(
    root: Path,
    max_depth: int = 0,
    exclude: Iterable[str] = (),
    use_gitignore: bool = False,
    show_hidden: bool = True,
) -> TraversalContext:
    """Count directories and files under ``root`` with the same filters as ``walk_local``."""
    context = TraversalContext()
    for _visit in walk_local(root, context, max_depth, exclude, use_gitignore, show_hidden):
        pass
    return context


__all__ = [
    "DirectoryChild",
    "maybe_gitignore_patterns",
    "list_directory_children",
    "walk_local",
    "count_local_tree",
]
