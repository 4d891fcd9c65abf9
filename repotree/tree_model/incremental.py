"""Bounded-depth tree assembly from per-folder listing calls.

Traversal is sequential depth-first with at most one outstanding fetch. A
directory row is yielded before its children are fetched, so callers can
render while the walk is still in progress.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Iterator

from ..patterns import keep_file
from .flat_list import normalize_listing_path
from .types import ListingEntry, TraversalContext, TreeNode, TreeVisit

logger = logging.getLogger(__name__)

FetchChildren = Callable[[str], Iterable[ListingEntry]]


def entry_name(path: str) -> str:
    """Return the final segment of a listing path."""
    return path.rstrip("/").rsplit("/", 1)[-1]


def prepare_level(
    entries: Iterable[ListingEntry],
    folder_path: str,
    name_glob: str | None = None,
) -> list[ListingEntry]:
    """Drop the folder's own echo, filter files, and sort one listing level."""
    folder = normalize_listing_path(folder_path).rstrip("/")
    kept: list[ListingEntry] = []
    for entry in entries:
        path = normalize_listing_path(entry.path).rstrip("/")
        if not path or path == folder:
            continue
        if not keep_file(entry_name(path), entry.is_dir, name_glob):
            continue
        kept.append(entry)
    kept.sort(key=lambda item: (not item.is_dir, os.path.normcase(item.path)))
    return kept


def walk_incremental(
    entries: Iterable[ListingEntry],
    fetch_children: FetchChildren,
    context: TraversalContext,
    max_depth: int = 0,
    name_glob: str | None = None,
    folder_path: str = "",
    root: TreeNode | None = None,
) -> Iterator[TreeVisit]:
    """Yield visits for an already-fetched level and everything below it.

    Top-level entries are level 1 and are yielded at depth 0. A directory at
    level ``L`` is expanded only when ``max_depth <= 0`` or ``L < max_depth``.
    A failing fetch yields one inline error visit beneath that directory and
    the walk moves on to the next sibling.
    """
    if root is None:
        root = TreeNode(name="", is_dir=True)
    level_entries = prepare_level(entries, folder_path, name_glob)
    stack: list[tuple[int, ListingEntry, TreeNode]] = [(1, entry, root) for entry in reversed(level_entries)]

    while stack:
        level, entry, parent = stack.pop()
        name = entry_name(entry.path)
        node, created = parent.add_child(name, entry.is_dir)
        if not created:
            continue
        context.count(node.is_dir)
        yield TreeVisit(depth=level - 1, name=name, is_dir=node.is_dir, path=node.path)

        if not node.is_dir or (max_depth > 0 and level >= max_depth):
            continue
        logger.debug("fetching children of %s", entry.path)
        try:
            children = prepare_level(fetch_children(entry.path), entry.path, name_glob)
        except Exception as exc:
            logger.debug("listing %s failed: %s", entry.path, exc)
            yield TreeVisit(depth=level, name="", is_dir=False, path=node.path, error=str(exc) or type(exc).__name__)
            continue
        stack.extend((level + 1, child, node) for child in reversed(children))


__all__ = [
    "FetchChildren",
    "entry_name",
    "prepare_level",
    "walk_incremental",
]
