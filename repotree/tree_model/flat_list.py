"""Single-pass tree construction from an unordered flat path listing."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..patterns import keep_file
from .types import ListingEntry, TraversalContext, TreeNode

logger = logging.getLogger(__name__)


def normalize_listing_path(path: str) -> str:
    """Strip a single leading separator."""
    return path[1:] if path.startswith("/") else path


def strip_base_path(path: str, base_path: str) -> str | None:
    """Return ``path`` relative to ``base_path`` or ``None`` when outside it.

    Both arguments are already normalized. The base folder itself maps to
    ``""`` so it is discarded like a pseudo-root.
    """
    base = base_path.strip("/")
    if not base:
        return path
    if path == base:
        return ""
    prefix = base + "/"
    if not path.startswith(prefix):
        return None
    return path[len(prefix) :]


def build_flat_tree(
    entries: Iterable[ListingEntry],
    context: TraversalContext,
    root_name: str = "",
    max_depth: int = 0,
    name_glob: str | None = None,
    base_path: str = "",
) -> TreeNode:
    """Build one root tree from ``entries`` and update ``context`` counters.

    Files rejected by ``name_glob`` are skipped entirely. An entry deeper than
    ``max_depth`` segments (when positive) gets no node of its own but still
    creates its ancestor directories down to ``max_depth``. Malformed paths
    (empty, or with empty segments) are skipped rather than raising.
    """
    root = TreeNode(name=root_name, is_dir=True)

    normalized: list[tuple[str, bool]] = []
    for entry in entries:
        path = normalize_listing_path(entry.path)
        if base_path:
            relative = strip_base_path(path, normalize_listing_path(base_path))
            if relative is None:
                continue
            path = relative
        if not path:
            continue
        normalized.append((path, entry.is_dir))
    normalized.sort(key=lambda item: item[0])

    for path, is_dir in normalized:
        segments = path.split("/")
        if any(not segment for segment in segments):
            logger.debug("skipping malformed listing path %r", path)
            continue
        if not keep_file(segments[-1], is_dir, name_glob):
            continue
        if max_depth > 0 and len(segments) > max_depth:
            segments = segments[:max_depth]
            is_dir = True

        current = root
        for segment in segments[:-1]:
            current = _ensure_node(current, segment, True, context)
        _ensure_node(current, segments[-1], is_dir, context)

    return root


def _ensure_node(parent: TreeNode, name: str, is_dir: bool, context: TraversalContext) -> TreeNode:
    """Fetch or create ``name`` under ``parent`` keeping counters consistent."""
    existing = parent.child(name)
    was_file = existing is not None and not existing.is_dir
    node, created = parent.add_child(name, is_dir)
    if created:
        context.count(node.is_dir)
    elif was_file and node.is_dir:
        context.file_count -= 1
        context.directory_count += 1
    return node


__all__ = [
    "normalize_listing_path",
    "strip_base_path",
    "build_flat_tree",
]
