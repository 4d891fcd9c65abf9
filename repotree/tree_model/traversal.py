"""Turn a pre-built tree into display-ordered visits."""

from __future__ import annotations

from collections.abc import Iterator

from ..patterns import sort_key
from .types import TreeNode, TreeVisit


def sorted_children(node: TreeNode) -> list[TreeNode]:
    return sorted(node.children.values(), key=lambda child: sort_key(child.name, child.is_dir))


def iter_tree_visits(root: TreeNode, start_depth: int = 0) -> Iterator[TreeVisit]:
    """Yield ``root``'s descendants depth-first; ``root`` itself is not yielded."""
    stack: list[tuple[int, TreeNode]] = [(start_depth, child) for child in reversed(sorted_children(root))]
    while stack:
        depth, node = stack.pop()
        yield TreeVisit(depth=depth, name=node.name, is_dir=node.is_dir, path=node.path)
        if node.children:
            stack.extend((depth + 1, child) for child in reversed(sorted_children(node)))


__all__ = ["sorted_children", "iter_tree_visits"]
