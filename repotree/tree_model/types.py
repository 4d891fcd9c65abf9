"""Tree datatypes shared by builders, walkers, and the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """One file or directory with children keyed by unique name.

    ``children`` keeps insertion order; producers sort at emit time.
    """

    name: str
    is_dir: bool
    path: str = ""
    children: dict[str, TreeNode] = field(default_factory=dict)

    def child(self, name: str) -> TreeNode | None:
        return self.children.get(name)

    def add_child(self, name: str, is_dir: bool) -> tuple[TreeNode, bool]:
        """Return ``(node, created)`` for ``name``, creating it when missing.

        An existing file node is upgraded when ``is_dir`` is true; an existing
        directory is never downgraded.
        """
        existing = self.children.get(name)
        if existing is not None:
            if is_dir and not existing.is_dir:
                existing.is_dir = True
            return existing, False
        path = f"{self.path}/{name}" if self.path else name
        node = TreeNode(name=name, is_dir=is_dir, path=path)
        self.children[name] = node
        return node, True


@dataclass
class TraversalContext:
    """Counters for one top-level invocation; create a fresh one per call."""

    directory_count: int = 0
    file_count: int = 0
    root_count: int = 0

    def count(self, is_dir: bool) -> None:
        if is_dir:
            self.directory_count += 1
        else:
            self.file_count += 1


@dataclass(frozen=True)
class ListingEntry:
    """One path reported by a listing source."""

    path: str
    is_dir: bool


@dataclass(frozen=True)
class TreeVisit:
    """One row produced by a tree producer, in display order.

    ``error`` is set for synthetic inline-error rows; ``name`` is then empty.
    """

    depth: int
    name: str
    is_dir: bool
    path: str = ""
    error: str | None = None


__all__ = [
    "TreeNode",
    "TraversalContext",
    "ListingEntry",
    "TreeVisit",
]
