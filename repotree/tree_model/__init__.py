"""Tree construction for remote listings and local directories.

Defines ``TreeNode`` and the producers that turn listings into
display-ordered ``TreeVisit`` rows:
- flat-list builder for bulk listings
- incremental walker for per-folder listings
- local filesystem walker with ignore rules
"""

from __future__ import annotations

from .flat_list import build_flat_tree, normalize_listing_path, strip_base_path
from .incremental import FetchChildren, entry_name, prepare_level, walk_incremental
from .local import DirectoryChild, count_local_tree, list_directory_children, walk_local
from .traversal import iter_tree_visits, sorted_children
from .types import ListingEntry, TraversalContext, TreeNode, TreeVisit

__all__ = [
    "TreeNode",
    "TraversalContext",
    "ListingEntry",
    "TreeVisit",
    "build_flat_tree",
    "normalize_listing_path",
    "strip_base_path",
    "FetchChildren",
    "entry_name",
    "prepare_level",
    "walk_incremental",
    "DirectoryChild",
    "list_directory_children",
    "walk_local",
    "count_local_tree",
    "iter_tree_visits",
    "sorted_children",
]
