"""Remote listing sources.

A source serves two calls: a bulk listing of the whole hierarchy and a
per-folder listing of immediate children. ``JsonListingSource`` serves both
from an exported REST list response so trees can be rendered offline.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from .tree_model.flat_list import normalize_listing_path
from .tree_model.types import ListingEntry

logger = logging.getLogger(__name__)

_DIRECTORY_FLAG_KEYS = ("isDirectory", "isFolder", "is_dir")


class ListingError(Exception):
    """Raised when a source cannot produce a listing."""


class ListingSource(Protocol):
    name: str

    def list_all(self) -> list[ListingEntry]: ...

    def list_children(self, folder: str) -> list[ListingEntry]: ...


def _entry_from_item(item: object) -> ListingEntry | None:
    if not isinstance(item, dict):
        return None
    path = item.get("path")
    if not isinstance(path, str):
        return None
    is_dir = False
    for key in _DIRECTORY_FLAG_KEYS:
        value = item.get(key)
        if isinstance(value, bool):
            is_dir = value
            break
    else:
        is_dir = item.get("gitObjectType") == "tree"
    return ListingEntry(path=path, is_dir=is_dir)


def entries_from_json(data: object) -> list[ListingEntry]:
    """Extract listing entries from a decoded list response.

    Accepts a bare list or an object wrapping it under ``value`` or ``items``.
    Items without a string ``path`` are skipped.
    """
    items: object = data
    if isinstance(data, dict):
        items = data.get("value", data.get("items"))
    if not isinstance(items, list):
        raise ListingError("listing must be a list or an object with a 'value' list")
    entries: list[ListingEntry] = []
    for item in items:
        entry = _entry_from_item(item)
        if entry is None:
            logger.debug("skipping malformed listing item %r", item)
            continue
        entries.append(entry)
    return entries


def immediate_children(entries: Iterable[ListingEntry], folder: str) -> list[ListingEntry]:
    """Return entries that sit directly under ``folder``."""
    base = normalize_listing_path(folder).strip("/")
    children: list[ListingEntry] = []
    for entry in entries:
        path = normalize_listing_path(entry.path).rstrip("/")
        if not path or path == base:
            continue
        if base:
            if not path.startswith(base + "/"):
                continue
            remainder = path[len(base) + 1 :]
        else:
            remainder = path
        if remainder and "/" not in remainder:
            children.append(entry)
    return children


class JsonListingSource:
    """Listing source backed by one exported JSON list response."""

    def __init__(self, path: Path, name: str | None = None) -> None:
        self.path = path
        self.name = name or path.stem
        self._entries: list[ListingEntry] | None = None

    def _load(self) -> list[ListingEntry]:
        if self._entries is None:
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raise ListingError(f"cannot read listing {self.path}: {exc}") from exc
            self._entries = entries_from_json(data)
            logger.debug("loaded %d entries from %s", len(self._entries), self.path)
        return self._entries

    def list_all(self) -> list[ListingEntry]:
        return list(self._load())

    def list_children(self, folder: str) -> list[ListingEntry]:
        return immediate_children(self._load(), folder)


__all__ = [
    "ListingError",
    "ListingSource",
    "entries_from_json",
    "immediate_children",
    "JsonListingSource",
]
