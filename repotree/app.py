"""Top-level tree rendering drivers.

Each driver owns one invocation: it takes a fresh ``TraversalContext``,
feeds a tree producer into the renderer, and finishes with the summary row.
Counts accumulate across the roots of one invocation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from pathlib import Path

from .render import format_root_error, format_root_header, format_summary, render_visits
from .sources import ListingSource
from .tree_model import TraversalContext, TreeVisit, build_flat_tree, iter_tree_visits, walk_incremental, walk_local
from .ui_theme import PLAIN_THEME, UITheme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteOptions:
    """Options for remote listings; ``max_depth <= 0`` means unlimited."""

    max_depth: int = 0
    name_glob: str | None = None
    scope_path: str = ""
    incremental: bool = False


@dataclass(frozen=True)
class LocalOptions:
    max_depth: int = 0
    exclude: tuple[str, ...] = ()
    use_gitignore: bool = False
    show_hidden: bool = True


def _shift(visits: Iterable[TreeVisit], offset: int) -> Iterator[TreeVisit]:
    if offset == 0:
        yield from visits
        return
    for visit in visits:
        yield replace(visit, depth=visit.depth + offset)


def resolve_scope_path(scope_path: str, root_count: int) -> str:
    """Drop a scope path when several roots are requested.

    Scope paths apply to one repository; with several roots the conflict is
    logged as a warning and listing continues unscoped.
    """
    if scope_path and root_count > 1:
        logger.warning("ignoring scope path %r: it only applies to a single repository", scope_path)
        return ""
    return scope_path


def _remote_root_visits(
    source: ListingSource,
    options: RemoteOptions,
    scope_path: str,
    context: TraversalContext,
) -> Iterator[TreeVisit]:
    """Fetch one root's top-level listing eagerly and return its visit stream.

    The initial fetch happens before the first visit is produced so a failing
    root raises here, before any of its rows are emitted.
    """
    if options.incremental:
        top_level = source.list_children(scope_path or "/")
        return walk_incremental(
            top_level,
            source.list_children,
            context,
            max_depth=options.max_depth,
            name_glob=options.name_glob,
            folder_path=scope_path,
        )
    entries = source.list_all()
    root = build_flat_tree(
        entries,
        context,
        root_name=source.name,
        max_depth=options.max_depth,
        name_glob=options.name_glob,
        base_path=scope_path,
    )
    return iter_tree_visits(root)


def render_remote_roots(
    sources: Sequence[ListingSource],
    options: RemoteOptions,
    context: TraversalContext,
    theme: UITheme = PLAIN_THEME,
) -> Iterator[str]:
    """Yield display lines for every root followed by one summary line.

    A root whose listing call fails yields one error row and is skipped;
    the remaining roots still render.
    """
    scope_path = resolve_scope_path(options.scope_path, len(sources))
    multi_root = len(sources) > 1
    for source in sources:
        try:
            visits = _remote_root_visits(source, options, scope_path, context)
        except Exception as exc:
            logger.warning("listing %s failed: %s", source.name, exc)
            yield format_root_error(source.name, str(exc) or type(exc).__name__, theme)
            continue
        context.root_count += 1
        if multi_root:
            yield format_root_header(source.name, theme)
        yield from render_visits(_shift(visits, 1 if multi_root else 0), theme)
    yield format_summary(context, include_roots=True, theme=theme)


def render_local(
    root: Path,
    options: LocalOptions,
    context: TraversalContext,
    theme: UITheme = PLAIN_THEME,
) -> Iterator[str]:
    """Yield the root row, each visible descendant as it is found, then the summary."""
    yield format_root_header(str(root).rstrip("/"), theme)
    visits = walk_local(
        root,
        context,
        max_depth=options.max_depth,
        exclude=options.exclude,
        use_gitignore=options.use_gitignore,
        show_hidden=options.show_hidden,
    )
    yield from render_visits(_shift(visits, 1), theme)
    yield format_summary(context, theme=theme)


__all__ = [
    "RemoteOptions",
    "LocalOptions",
    "resolve_scope_path",
    "render_remote_roots",
    "render_local",
]
