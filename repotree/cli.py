"""Command-line front door for repotree.

Parses CLI options, merges them over persisted config defaults, and
dispatches to the local or remote tree drivers.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .app import LocalOptions, RemoteOptions, render_local, render_remote_roots
from .render import resolve_output_theme
from .sources import JsonListingSource
from .tree_model import TraversalContext
from .ui_theme import available_theme_names


def _nonnegative_int(value: str) -> int:
    """argparse type for depth values where ``0`` means unlimited."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repotree",
        description="Print directory trees for local folders or exported repository listings.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    local = subparsers.add_parser("local", help="Walk a local directory.")
    local.add_argument("path", nargs="?", default=None, help="Directory to walk. Defaults to current directory.")
    local.add_argument("-L", "--max-depth", type=_nonnegative_int, default=None, help="Max depth (0 = unlimited).")
    local.add_argument(
        "-I",
        "--exclude",
        action="append",
        default=None,
        metavar="GLOB",
        help="Skip entries whose name matches GLOB (repeatable).",
    )
    local.add_argument(
        "--gitignore",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Apply the root .gitignore rules.",
    )
    local.add_argument("--no-hidden", action="store_true", help="Skip dot-files and dot-directories.")

    remote = subparsers.add_parser("remote", help="Render exported repository listings.")
    remote.add_argument("listings", nargs="+", metavar="LISTING", help="JSON listing export, one per repository.")
    remote.add_argument(
        "--incremental",
        action="store_true",
        help="Fetch folder by folder instead of using the bulk listing.",
    )
    remote.add_argument("-L", "--max-depth", type=_nonnegative_int, default=None, help="Max depth (0 = unlimited).")
    remote.add_argument("-P", "--pattern", default=None, metavar="GLOB", help="Only list files matching GLOB.")
    remote.add_argument("--scope", default="", metavar="PATH", help="Folder to list from (single repository only).")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the requested tree.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used for ``local``.
    """
    args = _build_parser().parse_args()
    _configure_logging(args.verbose)

    settings = config.load_config()
    no_color = args.no_color or config.load_no_color(settings)
    theme = resolve_output_theme(args.theme or config.load_theme_name(settings), no_color=no_color, stream=sys.stdout)
    max_depth = args.max_depth if args.max_depth is not None else config.load_max_depth(settings)
    context = TraversalContext()

    if args.command == "local":
        if default_path is None:
            default_path = Path.cwd()
        root = Path(args.path or default_path)
        if not root.is_dir():
            raise SystemExit(f"Directory not found: {root}")
        options = LocalOptions(
            max_depth=max_depth,
            exclude=tuple(args.exclude) if args.exclude is not None else config.load_exclude_globs(settings),
            use_gitignore=args.gitignore if args.gitignore is not None else config.load_use_gitignore(settings),
            show_hidden=not args.no_hidden,
        )
        lines = render_local(root, options, context, theme)
    else:
        sources = []
        for raw in args.listings:
            listing_path = Path(raw)
            if not listing_path.is_file():
                raise SystemExit(f"Listing not found: {listing_path}")
            sources.append(JsonListingSource(listing_path))
        options = RemoteOptions(
            max_depth=max_depth,
            name_glob=args.pattern,
            scope_path=args.scope,
            incremental=args.incremental,
        )
        lines = render_remote_roots(sources, options, context, theme)

    for line in lines:
        sys.stdout.write(line + "\n")


if __name__ == "__main__":
    main()
