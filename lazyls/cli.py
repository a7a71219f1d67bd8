"""Command-line front door for lazyls.

Parses CLI options on top of config-file defaults into a ``ListingRequest``,
renders every requested path, and maps root-path failures to exit status.
"""

from __future__ import annotations

import argparse
import io
import os
import shutil
import sys
from pathlib import Path

from .config import ListingDefaults, load_listing_defaults
from .listing import render_listing
from .listing_model.types import SORT_KEYS, ListingRequest
from .theme import ListingTheme
from .ui_theme import available_theme_names, resolve_theme

EXIT_ROOT_ERROR = 2
EXIT_INTERRUPTED = 130


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    """Resolve default listing width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def _pass_through_undecodable_names() -> None:
    """Write surrogate-escaped file names back as their original bytes."""
    for stream in (sys.stdout, sys.stderr):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(errors="surrogateescape")


def _use_color(mode: str) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    return sys.stdout.isatty() and "NO_COLOR" not in os.environ


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyls",
        description="List directory contents with colors, icons, and tree/long views.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Files or directories to list. Defaults to '.'.")

    visibility = parser.add_argument_group("visibility")
    visibility.add_argument(
        "-a", "--all", dest="visibility", action="store_const", const="all", help="Include dotfiles."
    )
    visibility.add_argument(
        "-A",
        "--almost-all",
        dest="visibility",
        action="store_const",
        const="almost-all",
        help="Include dotfiles (never '.' or '..').",
    )
    visibility.add_argument(
        "-d", "--dirs", dest="type_filter", action="store_const", const="dirs", help="Show only directories."
    )
    visibility.add_argument(
        "-f", "--files", dest="type_filter", action="store_const", const="files", help="Show only files."
    )

    ordering = parser.add_argument_group("sorting")
    ordering.add_argument("--sort", choices=SORT_KEYS, default=None, help="Sort key (default: name).")
    ordering.add_argument("-t", dest="sort", action="store_const", const="time", help="Sort by time, newest first.")
    ordering.add_argument("-S", dest="sort", action="store_const", const="size", help="Sort by size, largest first.")
    ordering.add_argument("-X", dest="sort", action="store_const", const="extension", help="Sort by extension.")
    ordering.add_argument("-U", dest="sort", action="store_const", const="none", help="Do not sort.")
    ordering.add_argument("-r", "--reverse", action="store_true", help="Reverse the sort order.")
    ordering.add_argument(
        "--sd",
        "--sort-dirs",
        "--group-directories-first",
        dest="grouping",
        action="store_const",
        const="dirs-first",
        help="List directories before files.",
    )
    ordering.add_argument(
        "--sf",
        "--sort-files",
        dest="grouping",
        action="store_const",
        const="files-first",
        help="List files before directories.",
    )

    display = parser.add_argument_group("display")
    display.add_argument(
        "-1", dest="layout", action="store_const", const="one-per-line", help="List one entry per line."
    )
    display.add_argument("-l", "--long", dest="layout", action="store_const", const="long", help="Long format.")
    display.add_argument("--tree", action="store_true", help="Show a recursive tree.")
    display.add_argument(
        "--depth",
        type=_positive_int,
        default=None,
        metavar="DEPTH",
        help="Limit --tree to DEPTH levels (implies --tree).",
    )
    display.add_argument("--report", action="store_true", help="Print a summary of listed entries.")
    display.add_argument(
        "--non-human-readable", action="store_true", help="Show sizes in bytes in long format."
    )
    display.add_argument("-G", "--no-group", action="store_true", help="Hide the group column in long format.")
    display.add_argument("--no-owner", action="store_true", help="Hide the owner column in long format.")
    display.add_argument("--without-icons", action="store_true", help="Do not print icons.")
    display.add_argument("--no-indicator", action="store_true", help="Do not append '/' to directory names.")
    display.add_argument("--gs", "--git-status", dest="git_status", action="store_true", help="Show git status badges.")
    display.add_argument("--light", dest="theme", action="store_const", const="light", help="Use the light theme.")
    display.add_argument("--dark", dest="theme", action="store_const", const="dark", help="Use the dark theme.")
    display.add_argument(
        "--theme",
        dest="theme",
        choices=available_theme_names(),
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    display.add_argument(
        "--color",
        choices=("auto", "always", "never"),
        default="auto",
        help="When to colorize output (default: auto).",
    )
    display.add_argument("--width", type=_positive_int, default=None, help="Display width (default: terminal).")
    display.add_argument("--workers", type=_positive_int, default=None, help="Threads used for stat calls.")
    return parser


def request_from_args(args: argparse.Namespace, defaults: ListingDefaults) -> ListingRequest:
    """Merge parsed flags over config defaults into an immutable request."""
    layout = args.layout or "grid"
    if args.tree or args.depth is not None:
        layout = "tree"

    return ListingRequest(
        visibility=args.visibility or "normal",
        type_filter=args.type_filter or "all",
        sort_key=args.sort or "name",
        reverse=args.reverse,
        grouping=args.grouping or defaults.grouping,
        layout=layout,
        tree_depth=args.depth if layout == "tree" else None,
        human_readable=defaults.human_readable and not args.non_human_readable,
        show_owner=not args.no_owner,
        show_group=not args.no_group,
        show_icons=defaults.icons and not args.without_icons,
        dir_indicator=not args.no_indicator,
        show_report=args.report,
        git_status=args.git_status,
        stat_workers=args.workers or defaults.workers,
    )


def _error_reason(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def main() -> None:
    """Parse CLI arguments and print listings for each requested path.

    Exits with status 2 when any root path could not be read and 130 when
    interrupted between paths.
    """
    args = build_parser().parse_args()
    _pass_through_undecodable_names()
    defaults = load_listing_defaults()
    request = request_from_args(args, defaults)
    palette = resolve_theme(args.theme or defaults.theme, no_color=not _use_color(args.color))
    theme = ListingTheme(palette, show_icons=request.show_icons)
    width = args.width if args.width is not None else _default_render_width()

    paths = [Path(raw) for raw in args.paths] or [Path(".")]
    show_headers = len(paths) > 1
    status = 0
    printed_block = False
    try:
        for path in paths:
            lines, error = render_listing(path, request, theme=theme, width=width)
            if error is not None:
                print(f"lazyls: cannot access '{path}': {_error_reason(error)}", file=sys.stderr)
                status = EXIT_ROOT_ERROR
                continue
            if printed_block:
                sys.stdout.write("\n")
            if show_headers and os.path.isdir(path):
                sys.stdout.write(f"{path}:\n")
            if lines:
                sys.stdout.write("\n".join(lines) + "\n")
            sys.stdout.flush()
            printed_block = True
    except KeyboardInterrupt:
        raise SystemExit(EXIT_INTERRUPTED)

    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
