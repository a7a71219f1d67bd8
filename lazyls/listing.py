"""One listing run: collect → filter → sort → lay out → render.

``render_listing`` is the single entry point the CLI uses per root path. It
returns ``(lines, error)``; ``error`` is set only when the root itself could
not be read, in which case no lines are produced.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from .git_status import collect_git_status_overlay
from .layout import flatten_tree, long_rows
from .listing_model.collect import collect_entries, entry_from_attributes
from .listing_model.provider import OsFilesystemProvider
from .listing_model.sorting import arrange_entries
from .listing_model.tree import TreeNode, build_tree
from .listing_model.types import Directory, EntryModel, ListingRequest, Symlink
from .render import ListingRenderer
from .theme import ListingTheme, is_recognized_file

DEFAULT_WIDTH = 80


def _is_listable_directory(entry: EntryModel) -> bool:
    kind = entry.kind
    if isinstance(kind, Symlink):
        return isinstance(kind.target_kind, Directory)
    return isinstance(kind, Directory)


def report_lines(entries: Sequence[EntryModel], path: Path, theme: ListingTheme) -> list[str]:
    """Return the ``--report`` summary block for ``entries``."""
    folders = sum(1 for entry in entries if entry.is_dir_like)
    files = [entry for entry in entries if not entry.is_dir_like]
    recognized = sum(1 for entry in files if is_recognized_file(entry.name))
    paint = theme.paint
    token = theme.palette.report
    return [
        "",
        paint(token, f"Found {len(entries)} contents in directory {path}."),
        "",
        paint(token, f"    Folders            : {folders}"),
        paint(token, f"    Recognized files   : {recognized}"),
        paint(token, f"    Unrecognized files : {len(files) - recognized}"),
    ]


def _tree_entries(nodes: Sequence[TreeNode]) -> list[EntryModel]:
    entries: list[EntryModel] = []
    for node in nodes:
        entries.append(node.entry)
        entries.extend(_tree_entries(node.children))
    return entries


def render_listing(
    path: Path,
    request: ListingRequest,
    provider=None,
    theme: ListingTheme | None = None,
    width: int = DEFAULT_WIDTH,
    git_status_overlay: dict[Path, int] | None = None,
    now: float | None = None,
) -> tuple[list[str], Exception | None]:
    """Render ``path`` according to ``request``.

    A file (or link to a file) renders as that single entry with no
    filtering. A directory runs the full pipeline; tree layout recurses it
    per subdirectory.
    """
    provider = provider or OsFilesystemProvider()
    theme = theme or ListingTheme(show_icons=request.show_icons)

    attributes, error = provider.stat(path)
    if attributes is None:
        return [], error or OSError(f"cannot stat {path}")

    absolute = Path(os.path.abspath(path))
    root_entry = entry_from_attributes(path, absolute.name or str(absolute), attributes)
    is_directory = _is_listable_directory(root_entry)

    if git_status_overlay is None and request.git_status:
        git_status_overlay = collect_git_status_overlay(path if is_directory else absolute.parent)
    renderer = ListingRenderer(theme, request, git_status_overlay=git_status_overlay, now=now)

    if not is_directory:
        if request.layout == "long":
            return renderer.render_long(long_rows([root_entry])), None
        return renderer.render_one_per_line([root_entry]), None

    if request.layout == "tree":
        nodes, error = build_tree(path, request, provider)
        if error is not None:
            return [], error
        lines = renderer.render_tree(flatten_tree(nodes))
        reported = _tree_entries(nodes)
    else:
        entries, error = collect_entries(path, request, provider)
        if error is not None:
            return [], error
        arranged = arrange_entries(entries, request)
        if request.layout == "long":
            lines = renderer.render_long(long_rows(arranged))
        elif request.layout == "one-per-line":
            lines = renderer.render_one_per_line(arranged)
        else:
            lines = renderer.render_grid(arranged, width)
        reported = list(arranged)

    if request.show_report:
        lines.extend(report_lines(reported, path, theme))
    return lines, None


__all__ = [
    "DEFAULT_WIDTH",
    "report_lines",
    "render_listing",
]
