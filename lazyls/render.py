"""Turn laid-out listings into styled text lines.

``ListingRenderer`` receives its theme collaborator at construction time and
never looks colors or icons up anywhere else. Missing icon/color mappings
fall back to theme defaults, so rendering never fails on an unknown entry.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from datetime import datetime

from .ansi import display_width, pad_ansi
from .git_status import format_git_status_badges
from .layout import GRID_SEPARATOR_WIDTH, LongRow, TreeRow, grid_layout
from .listing_model.types import Directory, EntryModel, ListingRequest, Symlink
from .theme import ListingTheme

SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB")
SIZE_MEDIUM_BYTES = 128 * 1024**2
SIZE_LARGE_BYTES = 512 * 1024**2
HOUR_SECONDS = 60 * 60
DAY_SECONDS = 24 * HOUR_SECONDS

TREE_BRANCH = "├── "
TREE_LAST_BRANCH = "└── "
TREE_PIPE = "│   "
TREE_SPACE = "    "
LINK_ARROW = "⇒"


def human_size(size: int) -> str:
    """Format ``size`` with base-1024 suffixes (``4.0 KiB``)."""
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in SIZE_UNITS[1:]:
        value /= 1024
        if value < 1024 or unit == SIZE_UNITS[-1]:
            return f"{value:.1f} {unit}"
    return f"{size} B"


def format_size(size: int | None, human_readable: bool = True) -> str:
    if size is None:
        return "?"
    return human_size(size) if human_readable else str(size)


def format_mtime(mtime_ns: int | None) -> str:
    """Format like ``Tue Nov  7 02:02:02 2017``; ``?`` when unreadable."""
    if mtime_ns is None:
        return "?"
    return datetime.fromtimestamp(mtime_ns / 1_000_000_000).ctime()


class ListingRenderer:
    """Render names, grids, long rows, and tree rows for one invocation."""

    def __init__(
        self,
        theme: ListingTheme,
        request: ListingRequest,
        git_status_overlay: dict | None = None,
        now: float | None = None,
    ) -> None:
        self.theme = theme
        self.palette = theme.palette
        self.request = request
        self.git_status_overlay = git_status_overlay
        self.now = time.time() if now is None else now

    def format_name(self, entry: EntryModel) -> str:
        """Return icon + name (+ ``/``, + git badges) styled for ``entry``."""
        name = entry.name
        if self.request.dir_indicator and isinstance(entry.kind, Directory):
            name += "/"
        icon = self.theme.icon_for(entry)
        label = f"{icon} {name}" if icon else name
        text = self.theme.paint(self.theme.color_for(entry), label)
        if self.git_status_overlay:
            text += format_git_status_badges(entry.path, self.git_status_overlay, theme=self.palette)
        return text

    def render_one_per_line(self, entries: Sequence[EntryModel]) -> list[str]:
        return [self.format_name(entry) for entry in entries]

    def render_grid(self, entries: Sequence[EntryModel], max_width: int) -> list[str]:
        """Render entries column-major; falls back to one per line if too wide."""
        cells = self.render_one_per_line(entries)
        layout = grid_layout([display_width(cell) for cell in cells], max_width)
        if layout is None:
            return cells

        lines: list[str] = []
        for row in range(layout.rows):
            parts: list[str] = []
            for column, column_width in enumerate(layout.column_widths):
                idx = layout.cell_index(row, column)
                if idx >= len(cells):
                    break
                next_idx = layout.cell_index(row, column + 1)
                if column + 1 < layout.columns and next_idx < len(cells):
                    parts.append(pad_ansi(cells[idx], column_width + GRID_SEPARATOR_WIDTH))
                else:
                    parts.append(cells[idx])
            lines.append("".join(parts))
        return lines

    def _paint_mode(self, mode: str) -> str:
        palette = self.palette
        out: list[str] = []
        for idx, ch in enumerate(mode):
            if idx == 0:
                token = palette.dir if ch == "d" else palette.symlink if ch == "l" else palette.no_access
            elif ch == "r":
                token = palette.read
            elif ch == "w":
                token = palette.write
            elif ch in "xsStT":
                token = palette.execute
            else:
                token = palette.no_access
            out.append(self.theme.paint(token, ch))
        return "".join(out)

    def _size_token(self, size: int | None) -> str:
        if size is None:
            return self.palette.degraded
        if size >= SIZE_LARGE_BYTES:
            return self.palette.file_large
        if size >= SIZE_MEDIUM_BYTES:
            return self.palette.file_medium
        return self.palette.file_small

    def _time_token(self, mtime_ns: int | None) -> str:
        if mtime_ns is None:
            return self.palette.degraded
        age = self.now - mtime_ns / 1_000_000_000
        if age < HOUR_SECONDS:
            return self.palette.hour_old
        if age < DAY_SECONDS:
            return self.palette.day_old
        return self.palette.no_modifier

    def _link_suffix(self, entry: EntryModel) -> str:
        kind = entry.kind
        if not isinstance(kind, Symlink):
            return ""
        target = kind.target if kind.target is not None else "?"
        if kind.target_kind is None:
            return f" {LINK_ARROW} " + self.theme.paint(self.palette.dead_link, f"{target} [Dead link]")
        return f" {LINK_ARROW} " + self.theme.paint(self.palette.symlink, target)

    def render_long(self, rows: Sequence[LongRow]) -> list[str]:
        """Render aligned ``mode nlink owner group size mtime name`` rows."""
        if not rows:
            return []
        request = self.request
        sizes = [format_size(row.size, request.human_readable) for row in rows]
        nlink_width = max(len(row.nlink) for row in rows)
        owner_width = max(display_width(row.owner) for row in rows)
        group_width = max(display_width(row.group) for row in rows)
        size_width = max(len(size) for size in sizes)

        lines: list[str] = []
        for row, size_text in zip(rows, sizes):
            columns = [self._paint_mode(row.mode), row.nlink.rjust(nlink_width)]
            if request.show_owner:
                columns.append(self.theme.paint(self.palette.user, pad_ansi(row.owner, owner_width)))
            if request.show_group:
                columns.append(self.theme.paint(self.palette.group, pad_ansi(row.group, group_width)))
            columns.append(self.theme.paint(self._size_token(row.size), size_text.rjust(size_width)))
            columns.append(self.theme.paint(self._time_token(row.mtime_ns), format_mtime(row.mtime_ns)))
            name = self.format_name(row.entry) + self._link_suffix(row.entry)
            if row.entry.is_degraded:
                name += " " + self.theme.paint(self.palette.error, f"({row.entry.error})")
            columns.append(name)
            lines.append("  ".join(columns))
        return lines

    def render_tree(self, rows: Sequence[TreeRow]) -> list[str]:
        """Render flattened tree rows with ``├──``/``└──`` connectors."""
        lines: list[str] = []
        for row in rows:
            guides = "".join(TREE_SPACE if last else TREE_PIPE for last in row.guides)
            branch = TREE_LAST_BRANCH if row.is_last else TREE_BRANCH
            prefix = self.theme.paint(self.palette.tree, guides + branch)
            if row.entry is not None:
                lines.append(prefix + self.format_name(row.entry))
            else:
                lines.append(prefix + self.theme.paint(self.palette.error, row.note or ""))
        return lines


__all__ = [
    "TREE_BRANCH",
    "TREE_LAST_BRANCH",
    "TREE_PIPE",
    "TREE_SPACE",
    "human_size",
    "format_size",
    "format_mtime",
    "ListingRenderer",
]
