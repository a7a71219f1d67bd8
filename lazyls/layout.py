"""Arrange sorted entries into grid, long, and tree row structures.

Layouts only decide shape (which entry lands in which row/column); turning
them into styled text is the renderer's job.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .listing_model.tree import TreeNode
from .listing_model.types import EntryModel

GRID_SEPARATOR_WIDTH = 2


@dataclass(frozen=True)
class GridLayout:
    """Column-major grid: cell ``(row, col)`` holds item ``col * rows + row``."""

    rows: int
    column_widths: tuple[int, ...]

    @property
    def columns(self) -> int:
        return len(self.column_widths)

    def cell_index(self, row: int, column: int) -> int:
        return column * self.rows + row


def grid_layout(
    widths: Sequence[int],
    max_width: int,
    separator_width: int = GRID_SEPARATOR_WIDTH,
) -> GridLayout | None:
    """Pick the most columns whose column-major packing fits ``max_width``.

    Returns ``None`` when a single cell is wider than ``max_width``.
    """
    count = len(widths)
    if count == 0:
        return GridLayout(rows=0, column_widths=())
    if max(widths) > max_width:
        return None

    upper = min(count, max(1, (max_width + separator_width) // (min(widths) + separator_width)))
    for columns in range(upper, 0, -1):
        rows = -(-count // columns)
        if -(-count // rows) != columns:
            # Same shape as a narrower candidate; evaluate it there.
            continue
        column_widths = tuple(max(widths[col * rows : (col + 1) * rows]) for col in range(columns))
        if sum(column_widths) + separator_width * (columns - 1) <= max_width:
            return GridLayout(rows=rows, column_widths=column_widths)
    return None


@dataclass(frozen=True)
class LongRow:
    """Detail fields for one long-format row."""

    entry: EntryModel
    mode: str
    nlink: str
    owner: str
    group: str
    size: int | None
    mtime_ns: int | None


def long_rows(entries: Sequence[EntryModel]) -> tuple[LongRow, ...]:
    """Build long-format rows; unreadable fields become ``?`` placeholders."""
    rows: list[LongRow] = []
    for entry in entries:
        rows.append(
            LongRow(
                entry=entry,
                mode=entry.permissions.filemode() if entry.permissions is not None else "?" * 10,
                nlink=str(entry.nlink) if entry.nlink is not None else "?",
                owner=entry.owner if entry.owner is not None else "?",
                group=entry.group if entry.group is not None else "?",
                size=entry.size,
                mtime_ns=entry.mtime_ns,
            )
        )
    return tuple(rows)


@dataclass(frozen=True)
class TreeRow:
    """One flattened tree row.

    ``guides`` holds, for each ancestor level, whether that ancestor was the
    last child of its parent. Note rows carry ``note`` instead of ``entry``.
    """

    guides: tuple[bool, ...]
    is_last: bool
    entry: EntryModel | None = None
    note: str | None = None

    @property
    def depth(self) -> int:
        return len(self.guides) + 1


def flatten_tree(nodes: Sequence[TreeNode]) -> tuple[TreeRow, ...]:
    """Flatten a node hierarchy depth-first into connector-ready rows."""
    rows: list[TreeRow] = []

    def walk(level: Sequence[TreeNode], guides: tuple[bool, ...]) -> None:
        for idx, node in enumerate(level):
            last = idx == len(level) - 1
            rows.append(TreeRow(guides=guides, is_last=last, entry=node.entry))
            child_guides = guides + (last,)
            if node.error is not None:
                rows.append(TreeRow(guides=child_guides, is_last=True, note=f"<error: {node.error}>"))
                continue
            walk(node.children, child_guides)

    walk(nodes, ())
    return tuple(rows)


__all__ = [
    "GRID_SEPARATOR_WIDTH",
    "GridLayout",
    "grid_layout",
    "LongRow",
    "long_rows",
    "TreeRow",
    "flatten_tree",
]
