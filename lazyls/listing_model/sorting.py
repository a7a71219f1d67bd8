"""Ordering and grouping of collected entries.

Every function here is pure: it returns a new tuple and leaves its input
untouched. Reversal inverts the produced order exactly, so a reversed
listing is always the mirror image of the plain one.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import PurePath

from .types import EntryModel, ListingRequest


def _extension_of(entry: EntryModel) -> str:
    return PurePath(entry.name).suffix.lower()


def _ordered(entries: Sequence[EntryModel], sort_key: str) -> list[EntryModel]:
    """Return entries in the natural order for ``sort_key``."""
    if sort_key == "none":
        return list(entries)
    by_name = sorted(entries, key=lambda entry: entry.name)
    if sort_key == "time":
        # Newest first; unreadable mtimes sort as oldest.
        return sorted(by_name, key=lambda entry: entry.mtime_ns or 0, reverse=True)
    if sort_key == "size":
        return sorted(by_name, key=lambda entry: entry.size or 0, reverse=True)
    if sort_key == "extension":
        return sorted(by_name, key=_extension_of)
    return by_name


def sort_entries(
    entries: Sequence[EntryModel],
    sort_key: str = "name",
    reverse: bool = False,
) -> tuple[EntryModel, ...]:
    """Sort ``entries`` by ``sort_key``; ``reverse`` mirrors the result."""
    ordered = _ordered(entries, sort_key)
    if reverse:
        ordered.reverse()
    return tuple(ordered)


def partition_entries(entries: Sequence[EntryModel]) -> tuple[tuple[EntryModel, ...], tuple[EntryModel, ...]]:
    """Split into ``(dir_like, others)`` preserving relative order."""
    dirs = tuple(entry for entry in entries if entry.is_dir_like)
    others = tuple(entry for entry in entries if not entry.is_dir_like)
    return dirs, others


def arrange_entries(entries: Sequence[EntryModel], request: ListingRequest) -> tuple[EntryModel, ...]:
    """Apply the request's grouping policy, then sort each group."""
    if request.grouping == "mixed":
        return sort_entries(entries, request.sort_key, request.reverse)

    dirs, others = partition_entries(entries)
    dirs = sort_entries(dirs, request.sort_key, request.reverse)
    others = sort_entries(others, request.sort_key, request.reverse)
    if request.grouping == "dirs-first":
        return dirs + others
    return others + dirs


__all__ = [
    "sort_entries",
    "partition_entries",
    "arrange_entries",
]
