"""Domain model for directory listings.

This package contains the non-rendering listing pipeline:
- entry/request datatypes with a closed entry-kind variant
- the ``os``-backed filesystem-info provider
- visibility/type filtering and entry collection
- sorting and dirs/files grouping
- immutable tree construction for recursive listings
"""

from __future__ import annotations

from .types import (
    GROUPING_POLICIES,
    LAYOUT_MODES,
    SORT_KEYS,
    TYPE_FILTERS,
    VISIBILITY_MODES,
    Directory,
    EntryKind,
    EntryModel,
    ListingRequest,
    Permissions,
    RegularFile,
    Symlink,
)
from .provider import KindHint, OsFilesystemProvider, RawAttributes
from .collect import build_entry, collect_entries, entry_from_path, matches_type_filter, visible_names
from .sorting import arrange_entries, partition_entries, sort_entries
from .tree import TreeNode, build_tree

__all__ = [
    "VISIBILITY_MODES",
    "TYPE_FILTERS",
    "SORT_KEYS",
    "GROUPING_POLICIES",
    "LAYOUT_MODES",
    "RegularFile",
    "Directory",
    "Symlink",
    "EntryKind",
    "Permissions",
    "EntryModel",
    "ListingRequest",
    "KindHint",
    "RawAttributes",
    "OsFilesystemProvider",
    "visible_names",
    "entry_from_path",
    "build_entry",
    "matches_type_filter",
    "collect_entries",
    "sort_entries",
    "partition_entries",
    "arrange_entries",
    "TreeNode",
    "build_tree",
]
