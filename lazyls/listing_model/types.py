"""Domain datatypes for directory listing entries and listing requests."""

from __future__ import annotations

import stat
from dataclasses import dataclass, replace
from pathlib import Path

VISIBILITY_MODES = ("normal", "almost-all", "all")
TYPE_FILTERS = ("all", "dirs", "files")
SORT_KEYS = ("name", "time", "size", "extension", "none")
GROUPING_POLICIES = ("mixed", "dirs-first", "files-first")
LAYOUT_MODES = ("grid", "one-per-line", "long", "tree")


@dataclass(frozen=True)
class RegularFile:
    """Entry kind for regular files (and anything that is not a dir/link)."""


@dataclass(frozen=True)
class Directory:
    """Entry kind for directories."""


@dataclass(frozen=True)
class Symlink:
    """Entry kind for symbolic links.

    ``target_kind`` is the kind of the resolved target, or ``None`` when the
    link is dead.
    """

    target: str | None = None
    target_kind: RegularFile | Directory | None = None


EntryKind = RegularFile | Directory | Symlink


@dataclass(frozen=True)
class Permissions:
    """Raw ``st_mode`` bits for long-format rendering."""

    mode: int

    def filemode(self) -> str:
        return stat.filemode(self.mode)

    @property
    def is_executable(self) -> bool:
        return bool(self.mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))


@dataclass(frozen=True)
class EntryModel:
    """One directory child with metadata observed from the filesystem.

    ``None`` in ``size``/``mtime_ns``/``permissions``/``owner``/``group``
    marks a value that could not be read; ``error`` says why.
    """

    name: str
    path: Path
    kind: EntryKind
    size: int | None = None
    mtime_ns: int | None = None
    permissions: Permissions | None = None
    owner: str | None = None
    group: str | None = None
    nlink: int | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if not self.name or self.name in {".", ".."}:
            raise ValueError(f"invalid entry name: {self.name!r}")

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def is_degraded(self) -> bool:
        return self.error is not None

    @property
    def is_dir_like(self) -> bool:
        """Directories and symlinks pointing at directories."""
        if isinstance(self.kind, Directory):
            return True
        if isinstance(self.kind, Symlink):
            return isinstance(self.kind.target_kind, Directory)
        return False


@dataclass(frozen=True)
class ListingRequest:
    """Decoded configuration for one listing invocation."""

    visibility: str = "normal"
    type_filter: str = "all"
    sort_key: str = "name"
    reverse: bool = False
    grouping: str = "mixed"
    layout: str = "grid"
    tree_depth: int | None = None
    human_readable: bool = True
    show_owner: bool = True
    show_group: bool = True
    show_icons: bool = True
    dir_indicator: bool = True
    show_report: bool = False
    git_status: bool = False
    stat_workers: int = 1

    def __post_init__(self) -> None:
        for field_name, value, allowed in (
            ("visibility", self.visibility, VISIBILITY_MODES),
            ("type_filter", self.type_filter, TYPE_FILTERS),
            ("sort_key", self.sort_key, SORT_KEYS),
            ("grouping", self.grouping, GROUPING_POLICIES),
            ("layout", self.layout, LAYOUT_MODES),
        ):
            if value not in allowed:
                raise ValueError(f"{field_name} must be one of {', '.join(allowed)}; got {value!r}")
        if self.tree_depth is not None and self.tree_depth < 1:
            raise ValueError("tree_depth must be >= 1")
        if self.stat_workers < 1:
            raise ValueError("stat_workers must be >= 1")

    @property
    def shows_hidden(self) -> bool:
        return self.visibility != "normal"

    def can_descend(self) -> bool:
        """Whether tree recursion may expand one more level."""
        return self.tree_depth is None or self.tree_depth > 1

    def descend(self) -> ListingRequest:
        """Return the request used one tree level deeper."""
        if self.tree_depth is None:
            return self
        return replace(self, tree_depth=self.tree_depth - 1)


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
]
