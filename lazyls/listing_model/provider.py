"""Filesystem-info provider backed by ``os`` calls.

The provider is the only place that touches the live filesystem. Both
operations report failures as values so callers can degrade per entry
instead of unwinding the whole listing.
"""

from __future__ import annotations

import grp
import os
import pwd
import stat
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from .types import Directory, EntryKind, RegularFile, Symlink


@dataclass(frozen=True)
class RawAttributes:
    """Attributes observed for one path via ``lstat`` (plus target ``stat``)."""

    kind: EntryKind
    size: int
    mtime_ns: int
    mode: int
    owner: str
    group: str
    nlink: int


@lru_cache(maxsize=256)
def owner_name(uid: int) -> str:
    """Return the user name for ``uid`` or the numeric id when unknown."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


@lru_cache(maxsize=256)
def group_name(gid: int) -> str:
    """Return the group name for ``gid`` or the numeric id when unknown."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


KindHint = RegularFile | Directory | None


def _kind_for_mode(mode: int) -> RegularFile | Directory:
    return Directory() if stat.S_ISDIR(mode) else RegularFile()


def _kind_hint(entry: os.DirEntry) -> KindHint:
    try:
        return Directory() if entry.is_dir(follow_symlinks=False) else RegularFile()
    except OSError:
        return None


class OsFilesystemProvider:
    """Read-only provider for directory listings and entry attributes."""

    def list_children(self, directory: Path) -> tuple[list[tuple[str, KindHint]], Exception | None]:
        """Return ``(name, kind_hint)`` pairs in OS read order, or ``([], error)``.

        The hint comes from the directory read itself (``d_type``), so it is
        available even when the child cannot be stat'ed later.
        """
        children: list[tuple[str, KindHint]] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    children.append((entry.name, _kind_hint(entry)))
        except OSError as exc:
            return [], exc
        return children, None

    def stat(self, path: Path) -> tuple[RawAttributes | None, Exception | None]:
        """Return attributes for ``path`` without following a final symlink."""
        try:
            st = os.lstat(path)
        except OSError as exc:
            return None, exc

        kind: EntryKind
        size = int(st.st_size)
        if stat.S_ISLNK(st.st_mode):
            try:
                target: str | None = os.readlink(path)
            except OSError:
                target = None
            try:
                target_kind: RegularFile | Directory | None = _kind_for_mode(os.stat(path).st_mode)
            except OSError:
                target_kind = None
            kind = Symlink(target=target, target_kind=target_kind)
        elif stat.S_ISDIR(st.st_mode):
            kind = Directory()
            size = 0
        else:
            kind = RegularFile()

        return (
            RawAttributes(
                kind=kind,
                size=size,
                mtime_ns=int(st.st_mtime_ns),
                mode=int(st.st_mode),
                owner=owner_name(st.st_uid),
                group=group_name(st.st_gid),
                nlink=int(st.st_nlink),
            ),
            None,
        )


__all__ = [
    "KindHint",
    "RawAttributes",
    "OsFilesystemProvider",
    "owner_name",
    "group_name",
]
