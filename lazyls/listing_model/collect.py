"""Directory collection: visibility/type filtering and entry construction."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .provider import KindHint, RawAttributes
from .types import EntryModel, ListingRequest, Permissions, RegularFile

_ALWAYS_EXCLUDED = frozenset({".", ".."})


def visible_names(names: Iterable[str], request: ListingRequest) -> list[str]:
    """Drop ``.``/``..`` always and dot-names unless hidden entries are shown."""
    show_hidden = request.shows_hidden
    return [
        name
        for name in names
        if name and name not in _ALWAYS_EXCLUDED and (show_hidden or not name.startswith("."))
    ]


def entry_from_attributes(
    path: Path,
    name: str,
    attributes: RawAttributes | None,
    error: Exception | None = None,
    kind_hint: KindHint = None,
) -> EntryModel:
    """Build one entry from provider output; missing attributes degrade it.

    A degraded entry keeps the kind reported by the directory read when one
    is known, so type filters and grouping still place it correctly.
    """
    if attributes is None:
        return EntryModel(
            name=name,
            path=path,
            kind=kind_hint if kind_hint is not None else RegularFile(),
            error=str(error) if error is not None else "unreadable",
        )
    return EntryModel(
        name=name,
        path=path,
        kind=attributes.kind,
        size=attributes.size,
        mtime_ns=attributes.mtime_ns,
        permissions=Permissions(attributes.mode),
        owner=attributes.owner,
        group=attributes.group,
        nlink=attributes.nlink,
    )


def entry_from_path(path: Path, provider, name: str | None = None, kind_hint: KindHint = None) -> EntryModel:
    """Stat ``path`` through ``provider``; failures yield a degraded entry."""
    attributes, error = provider.stat(path)
    return entry_from_attributes(path, name or path.name or str(path), attributes, error, kind_hint)


def build_entry(directory: Path, name: str, provider, kind_hint: KindHint = None) -> EntryModel:
    """Stat ``directory / name`` through ``provider`` and build its entry."""
    return entry_from_path(directory / name, provider, name=name, kind_hint=kind_hint)


def matches_type_filter(entry: EntryModel, request: ListingRequest) -> bool:
    if request.type_filter == "dirs":
        return entry.is_dir_like
    if request.type_filter == "files":
        return not entry.is_dir_like
    return True


def collect_entries(
    directory: Path,
    request: ListingRequest,
    provider,
) -> tuple[tuple[EntryModel, ...], Exception | None]:
    """List, filter, and stat one directory's children in read order.

    Returns ``(entries, error)``. ``error`` is set only when the directory
    itself cannot be listed; per-entry stat failures degrade that entry.
    """
    children, error = provider.list_children(directory)
    if error is not None:
        return (), error

    hints = dict(children)
    names = visible_names((name for name, _hint in children), request)
    if request.stat_workers > 1 and len(names) > 1:
        with ThreadPoolExecutor(max_workers=request.stat_workers) as pool:
            entries = list(pool.map(lambda name: build_entry(directory, name, provider, hints[name]), names))
    else:
        entries = [build_entry(directory, name, provider, hints[name]) for name in names]

    return tuple(entry for entry in entries if matches_type_filter(entry, request)), None


__all__ = [
    "visible_names",
    "entry_from_attributes",
    "entry_from_path",
    "build_entry",
    "matches_type_filter",
    "collect_entries",
]
