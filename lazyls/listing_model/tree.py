"""Immutable hierarchy construction for tree listings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .collect import collect_entries
from .sorting import arrange_entries
from .types import Directory, EntryModel, ListingRequest


@dataclass(frozen=True)
class TreeNode:
    """One entry plus its expanded children.

    ``error`` is set when the entry is a directory that could not be listed.
    """

    entry: EntryModel
    children: tuple["TreeNode", ...] = ()
    error: str | None = None

    def depth(self) -> int:
        """Nesting depth of this subtree, counting this node as 1."""
        if not self.children:
            return 1
        return 1 + max(child.depth() for child in self.children)


def build_tree(
    directory: Path,
    request: ListingRequest,
    provider,
) -> tuple[tuple[TreeNode, ...], Exception | None]:
    """Run collect/sort on ``directory`` and expand real subdirectories.

    Only plain directories are expanded; symlinks are listed but never
    followed, so link cycles cannot recurse. Directories at the depth limit
    are listed without children.
    """
    entries, error = collect_entries(directory, request, provider)
    if error is not None:
        return (), error

    nodes: list[TreeNode] = []
    for entry in arrange_entries(entries, request):
        if not isinstance(entry.kind, Directory) or not request.can_descend():
            nodes.append(TreeNode(entry=entry))
            continue
        children, child_error = build_tree(entry.path, request.descend(), provider)
        nodes.append(
            TreeNode(
                entry=entry,
                children=children,
                error=str(child_error) if child_error is not None else None,
            )
        )
    return tuple(nodes), None


__all__ = [
    "TreeNode",
    "build_tree",
]
