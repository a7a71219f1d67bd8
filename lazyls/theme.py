"""Icon and color lookup for listing entries.

``ListingTheme`` is constructed once per invocation and handed to the
renderer; there is no module-level registry to consult at render time.
"""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers import find_lexer_class_for_filename

from .icons import DEAD_LINK_ICON, DEGRADED_ICON, file_icon, folder_icon, known_file_icon
from .listing_model.types import Directory, EntryModel, RegularFile, Symlink
from .ui_theme import DARK_THEME, UITheme, paint


@lru_cache(maxsize=1024)
def has_source_lexer(name: str) -> bool:
    """Return whether pygments recognizes ``name`` as a source file."""
    return find_lexer_class_for_filename(name) is not None


def is_recognized_file(name: str) -> bool:
    return known_file_icon(name) is not None or has_source_lexer(name)


class ListingTheme:
    """Theme collaborator resolving per-entry glyphs and color tokens."""

    def __init__(self, palette: UITheme | None = None, show_icons: bool = True) -> None:
        self.palette = palette or DARK_THEME
        self.show_icons = show_icons

    def icon_for(self, entry: EntryModel) -> str:
        """Return the entry glyph, or ``""`` when icons are disabled."""
        if not self.show_icons:
            return ""
        if entry.is_degraded:
            return DEGRADED_ICON
        kind = entry.kind
        if isinstance(kind, Symlink):
            if kind.target_kind is None:
                return DEAD_LINK_ICON
            kind = kind.target_kind
        if isinstance(kind, Directory):
            return folder_icon(entry.name)
        return file_icon(entry.name)

    def color_for(self, entry: EntryModel) -> str:
        """Return the color token for the entry name."""
        palette = self.palette
        if entry.is_degraded:
            return palette.degraded
        kind = entry.kind
        if isinstance(kind, Symlink):
            return palette.symlink if kind.target_kind is not None else palette.dead_link
        if isinstance(kind, Directory):
            return palette.dir
        if isinstance(kind, RegularFile) and entry.permissions is not None and entry.permissions.is_executable:
            return palette.executable
        if is_recognized_file(entry.name):
            return palette.recognized_file
        return palette.unrecognized_file

    def paint(self, token: str, text: str) -> str:
        return paint(token, text)


__all__ = [
    "ListingTheme",
    "has_source_lexer",
    "is_recognized_file",
]
