"""Nerd Font glyph tables for files and folders.

Lookups go exact name first, then lowercase extension, then the per-kind
default, so every entry always gets a glyph.
"""

from __future__ import annotations

from pathlib import PurePath

DEFAULT_FILE_ICON = ""
DEFAULT_FOLDER_ICON = ""
DEAD_LINK_ICON = ""
DEGRADED_ICON = ""

FILE_NAME_ICONS: dict[str, str] = {
    ".gitignore": "",
    ".gitattributes": "",
    ".gitmodules": "",
    ".editorconfig": "",
    ".bashrc": "",
    ".zshrc": "",
    ".profile": "",
    "dockerfile": "",
    "docker-compose.yml": "",
    "makefile": "",
    "license": "",
    "readme": "",
    "readme.md": "",
    "gemfile": "",
    "rakefile": "",
    "pyproject.toml": "",
    "requirements.txt": "",
    "package.json": "",
    "cargo.toml": "",
}

FILE_EXTENSION_ICONS: dict[str, str] = {
    ".py": "",
    ".pyi": "",
    ".ipynb": "",
    ".rb": "",
    ".js": "",
    ".mjs": "",
    ".ts": "",
    ".jsx": "",
    ".tsx": "",
    ".json": "",
    ".md": "",
    ".rst": "",
    ".txt": "",
    ".log": "",
    ".go": "",
    ".rs": "",
    ".c": "",
    ".h": "",
    ".cpp": "",
    ".hpp": "",
    ".java": "",
    ".kt": "",
    ".swift": "",
    ".php": "",
    ".lua": "",
    ".sh": "",
    ".bash": "",
    ".zsh": "",
    ".fish": "",
    ".vim": "",
    ".html": "",
    ".css": "",
    ".scss": "",
    ".yml": "",
    ".yaml": "",
    ".toml": "",
    ".ini": "",
    ".cfg": "",
    ".lock": "",
    ".sql": "",
    ".db": "",
    ".csv": "",
    ".xls": "",
    ".xlsx": "",
    ".pdf": "",
    ".doc": "",
    ".docx": "",
    ".zip": "",
    ".tar": "",
    ".gz": "",
    ".bz2": "",
    ".xz": "",
    ".7z": "",
    ".png": "",
    ".jpg": "",
    ".jpeg": "",
    ".gif": "",
    ".svg": "",
    ".ico": "",
    ".mp3": "",
    ".wav": "",
    ".flac": "",
    ".mp4": "",
    ".mkv": "",
    ".mov": "",
}

FOLDER_NAME_ICONS: dict[str, str] = {
    ".git": "",
    ".github": "",
    ".config": "",
    "config": "",
    "node_modules": "",
    "bin": "",
    "src": "",
    "lib": "",
    "test": "",
    "tests": "",
    "docs": "",
    "doc": "",
}


def known_file_icon(name: str) -> str | None:
    """Return the table glyph for a file name, or ``None`` when unmapped."""
    lowered = name.lower()
    icon = FILE_NAME_ICONS.get(lowered)
    if icon is not None:
        return icon
    suffix = PurePath(lowered).suffix
    if not suffix:
        return None
    return FILE_EXTENSION_ICONS.get(suffix)


def file_icon(name: str) -> str:
    return known_file_icon(name) or DEFAULT_FILE_ICON


def folder_icon(name: str) -> str:
    return FOLDER_NAME_ICONS.get(name.lower(), DEFAULT_FOLDER_ICON)


__all__ = [
    "DEFAULT_FILE_ICON",
    "DEFAULT_FOLDER_ICON",
    "DEAD_LINK_ICON",
    "DEGRADED_ICON",
    "FILE_NAME_ICONS",
    "FILE_EXTENSION_ICONS",
    "FOLDER_NAME_ICONS",
    "known_file_icon",
    "file_icon",
    "folder_icon",
]
