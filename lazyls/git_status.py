"""Git status overlay for listed entries.

Collects changed/untracked flags per path (and their ancestor directories)
from ``git status --porcelain`` so renderers can append ``[M]``/``[?]``
badges. Any git failure yields an empty overlay.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from .ui_theme import DARK_THEME, UITheme, paint

GIT_STATUS_CHANGED = 1
GIT_STATUS_UNTRACKED = 2


def _merge_flags(overlay: dict[Path, int], target: Path, flags: int) -> None:
    overlay[target] = overlay.get(target, 0) | flags


def _run_git(cwd: Path, args: list[str], timeout_seconds: float) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(cwd), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError):
        return None


def _resolve_repo_root(path: Path, timeout_seconds: float) -> Path | None:
    proc = _run_git(path, ["rev-parse", "--show-toplevel"], timeout_seconds)
    if proc is None or proc.returncode != 0:
        return None
    top = proc.stdout.strip()
    if not top:
        return None
    return Path(top).resolve()


def _iter_porcelain_records(output: str) -> list[tuple[str, str]]:
    records: list[tuple[str, str]] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token:
            continue
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        records.append((status, token[3:]))

        # Renames/copies carry the source path as an extra -z token.
        if "R" in status or "C" in status:
            index += 1

    return records


def collect_git_status_overlay(directory: Path, timeout_seconds: float = 1.0) -> dict[Path, int]:
    """Return ``{resolved_path: flags}`` for changes at or under ``directory``."""
    try:
        directory = directory.resolve()
    except OSError:
        return {}
    repo_root = _resolve_repo_root(directory, timeout_seconds)
    if repo_root is None:
        return {}

    status_proc = _run_git(
        repo_root,
        ["status", "--porcelain=v1", "-z", "--untracked-files=normal"],
        timeout_seconds,
    )
    if status_proc is None or status_proc.returncode != 0:
        return {}

    overlay: dict[Path, int] = {}
    for status, rel_path in _iter_porcelain_records(status_proc.stdout):
        if not rel_path or status == "!!":
            continue

        flags = GIT_STATUS_UNTRACKED if status == "??" else GIT_STATUS_CHANGED
        target = repo_root / rel_path.rstrip("/")
        if not target.is_relative_to(directory):
            continue

        _merge_flags(overlay, target, flags)
        parent = target.parent
        while parent.is_relative_to(directory) and parent != directory:
            _merge_flags(overlay, parent, flags)
            parent = parent.parent

    return overlay


def git_flags_for(path: Path, git_status_overlay: dict[Path, int] | None) -> int:
    if not git_status_overlay:
        return 0
    flags = git_status_overlay.get(path, 0)
    if flags:
        return flags
    try:
        return git_status_overlay.get(path.parent.resolve() / path.name, 0)
    except OSError:
        return 0


def format_git_status_badges(
    path: Path,
    git_status_overlay: dict[Path, int] | None,
    theme: UITheme | None = None,
) -> str:
    """Return `` [M][?]`` style badges for ``path`` or ``""`` when clean."""
    flags = git_flags_for(path, git_status_overlay)
    if flags == 0:
        return ""

    active_theme = theme or DARK_THEME
    badges: list[str] = []
    if flags & GIT_STATUS_CHANGED:
        badges.append(paint(active_theme.git_changed, "[M]"))
    if flags & GIT_STATUS_UNTRACKED:
        badges.append(paint(active_theme.git_untracked, "[?]"))
    return " " + "".join(badges)


__all__ = [
    "GIT_STATUS_CHANGED",
    "GIT_STATUS_UNTRACKED",
    "collect_git_status_overlay",
    "git_flags_for",
    "format_git_status_badges",
]
