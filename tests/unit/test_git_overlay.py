"""Tests for git status overlay parsing and badge formatting."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
import unittest
from pathlib import Path

from lazyls.git_status import (
    GIT_STATUS_CHANGED,
    GIT_STATUS_UNTRACKED,
    _iter_porcelain_records,
    collect_git_status_overlay,
    format_git_status_badges,
)
from lazyls.ui_theme import PLAIN_THEME


class PorcelainParsingTests(unittest.TestCase):
    def test_rename_source_token_is_skipped(self) -> None:
        output = "R  new.txt\0old.txt\0?? scratch.txt\0 M pkg/mod.py\0"
        self.assertEqual(
            _iter_porcelain_records(output),
            [("R ", "new.txt"), ("??", "scratch.txt"), (" M", "pkg/mod.py")],
        )

    def test_malformed_tokens_are_ignored(self) -> None:
        self.assertEqual(_iter_porcelain_records("bad\0\0"), [])


class BadgeTests(unittest.TestCase):
    def test_both_badges_when_both_flags_set(self) -> None:
        path = Path("/repo/dir")
        overlay = {path: GIT_STATUS_CHANGED | GIT_STATUS_UNTRACKED}
        self.assertEqual(format_git_status_badges(path, overlay, PLAIN_THEME), " [M][?]")

    def test_clean_paths_have_no_badge(self) -> None:
        self.assertEqual(format_git_status_badges(Path("/repo/x"), {}, PLAIN_THEME), "")


class GitOverlayTests(unittest.TestCase):
    @unittest.skipIf(shutil.which("git") is None, "git is required for git status overlay tests")
    def test_overlay_marks_changed_untracked_and_ancestors(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            subprocess.run(["git", "init", "-q"], cwd=root, check=True)
            (root / "pkg").mkdir()
            (root / "pkg" / "mod.py").write_text("x = 1\n", encoding="utf-8")
            (root / "clean.txt").write_text("clean\n", encoding="utf-8")
            subprocess.run(["git", "add", "."], cwd=root, check=True)
            subprocess.run(
                [
                    "git",
                    "-c",
                    "user.name=lazyls",
                    "-c",
                    "user.email=lazyls@example.com",
                    "-c",
                    "commit.gpgsign=false",
                    "commit",
                    "-q",
                    "-m",
                    "init",
                ],
                cwd=root,
                check=True,
            )
            (root / "pkg" / "mod.py").write_text("x = 2\n", encoding="utf-8")
            (root / "scratch.txt").write_text("new\n", encoding="utf-8")

            overlay = collect_git_status_overlay(root)

            self.assertEqual(overlay.get(root / "pkg" / "mod.py"), GIT_STATUS_CHANGED)
            self.assertEqual(overlay.get(root / "pkg"), GIT_STATUS_CHANGED)
            self.assertEqual(overlay.get(root / "scratch.txt"), GIT_STATUS_UNTRACKED)
            self.assertNotIn(root / "clean.txt", overlay)
            self.assertNotIn(root, overlay)

    def test_non_repository_yields_empty_overlay(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(collect_git_status_overlay(Path(tmp) / "missing"), {})


if __name__ == "__main__":
    unittest.main()
