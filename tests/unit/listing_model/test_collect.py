"""Tests for visibility/type filtering and entry collection."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lazyls.listing_model import (
    Directory,
    EntryModel,
    ListingRequest,
    OsFilesystemProvider,
    RegularFile,
    Symlink,
    collect_entries,
    visible_names,
)
from tests.fake_provider import FakeProvider


class VisibleNamesTests(unittest.TestCase):
    def test_normal_mode_drops_dotfiles_and_dot_entries(self) -> None:
        names = [".", "..", ".hidden", "a", "b"]
        self.assertEqual(visible_names(names, ListingRequest()), ["a", "b"])

    def test_almost_all_and_all_show_dotfiles_but_never_dot_entries(self) -> None:
        names = [".", "..", ".hidden", "a"]
        for visibility in ("almost-all", "all"):
            with self.subTest(visibility=visibility):
                self.assertEqual(
                    visible_names(names, ListingRequest(visibility=visibility)),
                    [".hidden", "a"],
                )


class CollectEntriesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.provider = FakeProvider()
        self.root = self.provider.add_dir("/data")
        self.provider.add_file("/data/a-file", size=10)
        self.provider.add_file("/data/.hidden-file", size=1)
        self.provider.add_dir("/data/sub")
        self.provider.add_link("/data/to-sub", "sub", Directory())
        self.provider.add_link("/data/to-file", "a-file", RegularFile())

    def names(self, entries: tuple[EntryModel, ...]) -> set[str]:
        return {entry.name for entry in entries}

    def test_collect_keeps_read_order_without_sorting(self) -> None:
        entries, error = collect_entries(self.root, ListingRequest(), self.provider)

        self.assertIsNone(error)
        self.assertEqual([entry.name for entry in entries], ["a-file", "sub", "to-sub", "to-file"])

    def test_dirs_filter_counts_symlinks_to_directories(self) -> None:
        entries, _error = collect_entries(self.root, ListingRequest(type_filter="dirs"), self.provider)
        self.assertEqual(self.names(entries), {"sub", "to-sub"})
        self.assertTrue(all(entry.is_dir_like for entry in entries))

    def test_files_filter_excludes_every_directory_like_entry(self) -> None:
        entries, _error = collect_entries(self.root, ListingRequest(type_filter="files"), self.provider)
        self.assertEqual(self.names(entries), {"a-file", "to-file"})

    def test_stat_failure_degrades_entry_instead_of_dropping_it(self) -> None:
        self.provider.fail_stat("/data/locked")

        entries, error = collect_entries(self.root, ListingRequest(), self.provider)

        self.assertIsNone(error)
        locked = next(entry for entry in entries if entry.name == "locked")
        self.assertTrue(locked.is_degraded)
        self.assertIsNone(locked.size)
        self.assertIsNone(locked.mtime_ns)
        self.assertIsNone(locked.permissions)
        self.assertIn("Permission denied", locked.error or "")

    def test_unstattable_directory_keeps_directory_kind_for_filters(self) -> None:
        self.provider.fail_stat("/data/locked-dir", kind_hint=Directory())

        dirs, _error = collect_entries(self.root, ListingRequest(type_filter="dirs"), self.provider)
        files, _error = collect_entries(self.root, ListingRequest(type_filter="files"), self.provider)

        self.assertIn("locked-dir", self.names(dirs))
        self.assertNotIn("locked-dir", self.names(files))
        locked = next(entry for entry in dirs if entry.name == "locked-dir")
        self.assertTrue(locked.is_degraded)
        self.assertIsInstance(locked.kind, Directory)

    def test_unlistable_directory_reports_error(self) -> None:
        self.provider.fail_listing(self.root)

        entries, error = collect_entries(self.root, ListingRequest(), self.provider)

        self.assertEqual(entries, ())
        self.assertIsInstance(error, PermissionError)

    def test_worker_pool_preserves_read_order(self) -> None:
        for idx in range(20):
            self.provider.add_file(f"/data/f{idx:02d}")
        sequential, _ = collect_entries(self.root, ListingRequest(), self.provider)
        pooled, _ = collect_entries(self.root, ListingRequest(stat_workers=4), self.provider)
        self.assertEqual(pooled, sequential)


class OsProviderTests(unittest.TestCase):
    def test_provider_reports_kinds_and_dead_links(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "file.txt").write_text("hello", encoding="utf-8")
            (root / "dir").mkdir()
            os.symlink(root / "dir", root / "dir-link")
            os.symlink(root / "missing", root / "dead-link")

            entries, error = collect_entries(root, ListingRequest(), OsFilesystemProvider())

            self.assertIsNone(error)
            by_name = {entry.name: entry for entry in entries}
            self.assertIsInstance(by_name["file.txt"].kind, RegularFile)
            self.assertEqual(by_name["file.txt"].size, 5)
            self.assertIsInstance(by_name["dir"].kind, Directory)
            self.assertEqual(by_name["dir"].size, 0)
            self.assertIsInstance(by_name["dir-link"].kind, Symlink)
            self.assertTrue(by_name["dir-link"].is_dir_like)
            dead = by_name["dead-link"].kind
            self.assertIsInstance(dead, Symlink)
            self.assertIsNone(dead.target_kind)
            self.assertEqual(dead.target, str(root / "missing"))

    @unittest.skipIf(hasattr(os, "geteuid") and os.geteuid() == 0, "root bypasses directory permissions")
    def test_unsearchable_parent_still_reports_subdirectory_as_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            parent = Path(tmp) / "parent"
            parent.mkdir()
            (parent / "sub").mkdir()
            (parent / "file.txt").write_text("x", encoding="utf-8")
            os.chmod(parent, 0o644)
            try:
                children, error = OsFilesystemProvider().list_children(parent)
                dirs, _error = collect_entries(parent, ListingRequest(type_filter="dirs"), OsFilesystemProvider())
            finally:
                os.chmod(parent, 0o755)

            self.assertIsNone(error)
            self.assertIsInstance(dict(children)["sub"], Directory)
            self.assertEqual([entry.name for entry in dirs], ["sub"])
            self.assertTrue(dirs[0].is_degraded)

    def test_missing_directory_is_reported_not_raised(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            entries, error = collect_entries(Path(tmp) / "nope", ListingRequest(), OsFilesystemProvider())
        self.assertEqual(entries, ())
        self.assertIsInstance(error, FileNotFoundError)


class EntryModelTests(unittest.TestCase):
    def test_dot_names_are_rejected(self) -> None:
        for name in ("", ".", ".."):
            with self.subTest(name=name):
                with self.assertRaises(ValueError):
                    EntryModel(name=name, path=Path("/x"), kind=RegularFile())

    def test_hidden_flag_derives_from_name(self) -> None:
        self.assertTrue(EntryModel(name=".rc", path=Path("/.rc"), kind=RegularFile()).is_hidden)
        self.assertFalse(EntryModel(name="rc", path=Path("/rc"), kind=RegularFile()).is_hidden)


if __name__ == "__main__":
    unittest.main()
