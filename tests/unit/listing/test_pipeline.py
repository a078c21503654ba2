"""Tests for discovery, mode selection, and degraded-entry handling."""

from __future__ import annotations

import os
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path
from unittest import mock

from lazyls.entry_model import IdentityResolver
from lazyls.errors import ListingError
from lazyls.listing import (
    ListingContext,
    build_long_table,
    collect_entries,
    discover_entries,
    render_listing,
    render_names,
)
from lazyls.options import ListingOptions

FIXED_MTIME_NS = int(datetime(2024, 3, 5, 14, 7, tzinfo=timezone.utc).timestamp()) * 1_000_000_000


def _context(**flags: bool) -> ListingContext:
    return ListingContext(
        options=ListingOptions(**flags),
        utc_offset=timezone.utc,
        identities=IdentityResolver(user_lookup=lambda uid: "alice", group_lookup=lambda gid: "staff"),
    )


def _write(path: Path, size: int, mode: int) -> None:
    path.write_bytes(b"x" * size)
    os.chmod(path, mode)
    os.utime(path, ns=(FIXED_MTIME_NS, FIXED_MTIME_NS))


class DiscoveryTests(unittest.TestCase):
    def test_directories_expand_one_level(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()
            (root / "sub" / "nested.txt").write_text("", encoding="utf-8")
            (root / "top.txt").write_text("", encoding="utf-8")

            names = sorted(entry.name for entry in discover_entries([root]))

            self.assertEqual(names, ["sub", "top.txt"])

    def test_file_arguments_keep_their_literal_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("", encoding="utf-8")

            entries = discover_entries([str(target)])

            self.assertEqual(len(entries), 1)
            self.assertEqual(entries[0].name, str(target))
            self.assertEqual(entries[0].file_name, "file.txt")
            self.assertIsNone(entries[0].metadata)

    def test_missing_argument_is_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"

            with self.assertRaises(ListingError) as caught:
                discover_entries([missing])

            self.assertIn("No such file or directory", caught.exception.reason)
            self.assertEqual(caught.exception.path, missing)

    def test_unreadable_directory_is_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            denied = PermissionError(13, "Permission denied")

            with mock.patch("lazyls.listing.discovery.os.scandir", side_effect=denied):
                with self.assertRaises(ListingError) as caught:
                    discover_entries([root])

            self.assertEqual(caught.exception.reason, f"cannot open directory '{root}': Permission denied")

    def test_argument_that_cannot_be_looked_up_is_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = str(Path(tmp) / "locked" / "f")
            denied = PermissionError(13, "Permission denied")

            with mock.patch("lazyls.listing.discovery.os.lstat", side_effect=denied):
                with self.assertRaises(ListingError) as caught:
                    discover_entries([target])

            self.assertEqual(caught.exception.reason, f"cannot access '{target}': Permission denied")

    def test_multiple_arguments_merge_into_one_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "one").mkdir()
            (root / "two").mkdir()
            (root / "one" / "b").write_text("", encoding="utf-8")
            (root / "two" / "a").write_text("", encoding="utf-8")

            entries = collect_entries([root / "one", root / "two"], ListingOptions())

            self.assertEqual([entry.name for entry in entries], ["a", "b"])


class ShortFormatTests(unittest.TestCase):
    def test_names_are_double_space_separated_with_trailing_newline(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "b").write_text("", encoding="utf-8")
            (root / "a").write_text("", encoding="utf-8")

            self.assertEqual(render_listing([root], _context()), "a  b  \n")

    def test_empty_directory_prints_only_newline(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(render_listing([tmp], _context()), "\n")
            self.assertEqual(render_names([]), "\n")

    def test_short_format_never_loads_metadata(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "file").write_text("", encoding="utf-8")

            with mock.patch("lazyls.listing.pipeline.load_entry_metadata") as load:
                output = render_listing([root], _context())

            load.assert_not_called()
            self.assertEqual(output, "file  \n")

    def test_children_that_cannot_be_stated_are_treated_as_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()
            (root / "f").write_text("", encoding="utf-8")
            real_is_dir = Path.is_dir

            def denied_for_children(path: Path, *args, **kwargs) -> bool:
                if path.parent == root:
                    raise PermissionError(13, "Permission denied", str(path))
                return real_is_dir(path, *args, **kwargs)

            with mock.patch.object(Path, "is_dir", autospec=True, side_effect=denied_for_children):
                grouped = render_listing([root], _context(group_directories_first=True))
                directories_only = render_listing([root], _context(directory=True))

            self.assertEqual(grouped, "f  sub  \n")
            self.assertEqual(directories_only, "\n")

    def test_dangling_link_still_shows_its_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            os.symlink(root / "nowhere", root / "dangling")

            self.assertEqual(render_listing([root], _context()), "dangling  \n")


class LongFormatTests(unittest.TestCase):
    def test_long_rows_are_aligned_per_column(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write(root / "a.txt", 5, 0o644)
            _write(root / "bb.txt", 1200, 0o755)

            output = render_listing([root], _context(long=True))

            self.assertEqual(
                output,
                "rw-r--r-- 1 alice staff    5 Mar 05 14:07 a.txt \n"
                "rwxr-xr-x 1 alice staff 1200 Mar 05 14:07 bb.txt\n",
            )

    def test_human_readable_sizes_right_aligned(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write(root / "a.txt", 5, 0o644)
            _write(root / "b.txt", 1200, 0o644)

            lines = render_listing([root], _context(long=True, human_readable=True)).splitlines()

            self.assertEqual(lines[0], "rw-r--r-- 1 alice staff    5 Mar 05 14:07 a.txt")
            self.assertEqual(lines[1], "rw-r--r-- 1 alice staff 1.2K Mar 05 14:07 b.txt")

    def test_entries_without_metadata_are_omitted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write(root / "real.txt", 3, 0o600)
            os.symlink(root / "nowhere", root / "dangling")

            table = build_long_table(collect_entries([root], ListingOptions(long=True)), _context(long=True))

            self.assertEqual(len(table.rows), 1)
            self.assertEqual(table.rows[0].cells[-1], "real.txt")
            self.assertEqual(table.rows[0].cells[0], "rw-------")

    def test_empty_long_listing_prints_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(render_listing([tmp], _context(long=True)), "")


if __name__ == "__main__":
    unittest.main()
