#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Segmentation tests for lookup.EntryReader: short and long entries, blank
line policies, comments, include splicing and entry provenance.
"""
from __future__ import annotations

import gzip
import re
import sys
import tempfile
import unittest
from pathlib import Path
from typing import List

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lookup.core.errors import EntryFileNotFoundError, EntryIOError, PushbackOverflowError  # noqa: E402
from lookup.core.models import Entry  # noqa: E402
from lookup.parsing.config import ReaderConfig  # noqa: E402
from lookup.parsing.entry_reader import EntryReader  # noqa: E402


# --------------------------------------------------------------------------- #
#  Base class                                                                 #
# --------------------------------------------------------------------------- #
class ReaderTestCase(unittest.TestCase):
    """Temporary directory plus helpers to write files and read entries."""

    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.dir = Path(self._td.name)

    def tearDown(self) -> None:
        self._td.cleanup()

    def write(self, name: str, *lines: str) -> Path:
        path = self.dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("".join(ln + "\n" for ln in lines), encoding="utf-8")
        return path

    def entries(self, path: Path, **cfg) -> List[Entry]:
        with EntryReader(path, ReaderConfig.build(**cfg)) as reader:
            return list(reader)


# --------------------------------------------------------------------------- #
#  1. Short entries                                                           #
# --------------------------------------------------------------------------- #
class ShortEntryTests(ReaderTestCase):
    def test_one_blank_line_separates_paragraphs(self) -> None:
        root = self.write("root", "a1", "a2", "", "b1")
        got = self.entries(root)
        self.assertEqual([e.body for e in got], ["a1\na2\n", "b1\n"])
        self.assertEqual([e.first_line for e in got], ["a1", "b1"])
        self.assertEqual([e.line_number for e in got], [1, 4])
        self.assertTrue(all(e.short_entry for e in got))
        self.assertTrue(all(e.filename == str(root) for e in got))

    def test_leading_and_repeated_blank_lines_are_skipped(self) -> None:
        root = self.write("root", "", "", "a", "", "", "", "b", "")
        got = self.entries(root)
        self.assertEqual([(e.body, e.line_number) for e in got], [("a\n", 3), ("b\n", 7)])

    def test_whitespace_only_line_is_blank(self) -> None:
        root = self.write("root", "a", "   \t", "b")
        self.assertEqual([e.body for e in self.entries(root)], ["a\n", "b\n"])

    def test_two_blank_lines_mode_keeps_single_blank_in_body(self) -> None:
        root = self.write("root", "a1", "", "a2", "", "", "b1")
        got = self.entries(root, two_blank_lines=True)
        self.assertEqual([e.body for e in got], ["a1\n\na2\n", "b1\n"])
        self.assertEqual([e.line_number for e in got], [1, 6])

    def test_two_blank_lines_mode_drops_trailing_single_blank(self) -> None:
        root = self.write("root", "a", "")
        self.assertEqual([e.body for e in self.entries(root, two_blank_lines=True)], ["a\n"])

    def test_default_mode_splits_on_every_blank(self) -> None:
        root = self.write("root", "a1", "", "a2", "", "", "b1")
        self.assertEqual([e.body for e in self.entries(root)], ["a1\n", "a2\n", "b1\n"])

    def test_crlf_line_endings(self) -> None:
        root = self.dir / "root"
        root.write_bytes(b"a\r\nb\r\n\r\nc\r\n")
        self.assertEqual([e.body for e in self.entries(root)], ["a\nb\n", "c\n"])

    def test_empty_file_has_no_entries(self) -> None:
        root = self.write("root")
        with EntryReader(root) as reader:
            self.assertIsNone(reader.get_entry())
            self.assertIsNone(reader.get_entry())


# --------------------------------------------------------------------------- #
#  2. Comments                                                                #
# --------------------------------------------------------------------------- #
class CommentTests(ReaderTestCase):
    def test_comment_is_not_a_separator(self) -> None:
        root = self.write("root", "p1", "% a comment", "p2")
        got = self.entries(root)
        self.assertEqual(len(got), 1)
        self.assertEqual(got[0].body, "p1\np2\n")

    def test_comment_between_blanks_makes_them_consecutive(self) -> None:
        root = self.write("root", "a", "", "% c", "", "b")
        got = self.entries(root, two_blank_lines=True)
        self.assertEqual([e.body for e in got], ["a\n", "b\n"])

    def test_partial_match_is_content(self) -> None:
        root = self.write("root", "text % not a comment")
        self.assertEqual(self.entries(root)[0].body, "text % not a comment\n")

    def test_entry_after_leading_comment_keeps_physical_line(self) -> None:
        root = self.write("root", "% header", "first")
        got = self.entries(root)
        self.assertEqual((got[0].first_line, got[0].line_number), ("first", 2))

    def test_empty_comment_pattern_disables_filtering(self) -> None:
        root = self.write("root", "p1", "% kept", "p2")
        self.assertEqual(self.entries(root, comment_re="")[0].body, "p1\n% kept\np2\n")


# --------------------------------------------------------------------------- #
#  3. Long entries                                                            #
# --------------------------------------------------------------------------- #
class LongEntryTests(ReaderTestCase):
    def test_delimited_entry(self) -> None:
        root = self.write("root", ">entry My description", "body1", "body2", "<entry", "after")
        first, second = self.entries(root)
        self.assertFalse(first.short_entry)
        self.assertEqual(first.first_line, "My description")
        self.assertEqual(first.body, "My description\nbody1\nbody2\n")
        self.assertNotIn("<entry", first.body)
        self.assertEqual(first.description(None), "My description")
        self.assertEqual((second.body, second.line_number, second.short_entry), ("after\n", 5, True))

    def test_next_start_line_ends_previous_entry(self) -> None:
        root = self.write("root", ">entry One", "x", ">entry Two", "y")
        one, two = self.entries(root)
        self.assertEqual(one.body, "One\nx\n")
        self.assertEqual((two.first_line, two.line_number, two.body), ("Two", 3, "Two\ny\n"))

    def test_blank_lines_belong_to_long_entry(self) -> None:
        root = self.write("root", ">entry T", "a", "", "b", "<entry")
        (entry,) = self.entries(root)
        self.assertEqual(entry.body, "T\na\n\nb\n")

    def test_marker_without_description(self) -> None:
        root = self.write("root", ">entry", "body", "<entry")
        (entry,) = self.entries(root)
        self.assertEqual(entry.first_line, "")
        self.assertEqual(entry.body, "\nbody\n")

    def test_unterminated_entry_runs_to_end_of_input(self) -> None:
        root = self.write("root", ">entry Last", "tail")
        (entry,) = self.entries(root)
        self.assertEqual(entry.body, "Last\ntail\n")

    def test_custom_markers(self) -> None:
        root = self.write("root", "@@ Title here", "text", "@@end", "short")
        got = self.entries(root, entry_start_re=r"^@@ (.*)$", entry_stop_re=r"^@@end")
        self.assertEqual([(e.first_line, e.short_entry) for e in got], [("Title here", False), ("short", True)])
        self.assertEqual(got[0].body, "Title here\ntext\n")


# --------------------------------------------------------------------------- #
#  4. Includes                                                                #
# --------------------------------------------------------------------------- #
class IncludeTests(ReaderTestCase):
    def test_include_is_spliced_with_provenance(self) -> None:
        a = self.write("A.txt", "line1", "", r"\include{B.txt}", "", "line2")
        b = self.write("B.txt", "lineB")
        got = self.entries(a)
        self.assertEqual(
            [(e.body, e.filename, e.line_number) for e in got],
            [("line1\n", str(a), 1), ("lineB\n", str(b), 1), ("line2\n", str(a), 5)],
        )

    def test_paragraph_is_closed_at_file_boundaries(self) -> None:
        a = self.write("A.txt", "line1", r"\include{B.txt}", "line2")
        b = self.write("B.txt", "lineB")
        got = self.entries(a)
        self.assertEqual(
            [(e.body, e.filename, e.line_number) for e in got],
            [("line1\n", str(a), 1), ("lineB\n", str(b), 1), ("line2\n", str(a), 3)],
        )

    def test_line_numbers_restart_in_included_file(self) -> None:
        a = self.write("A.txt", "a", "", "", r"\include{B.txt}")
        self.write("B.txt", "", "", "b1")
        got = self.entries(a)
        self.assertEqual([(e.first_line, e.line_number) for e in got], [("a", 1), ("b1", 3)])

    def test_long_entry_closed_by_include(self) -> None:
        a = self.write("A.txt", ">entry L", "l1", r"\include{inc.txt}")
        inc = self.write("inc.txt", "i1")
        long_entry, short_entry = self.entries(a)
        self.assertEqual(long_entry.body, "L\nl1\n")
        self.assertEqual((short_entry.body, short_entry.filename, short_entry.line_number), ("i1\n", str(inc), 1))

    def test_long_entry_closed_by_end_of_included_file(self) -> None:
        a = self.write("A.txt", r"\include{inc.txt}", "after")
        self.write("inc.txt", ">entry X", "x1")
        long_entry, short_entry = self.entries(a)
        self.assertEqual(long_entry.body, "X\nx1\n")
        self.assertEqual((short_entry.body, short_entry.filename, short_entry.line_number), ("after\n", str(a), 2))

    def test_empty_include_does_not_split_paragraph(self) -> None:
        a = self.write("A.txt", "p1", r"\include{empty.txt}", "p2")
        self.write("empty.txt")
        self.assertEqual([e.body for e in self.entries(a)], ["p1\np2\n"])

    def test_nested_relative_includes(self) -> None:
        top = self.write("top.txt", r"\include{sub/mid.txt}")
        self.write("sub/mid.txt", "mid", "", r"\include{leaf.txt}")
        leaf = self.write("sub/leaf.txt", "leaf")
        got = self.entries(top)
        self.assertEqual([e.first_line for e in got], ["mid", "leaf"])
        self.assertEqual(Path(got[1].filename), leaf)

    def test_includes_can_be_disabled(self) -> None:
        a = self.write("A.txt", r"\include{B.txt}")
        self.assertEqual(self.entries(a, include_re=None)[0].body, "\\include{B.txt}\n")

    def test_missing_include_reports_including_location(self) -> None:
        a = self.write("A.txt", "text", r"\include{nope.txt}")
        with EntryReader(a) as reader:
            with self.assertRaises(EntryFileNotFoundError) as ctx:
                list(reader)
        err = ctx.exception
        self.assertEqual((err.filename, err.line_number), (str(a), 2))
        self.assertTrue(err.path.endswith("nope.txt"))
        self.assertIn("at line 2 in file", str(err))

    def test_missing_root(self) -> None:
        with self.assertRaises(EntryFileNotFoundError) as ctx:
            EntryReader(self.dir / "absent")
        self.assertIsNone(ctx.exception.filename)

    def test_gzip_include(self) -> None:
        a = self.write("A.txt", r"\include{packed.gz}")
        with gzip.open(self.dir / "packed.gz", "wt", encoding="utf-8") as fp:
            fp.write("zipped one\n\nzipped two\n")
        self.assertEqual([e.body for e in self.entries(a)], ["zipped one\n", "zipped two\n"])

    def test_truncated_gzip_include_fails_with_its_location(self) -> None:
        a = self.write("A.txt", r"\include{packed.gz}")
        payload = gzip.compress(b"alpha\nbeta\n" * 200)
        (self.dir / "packed.gz").write_bytes(payload[: len(payload) // 2])
        with self.assertRaises(EntryIOError) as ctx:
            self.entries(a)
        self.assertEqual(ctx.exception.filename, str(self.dir / "packed.gz"))
        self.assertEqual(ctx.exception.exit_code, 254)


# --------------------------------------------------------------------------- #
#  5. Reader state & lifecycle                                                #
# --------------------------------------------------------------------------- #
class ReaderStateTests(ReaderTestCase):
    def test_position_survives_end_of_input(self) -> None:
        a = self.write("A.txt", ">entry L", "l1", r"\include{inc.txt}")
        self.write("inc.txt", "i1")
        with EntryReader(a) as reader:
            entries = list(reader)
            self.assertEqual(len(entries), 2)
            self.assertEqual(reader.entries_read, 2)
            self.assertEqual((reader.filename, reader.line_number), (str(a), 3))
            self.assertEqual(reader.depth, 0)

    def test_close_releases_every_source(self) -> None:
        a = self.write("A.txt", r"\include{B.txt}")
        self.write("B.txt", "b1", "b2")
        reader = EntryReader(a)
        self.assertEqual(reader.read_line(), "b1")
        self.assertEqual(reader.depth, 2)
        reader.close()
        self.assertEqual(reader.depth, 0)
        self.assertIsNone(reader.read_line())

    def test_iteration_is_single_pass(self) -> None:
        root = self.write("root", "a", "", "b")
        with EntryReader(root) as reader:
            self.assertEqual(next(iter(reader)).body, "a\n")
            self.assertEqual([e.body for e in reader], ["b\n"])

    def test_second_pushback_is_a_contract_violation(self) -> None:
        root = self.write("root", "a", "b")
        with EntryReader(root) as reader:
            reader.read_line()
            reader.pushback("a")
            with self.assertRaises(PushbackOverflowError):
                reader.pushback("again")


# --------------------------------------------------------------------------- #
#  6. Entry model                                                             #
# --------------------------------------------------------------------------- #
class EntryModelTests(unittest.TestCase):
    def test_description_uses_group_one(self) -> None:
        e = Entry(first_line="Foo: the foo thing", body="x\n", filename="f", line_number=1, short_entry=False)
        self.assertEqual(e.description(re.compile(r"^(\w+):")), "Foo")

    def test_description_falls_back_to_first_line(self) -> None:
        e = Entry(first_line="no colon", body="x\n", filename="f", line_number=1, short_entry=False)
        self.assertEqual(e.description(re.compile(r"^(\w+):")), "no colon")
        self.assertEqual(e.description(None), "no colon")

    def test_entry_is_immutable(self) -> None:
        e = Entry(first_line="a", body="a\n", filename="f", line_number=1, short_entry=True)
        with self.assertRaises(Exception):
            e.body = "b\n"  # type: ignore[misc]
        self.assertEqual(e.position.format(), "f:1")


if __name__ == "__main__":
    unittest.main()
