from __future__ import annotations

import unittest

from selfmake.core.models import Include
from selfmake.scanning.directive import scan_line


class ScanLineTests(unittest.TestCase):
    def test_angle_include(self) -> None:
        self.assertEqual(scan_line("#include <vector>"), Include("vector", False))

    def test_quoted_include_with_embedded_spacing(self) -> None:
        self.assertEqual(scan_line('  # include "a/b.h"  '), Include("a/b.h", True))

    def test_tabs_are_blanks(self) -> None:
        self.assertEqual(scan_line("\t#\tinclude\t<map>"), Include("map", False))

    def test_no_space_before_delimiter(self) -> None:
        self.assertEqual(scan_line("#include<cstdio>"), Include("cstdio", False))
        self.assertEqual(scan_line('#include"x.h"'), Include("x.h", True))

    def test_trailing_newline_ignored(self) -> None:
        self.assertEqual(scan_line("#include <set>\n"), Include("set", False))
        self.assertEqual(scan_line('#include "w.h"\r\n'), Include("w.h", True))

    def test_inner_whitespace_kept_verbatim(self) -> None:
        self.assertEqual(scan_line("#include < spaced name >"), Include(" spaced name ", False))

    def test_text_after_closing_delimiter_ignored(self) -> None:
        self.assertEqual(scan_line('#include "a.h" // comment "b.h"'), Include("a.h", True))

    def test_empty_target_is_emitted(self) -> None:
        self.assertEqual(scan_line("#include <>"), Include("", False))


class ScanLineRejectTests(unittest.TestCase):
    def test_lines_without_directive(self) -> None:
        for line in [
            "",
            "   ",
            "int main() { return 0; }",
            "// #include <vector>",
            "x #include <vector>",
            "#define FOO 1",
            "#pragma once",
            "#",
            "include <vector>",
        ]:
            with self.subTest(line=line):
                self.assertIsNone(scan_line(line))

    def test_missing_closing_delimiter(self) -> None:
        self.assertIsNone(scan_line("#include <vector"))
        self.assertIsNone(scan_line('#include "a.h'))
        self.assertIsNone(scan_line("#include <"))
        self.assertIsNone(scan_line('#include "'))

    def test_mismatched_delimiters(self) -> None:
        self.assertIsNone(scan_line('#include <a.h"'))
        self.assertIsNone(scan_line('#include "a.h>'))

    def test_keyword_followed_by_non_delimiter(self) -> None:
        self.assertIsNone(scan_line("#include"))
        self.assertIsNone(scan_line("#include_next <x.h>"))
        self.assertIsNone(scan_line("#include MACRO_HEADER"))

    def test_state_does_not_carry_between_lines(self) -> None:
        self.assertIsNone(scan_line("#"))
        self.assertIsNone(scan_line("include <vector>"))
        self.assertEqual(scan_line("#include <vector>"), Include("vector", False))


class IncludeValueTests(unittest.TestCase):
    def test_ordering_by_target_then_kind(self) -> None:
        items = [Include("b", True), Include("a", True), Include("b", False)]
        self.assertEqual(sorted(items), [Include("a", True), Include("b", False), Include("b", True)])

    def test_equality_and_hash(self) -> None:
        self.assertEqual(Include("x", True), Include("x", True))
        self.assertNotEqual(Include("x", True), Include("x", False))
        self.assertEqual(len({Include("x", True), Include("x", True)}), 1)

    def test_rendering(self) -> None:
        self.assertEqual(str(Include("a/b.h", True)), '"a/b.h"')
        self.assertEqual(str(Include("vector", False)), "<vector>")


if __name__ == "__main__":
    unittest.main()
