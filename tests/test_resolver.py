from __future__ import annotations

import contextlib
import os
import tempfile
import unittest
from pathlib import Path
from typing import Iterator

from selfmake.core.models import Include
from selfmake.resolution.resolver import IncludeResolver, resolve


@contextlib.contextmanager
def _chdir(path: Path) -> Iterator[None]:
    """Temporarily switch CWD to *path*."""
    cwd = Path.cwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(cwd)


class ResolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.proj = Path(self._tmp.name).resolve() / "proj"
        for rel in ("src/a.cc", "src/b.h", "include/b.h", "include/only.h", "other/only.h", "other/c.h"):
            p = self.proj / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text("", encoding="utf-8")
        (self.proj / "include/dir.h").mkdir()
        self.including = self.proj / "src/a.cc"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_quoted_relative_wins_over_search_path(self) -> None:
        found = resolve(Include("b.h", True), [self.proj / "include"], self.including)
        self.assertEqual(found, self.proj / "src/b.h")

    def test_angle_include_skips_including_directory(self) -> None:
        found = resolve(Include("b.h", False), [self.proj / "include"], self.including)
        self.assertEqual(found, self.proj / "include/b.h")

    def test_first_search_path_wins(self) -> None:
        inc = Include("only.h", False)
        first = resolve(inc, [self.proj / "include", self.proj / "other"], self.including)
        second = resolve(inc, [self.proj / "other", self.proj / "include"], self.including)
        self.assertEqual(first, self.proj / "include/only.h")
        self.assertEqual(second, self.proj / "other/only.h")

    def test_later_search_path_used_when_earlier_misses(self) -> None:
        found = resolve(Include("c.h", False), [self.proj / "include", self.proj / "other"], self.including)
        self.assertEqual(found, self.proj / "other/c.h")

    def test_unresolved_returns_none(self) -> None:
        self.assertIsNone(resolve(Include("vector", False), [self.proj / "include"], self.including))
        self.assertIsNone(resolve(Include("missing.h", True), [], self.including))

    def test_existing_absolute_path(self) -> None:
        target = str(self.proj / "other/c.h")
        for quoted in (True, False):
            with self.subTest(quoted=quoted):
                self.assertEqual(resolve(Include(target, quoted), [], self.including), self.proj / "other/c.h")

    def test_missing_absolute_path_never_searched(self) -> None:
        missing = self.proj / "nowhere" / "only.h"
        inc = Include(str(missing), False)
        self.assertIsNone(resolve(inc, [self.proj / "include"], self.including))
        self.assertIsNone(resolve(Include(str(missing), True), [self.proj / "include"], self.proj / "nowhere/x.cc"))

    def test_target_relative_to_cwd_resolves_first(self) -> None:
        with _chdir(self.proj):
            found = resolve(Include("other/c.h", False), [], self.including)
        self.assertEqual(found, self.proj / "other/c.h")

    def test_directories_never_match(self) -> None:
        self.assertIsNone(resolve(Include("dir.h", False), [self.proj / "include"], self.including))
        with _chdir(self.proj / "src"):
            self.assertIsNone(resolve(Include("include", True), [self.proj], self.proj / "x.cc"))

    def test_result_is_canonical(self) -> None:
        found = resolve(Include("../include/b.h", True), [], self.including)
        self.assertEqual(found, self.proj / "include/b.h")
        self.assertNotIn("..", found.parts)

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unsupported")
    def test_symlink_resolved_to_target(self) -> None:
        os.symlink(self.proj / "other/c.h", self.proj / "include/link.h")
        found = resolve(Include("link.h", False), [self.proj / "include"], self.including)
        self.assertEqual(found, self.proj / "other/c.h")

    def test_deterministic(self) -> None:
        resolver = IncludeResolver([self.proj / "include", self.proj / "other"])
        inc = Include("only.h", False)
        self.assertEqual(resolver.resolve(inc, self.including), resolver.resolve(inc, self.including))
        self.assertEqual(resolver.search_paths, [self.proj / "include", self.proj / "other"])


if __name__ == "__main__":
    unittest.main()
