from __future__ import annotations

import os
import unittest
from pathlib import Path

from selfmake.core.errors import EmptyCommandError, UnsupportedQuotingError
from selfmake.core.models import Command, Exited, Signaled, status_from_returncode, status_from_wait
from selfmake.execution.render import quote_arg, quoted, render_command


class CommandStatusTests(unittest.TestCase):
    def test_exit_zero_is_success(self) -> None:
        self.assertTrue(Exited(0).success)
        self.assertEqual(Exited(0).exit_code, 0)

    def test_nonzero_exit_is_failure(self) -> None:
        self.assertFalse(Exited(2).success)
        self.assertEqual(Exited(2).exit_code, 2)

    def test_signal_is_failure_and_normalizes(self) -> None:
        self.assertFalse(Signaled(9).success)
        self.assertEqual(Signaled(9).exit_code, 137)
        self.assertEqual(Signaled(15).exit_code, 143)

    def test_variants_are_distinct(self) -> None:
        self.assertNotEqual(Exited(9), Signaled(9))

    def test_from_returncode(self) -> None:
        self.assertEqual(status_from_returncode(0), Exited(0))
        self.assertEqual(status_from_returncode(3), Exited(3))
        self.assertEqual(status_from_returncode(-11), Signaled(11))

    @unittest.skipUnless(os.name == "posix", "wait status words are POSIX-only")
    def test_from_wait_status(self) -> None:
        self.assertEqual(status_from_wait(3 << 8), Exited(3))
        self.assertEqual(status_from_wait(15), Signaled(15))
        with self.assertRaises(ValueError):
            status_from_wait(0x137f)  # stopped by SIGSTOP


class CommandTests(unittest.TestCase):
    def test_flattens_values_and_iterables(self) -> None:
        cmd = Command("g++", ["-Wall", "-O2"], "-o", Path("out"), (Path("a.cc"), "b.cc"))
        self.assertEqual(cmd.argv, ["g++", "-Wall", "-O2", "-o", "out", "a.cc", "b.cc"])

    def test_append_returns_self(self) -> None:
        cmd = Command("cc")
        self.assertIs(cmd.append("-c", ["x.c"]), cmd)
        self.assertEqual(list(cmd), ["cc", "-c", "x.c"])
        self.assertEqual(len(cmd), 3)

    def test_rejects_non_string_values(self) -> None:
        with self.assertRaises(TypeError):
            Command("cc", 3)

    def test_equality(self) -> None:
        self.assertEqual(Command("a", ["b"]), Command(["a", "b"]))

    def test_str_quotes_every_argument(self) -> None:
        self.assertEqual(str(Command("echo", 'say "hi"')), 'Cmd{"echo", "say \\"hi\\""}')
        self.assertEqual(str(Command()), "Cmd{}")


class RenderTests(unittest.TestCase):
    def test_plain_arguments_unquoted(self) -> None:
        self.assertEqual(render_command(["g++", "-std=c++20", "-o", "/tmp/a.out", "a.cc"]),
                         "g++ -std=c++20 -o /tmp/a.out a.cc")

    def test_arguments_needing_quotes_are_wrapped(self) -> None:
        self.assertEqual(quote_arg("two words"), '"two words"')
        self.assertEqual(quote_arg(""), '""')
        self.assertEqual(quote_arg("a;b"), '"a;b"')
        self.assertEqual(quote_arg("$HOME"), '"$HOME"')

    def test_embedded_quote_unsupported(self) -> None:
        with self.assertRaises(UnsupportedQuotingError):
            quote_arg('say "hi"')
        with self.assertRaises(NotImplementedError):
            render_command(["echo", 'a"b'])

    def test_empty_command_rejected(self) -> None:
        with self.assertRaises(EmptyCommandError):
            render_command([])

    def test_quoted_escapes(self) -> None:
        self.assertEqual(quoted('a\\b"c'), '"a\\\\b\\"c"')


if __name__ == "__main__":
    unittest.main()
