from __future__ import annotations

"""
render – Human-readable command rendering.

`render_command` produces the line printed before each spawned command.
Arguments that are empty or contain whitespace or shell metacharacters are
wrapped in double quotes. Escaping is not implemented, so an argument
carrying its own double quote raises `UnsupportedQuotingError`.

`quoted` is the escaping form (backslash before `"` and `\\`) used by
`Command.__str__` for debugging output.
"""

import re
from typing import Sequence

from selfmake.core.errors import EmptyCommandError, UnsupportedQuotingError

_NEEDS_QUOTES = re.compile(r"[\s'$`\\|&;<>()*?\[\]{}~#!]")


def quote_arg(arg: str) -> str:
    """Return *arg* as it should appear in a rendered command line."""
    if '"' in arg:
        raise UnsupportedQuotingError(f'cannot render argument with embedded quote: {arg!r}')
    if not arg or _NEEDS_QUOTES.search(arg):
        return f'"{arg}"'
    return arg


def quoted(arg: str) -> str:
    """Always-quoted, escaped form of *arg*."""
    return '"' + arg.replace('\\', '\\\\').replace('"', '\\"') + '"'


def render_command(argv: Sequence[str]) -> str:
    """Join *argv* into a single display line."""
    if not argv:
        raise EmptyCommandError('cannot render an empty command')
    return ' '.join(quote_arg(a) for a in argv)
