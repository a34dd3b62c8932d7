from __future__ import annotations

"""
directive – Line-level scanner for C/C++ include directives.

The scanner is a conservative syntactic approximation, not a preprocessor.
Each line runs through a small state machine that starts over on every
call:

    EXPECT_HASH ──#──▶ EXPECT_INCLUDE ──include──▶ EXPECT_OPENING
                                                     │ <        │ "
                                                     ▼          ▼
                                               COLLECT_ANGLE  COLLECT_QUOTE

Blanks (spaces and tabs) are skipped before '#', before 'include' and
before the opening delimiter. Anything else aborts the line. The collect
states always end the line: they emit an include when the closing delimiter
exists and nothing otherwise.

Known false positives: directives inside disabled `#if` branches and inside
block comments are still reported. Line continuations are not spliced.
"""

import enum
from typing import Optional

from selfmake.core.models import Include

_BLANKS = ' \t'
_KEYWORD = 'include'


class ScanState(enum.Enum):
    EXPECT_HASH = enum.auto()
    EXPECT_INCLUDE = enum.auto()
    EXPECT_OPENING = enum.auto()
    COLLECT_ANGLE = enum.auto()
    COLLECT_QUOTE = enum.auto()


def _skip_blanks(line: str, pos: int) -> int:
    n = len(line)
    while pos < n and line[pos] in _BLANKS:
        pos += 1
    return pos


def scan_line(line: str) -> Optional[Include]:
    """Return the include directive on *line*, or None when there is none.

    A trailing newline is ignored. Text between the delimiters is returned
    verbatim, inner whitespace included.

    Examples:
        scan_line('#include <vector>')      -> Include('vector', False)
        scan_line('  # include "a/b.h"  ')  -> Include('a/b.h', True)
        scan_line('#include "unterminated') -> None
    """
    line = line.rstrip('\r\n')
    state = ScanState.EXPECT_HASH
    pos = 0

    while pos < len(line):
        if state is ScanState.EXPECT_HASH:
            pos = _skip_blanks(line, pos)
            if pos < len(line) and line[pos] == '#':
                pos += 1
                state = ScanState.EXPECT_INCLUDE
                continue
            return None

        if state is ScanState.EXPECT_INCLUDE:
            pos = _skip_blanks(line, pos)
            if line.startswith(_KEYWORD, pos):
                pos += len(_KEYWORD)
                state = ScanState.EXPECT_OPENING
                continue
            return None

        if state is ScanState.EXPECT_OPENING:
            pos = _skip_blanks(line, pos)
            if pos < len(line) and line[pos] == '<':
                pos += 1
                state = ScanState.COLLECT_ANGLE
                continue
            if pos < len(line) and line[pos] == '"':
                pos += 1
                state = ScanState.COLLECT_QUOTE
                continue
            return None

        closing = '>' if state is ScanState.COLLECT_ANGLE else '"'
        end = line.find(closing, pos)
        if end < 0:
            return None
        return Include(line[pos:end], state is ScanState.COLLECT_QUOTE)

    return None
