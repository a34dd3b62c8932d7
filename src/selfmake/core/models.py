from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Union


@dataclass(frozen=True, order=True)
class Include:
    """One include directive: its literal target and delimiter kind.

    `is_quoted` is True for `"name"` (candidate for relative resolution) and
    False for `<name>` (search paths only). Ordering is by
    `(target, is_quoted)` and only serves deterministic storage.
    """
    target: str
    is_quoted: bool

    def __str__(self) -> str:
        if self.is_quoted:
            return f'"{self.target}"'
        return f'<{self.target}>'


# Canonical file path -> sorted, deduplicated includes of that file.
IncludeIndex = Dict[Path, List[Include]]


@dataclass(frozen=True)
class Exited:
    """The child terminated normally with `code`."""
    code: int

    @property
    def success(self) -> bool:
        return self.code == 0

    @property
    def exit_code(self) -> int:
        return self.code


@dataclass(frozen=True)
class Signaled:
    """The child was terminated by signal number `signal`."""
    signal: int

    @property
    def success(self) -> bool:
        return False

    @property
    def exit_code(self) -> int:
        # Shell convention.
        return 128 + self.signal


CommandStatus = Union[Exited, Signaled]


def status_from_returncode(returncode: int) -> CommandStatus:
    """Map a `subprocess` return code (negative = signal) to a CommandStatus."""
    if returncode < 0:
        return Signaled(-returncode)
    return Exited(returncode)


def status_from_wait(wstatus: int) -> CommandStatus:
    """Map a raw `os.waitpid` status word to a CommandStatus.

    Raises:
        ValueError: If the status describes a stopped or continued child,
            which is not a termination.
    """
    if os.WIFEXITED(wstatus):
        return Exited(os.WEXITSTATUS(wstatus))
    if os.WIFSIGNALED(wstatus):
        return Signaled(os.WTERMSIG(wstatus))
    raise ValueError(f'wait status {wstatus:#x} is not a termination')


def _flatten(values: Iterable[object]) -> List[str]:
    out: List[str] = []
    for value in values:
        if isinstance(value, (str, os.PathLike)):
            out.append(os.fspath(value))
        elif isinstance(value, Iterable):
            out.extend(_flatten(value))
        else:
            raise TypeError(f'command argument must be a string, path or iterable of them, not {type(value).__name__}')
    return out


class Command:
    """Argument vector builder.

    Accepts any mix of single values and iterables of values:

        Command('g++', flags, '-o', Path('out'), sources)
    """

    def __init__(self, *args: object) -> None:
        self.argv = _flatten(args)

    def append(self, *args: object) -> 'Command':
        self.argv.extend(_flatten(args))
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Command):
            return self.argv == other.argv
        return NotImplemented

    def __repr__(self) -> str:
        return str(self)

    def __len__(self) -> int:
        return len(self.argv)

    def __iter__(self):
        return iter(self.argv)

    def __str__(self) -> str:
        from selfmake.execution.render import quoted

        return 'Cmd{' + ', '.join(quoted(a) for a in self.argv) + '}'
