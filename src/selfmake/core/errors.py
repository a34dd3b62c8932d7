from __future__ import annotations

"""Exception hierarchy for conditions the CLI reports as fatal.

Components raise these; only `selfmake.cli.main` turns them into a
diagnostic and a process exit. Expected negative outcomes (an unresolved
include, a line without a directive) are plain return values instead.
"""


class SelfMakeError(RuntimeError):
    """Base class for every fatal selfmake condition."""


class EmptyCommandError(SelfMakeError, ValueError):
    """Raised when a command is run with an empty argument vector."""


class CommandLaunchError(SelfMakeError):
    """Raised when the OS refuses to start a child process."""


class UnsupportedQuotingError(SelfMakeError, NotImplementedError):
    """Raised when rendering an argument that embeds a double quote."""


class ScanError(SelfMakeError):
    """Raised when a tree scan cannot start (root missing or not a directory)."""


class RebuildError(SelfMakeError):
    """Raised when the self-rebuild cannot stat, back up or recompile."""
