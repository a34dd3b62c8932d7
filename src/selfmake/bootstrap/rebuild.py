from __future__ import annotations

"""
rebuild – Self-rebuild bootstrap for a compiled program.

Runs once at start-up, before any other logic:

    1. program is at least as new as its source  -> nothing to do
    2. copy program to program.old (overwriting a previous backup)
    3. recompile program from source             -> failure raises RebuildError
    4. run the rebuilt program without arguments and exit with its
       normalized status (code, or 128 + signal)

Step 4 uses a child process plus an explicit exit rather than replacing the
process image, so the runner and the exit hook can both be swapped in tests.
"""

import os
import shutil
import sys
from pathlib import Path
from typing import Callable, NoReturn, Optional, Sequence

from selfmake.constants import BACKUP_SUFFIX
from selfmake.core.errors import EmptyCommandError, RebuildError
from selfmake.core.interfaces.logging import LoggerLikeProtocol
from selfmake.core.interfaces.process import ProcessRunnerProtocol
from selfmake.execution.runner import ProcessRunner
from selfmake.logging.helpers import get_logger
from selfmake.runtime.config import ToolchainConfig

ExitFn = Callable[[int], NoReturn]


def backup_path(program: str | os.PathLike[str]) -> Path:
    """Return the sibling backup path (`<program>.old`)."""
    return Path(os.fspath(program) + BACKUP_SUFFIX)


class SelfRebuilder:
    """Rebuilds *program* from *source* when the source is newer."""

    def __init__(
        self,
        program: str | os.PathLike[str],
        source: str | os.PathLike[str],
        *,
        runner: Optional[ProcessRunnerProtocol] = None,
        toolchain: Optional[ToolchainConfig] = None,
        exit: Optional[ExitFn] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._program = Path(program)
        self._source = Path(source)
        self._runner = runner or ProcessRunner()
        self._toolchain = toolchain or ToolchainConfig.from_env()
        self._exit = exit or sys.exit
        self._log = logger or get_logger('bootstrap')

    @staticmethod
    def _mtime_ns(path: Path, role: str) -> int:
        try:
            return os.stat(path).st_mtime_ns
        except OSError as exc:
            raise RebuildError(f'cannot read modification time of {role} {path}: {exc}') from exc

    def is_stale(self) -> bool:
        """True when the source is strictly newer than the program."""
        program_time = self._mtime_ns(self._program, 'program')
        source_time = self._mtime_ns(self._source, 'source')
        return program_time < source_time

    def rebuild_command(self) -> list[str]:
        return self._toolchain.compile_command([self._source], output=self._program)

    def rebuild_if_stale(self) -> bool:
        """Run the bootstrap.

        Returns False when the program is up to date. On the rebuild path it
        calls the exit hook with the rebuilt program's status and does not
        return unless that hook does, in which case it returns True.

        Raises:
            RebuildError: If a timestamp cannot be read, the backup cannot be
                written or the compiler does not succeed.
        """
        if not self.is_stale():
            return False

        backup = backup_path(self._program)
        try:
            shutil.copy2(self._program, backup)
        except OSError as exc:
            raise RebuildError(f'cannot back up {self._program} to {backup}: {exc}') from exc
        self._log.info('%s is older than %s – rebuilding (backup: %s)', self._program, self._source, backup)

        status = self._runner.run(self.rebuild_command())
        if not status.success:
            raise RebuildError(f'rebuilding {self._program} failed: {status!r}')

        # An absolute path keeps a bare program name from being looked up on PATH.
        status = self._runner.run([os.fspath(self._program.absolute())])
        self._exit(status.exit_code)
        return True


def rebuild_self(
    argv: Sequence[str],
    source: str | os.PathLike[str],
    *,
    runner: Optional[ProcessRunnerProtocol] = None,
    toolchain: Optional[ToolchainConfig] = None,
    exit: Optional[ExitFn] = None,
) -> bool:
    """Bootstrap the program named by `argv[0]` against *source*.

    Raises:
        EmptyCommandError: If *argv* is empty.
    """
    if not argv:
        raise EmptyCommandError('rebuild_self needs the program path in argv[0]')
    return SelfRebuilder(argv[0], source, runner=runner, toolchain=toolchain, exit=exit).rebuild_if_stale()
