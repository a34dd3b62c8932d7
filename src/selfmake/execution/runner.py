from __future__ import annotations

import os
import subprocess
import sys
from typing import Optional, Sequence, TextIO

from selfmake.constants import CMD_PREFIX
from selfmake.core.errors import CommandLaunchError, EmptyCommandError
from selfmake.core.interfaces.logging import LoggerLikeProtocol
from selfmake.core.interfaces.process import ProcessRunnerProtocol
from selfmake.core.models import CommandStatus, status_from_returncode
from selfmake.execution.render import render_command
from selfmake.logging.helpers import get_logger


class ProcessRunner(ProcessRunnerProtocol):
    """Synchronous process runner.

    Every command is echoed to *stream* (stdout by default) as
    ``[CMD] <rendered argv>`` before it is spawned. The child inherits the
    parent's stdio and environment; `argv[0]` is looked up on PATH when it
    is not a path. There is no timeout: a hung child hangs the caller.
    """

    def __init__(self, *, stream: Optional[TextIO] = None, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._stream = stream
        self._log = logger or get_logger('exec')

    def run(self, argv: Sequence[str | os.PathLike[str]]) -> CommandStatus:
        """Run *argv* to completion.

        Raises:
            EmptyCommandError: If *argv* is empty.
            UnsupportedQuotingError: If an argument cannot be rendered.
            CommandLaunchError: If the program cannot be started.
        """
        args = [os.fspath(a) for a in argv]
        if not args:
            raise EmptyCommandError('cannot run an empty command')

        out = self._stream or sys.stdout
        out.write(CMD_PREFIX + render_command(args) + '\n')
        out.flush()

        try:
            proc = subprocess.Popen(args)
        except OSError as exc:
            raise CommandLaunchError(f'could not start {args[0]}: {exc}') from exc

        # Popen.wait keeps waiting through stopped/continued children.
        returncode = proc.wait()
        status = status_from_returncode(returncode)
        self._log.debug('%s finished with %r', args[0], status)
        return status


def run(argv: Sequence[str | os.PathLike[str]]) -> CommandStatus:
    """Run *argv* with a default `ProcessRunner`."""
    return ProcessRunner().run(argv)
