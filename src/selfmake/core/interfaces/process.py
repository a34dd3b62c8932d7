from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from selfmake.core.models import CommandStatus


@runtime_checkable
class ProcessRunnerProtocol(Protocol):
    """Runs one external command to completion."""

    def run(self, argv: Sequence[str]) -> CommandStatus:
        """Spawn `argv`, block until it terminates and return its status."""
        ...
