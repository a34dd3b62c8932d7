from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from selfmake.core.models import Include


@runtime_checkable
class IncludeResolverProtocol(Protocol):
    def resolve(self, include: Include, relative_to: Path | str) -> Optional[Path]:
        ...
