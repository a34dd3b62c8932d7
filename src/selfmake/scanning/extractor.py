from __future__ import annotations

import os
from typing import List, Optional, Set

from selfmake.core.interfaces.logging import LoggerLikeProtocol
from selfmake.core.models import Include
from selfmake.logging.helpers import get_logger, trace_io
from selfmake.scanning.directive import scan_line


class IncludeExtractor:
    """Collects the include directives of a single file.

    A missing or unreadable file yields an empty result and a warning, so a
    tree scan keeps going past files that vanish or lack permissions.
    """

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('scanning')

    def extract(self, path: str | os.PathLike[str]) -> List[Include]:
        """Return the sorted, deduplicated includes found in *path*."""
        found: Set[Include] = set()
        try:
            with open(path, 'r', encoding='utf-8', errors='replace', newline='\n') as fh:
                for line in fh:
                    inc = scan_line(line)
                    if inc is not None:
                        found.add(inc)
        except OSError as exc:
            self._log.warning('⚠  cannot read %s – skipped (%s)', path, exc)
            return []

        trace_io(self._log, 'scanned file', path=os.fspath(path), includes=len(found))
        return sorted(found)


def extract_includes(path: str | os.PathLike[str]) -> List[Include]:
    """Functional wrapper over `IncludeExtractor.extract`."""
    return IncludeExtractor().extract(path)
