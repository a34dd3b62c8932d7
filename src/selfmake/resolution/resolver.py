from __future__ import annotations
"""
Include resolver.

Maps an `Include` to a concrete file following the GCC search rules
(https://gcc.gnu.org/onlinedocs/cpp/Search-Path.html), simplified to a
single ordered search list:

1. The target itself, taken as a path (relative to the current working
   directory when not absolute), if it names a regular file.
2. An absolute target that failed rule 1 is unresolved.
3. Quoted includes try the including file's directory.
4. Every search path, in order.

Every hit is returned canonicalized, and the first hit wins. `None` is the
normal answer for system headers that are not on the local filesystem.
"""

import os
from pathlib import Path
from typing import List, Optional, Sequence

from selfmake.core.interfaces.logging import LoggerLikeProtocol
from selfmake.core.interfaces.resolve import IncludeResolverProtocol
from selfmake.core.models import Include
from selfmake.logging.helpers import get_logger
from selfmake.utils.paths import canonical, directory_of, is_regular_file


class IncludeResolver(IncludeResolverProtocol):
    """Resolver bound to an ordered search path list."""

    def __init__(
        self,
        search_paths: Sequence[str | os.PathLike[str]] = (),
        *,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._search_paths: List[Path] = [Path(p) for p in search_paths]
        self._log = logger or get_logger('resolve')

    @property
    def search_paths(self) -> List[Path]:
        return list(self._search_paths)

    def resolve(self, include: Include, relative_to: str | os.PathLike[str]) -> Optional[Path]:
        """Return the canonical path *include* refers to, or None."""
        target = Path(include.target)
        if is_regular_file(target):
            return canonical(target)

        if target.is_absolute():
            return None

        if include.is_quoted:
            candidate = directory_of(relative_to) / target
            if is_regular_file(candidate):
                return canonical(candidate)

        for base in self._search_paths:
            candidate = base / target
            if is_regular_file(candidate):
                return canonical(candidate)

        self._log.debug('unresolved %s (from %s)', include, relative_to)
        return None


def resolve(
    include: Include,
    search_paths: Sequence[str | os.PathLike[str]],
    relative_to: str | os.PathLike[str],
) -> Optional[Path]:
    """Functional wrapper over `IncludeResolver.resolve`."""
    return IncludeResolver(search_paths).resolve(include, relative_to)
