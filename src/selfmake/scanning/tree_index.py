from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

from selfmake.core.errors import ScanError
from selfmake.core.interfaces.logging import LoggerLikeProtocol
from selfmake.core.models import IncludeIndex
from selfmake.logging.helpers import get_logger
from selfmake.scanning.extractor import IncludeExtractor
from selfmake.utils.extensions import CPP, is_extension_allowed


class TreeIndexer:
    """Builds a file -> includes map for every matching file under a root."""

    def __init__(
        self,
        *,
        extractor: Optional[IncludeExtractor] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('scanning.tree')
        self._extractor = extractor or IncludeExtractor(logger=self._log)

    def index(self, root: str | os.PathLike[str], extensions: Sequence[str] = CPP) -> IncludeIndex:
        """Scan *root* recursively.

        Keys are canonical paths, inserted in sorted order. Directory
        symlinks are not followed.

        Raises:
            ScanError: If *root* is not an existing directory.
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise ScanError(f'scan root {root_path} is not a directory')

        collected: dict[Path, Path] = {}
        for dirpath, _dirnames, filenames in os.walk(root_path):
            for fn in filenames:
                fp = Path(dirpath, fn)
                if not is_extension_allowed(fp.suffix, extensions):
                    continue
                if not fp.is_file():
                    continue
                collected[fp.resolve()] = fp

        index: IncludeIndex = {}
        for key in sorted(collected, key=str):
            index[key] = self._extractor.extract(collected[key])

        self._log.debug('indexed %d file(s) under %s', len(index), root_path)
        return index


def index_tree(root: str | os.PathLike[str], extensions: Sequence[str] = CPP) -> IncludeIndex:
    """Functional wrapper over `TreeIndexer.index`."""
    return TreeIndexer().index(root, extensions)
