# src/selfmake/utils/paths.py
"""
paths – Small, centralized path helpers for selfmake.

Provides:
  • canonical(path)         – absolute, symlink-free form
  • is_regular_file(path)   – the single existence predicate for resolution
  • directory_of(path)      – parent directory of a file path
"""

from __future__ import annotations

import os
import stat
from pathlib import Path


def canonical(p: str | os.PathLike[str]) -> Path:
    """Return the absolute, symlink-resolved form of *p*."""
    return Path(p).resolve()


def is_regular_file(p: str | os.PathLike[str]) -> bool:
    """Return True if *p* (following symlinks) is an existing regular file.

    Directories, FIFOs, sockets and device nodes never qualify.
    """
    try:
        st = os.stat(p)
    except (OSError, ValueError):
        return False
    return stat.S_ISREG(st.st_mode)


def directory_of(p: str | os.PathLike[str]) -> Path:
    """Return the directory containing file *p*."""
    return Path(p).parent
