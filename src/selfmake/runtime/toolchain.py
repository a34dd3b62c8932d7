from __future__ import annotations

import sysconfig
from typing import Optional

GCC = 'g++'
CLANG = 'clang++'
POSIX = 'c++'


def classify_compiler(name: Optional[str]) -> str:
    """Map a compiler command string to the matching C++ driver name."""
    lowered = (name or '').lower()
    if 'clang' in lowered:
        return CLANG
    if 'gcc' in lowered or 'g++' in lowered:
        return GCC
    return POSIX


def detect_compiler() -> str:
    """Return the C++ driver of the toolchain this interpreter was built with.

    Reads the `CXX` build variable, then `CC`. Falls back to the POSIX `c++`
    when neither names a known toolchain.
    """
    for var in ('CXX', 'CC'):
        value = sysconfig.get_config_var(var)
        if value:
            return classify_compiler(str(value))
    return POSIX
