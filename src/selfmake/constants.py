from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Prefix written before every rendered command on the diagnostic stream.
CMD_PREFIX: str = '[CMD] '

# Suffix appended to a program path when backing it up before a rebuild.
BACKUP_SUFFIX: str = '.old'

DEFAULT_STD_FLAG: str = '-std=c++20'

# Environment variables consulted by the toolchain configuration.
ENV_COMPILER: str = 'CXX'
ENV_FLAGS: str = 'CXXFLAGS'
ENV_STD: str = 'SELFMAKE_STD'
