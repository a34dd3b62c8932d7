from __future__ import annotations

from selfmake.bootstrap.rebuild import SelfRebuilder, rebuild_self
from selfmake.cli import SelfMake
from selfmake.core.errors import (
    CommandLaunchError,
    EmptyCommandError,
    RebuildError,
    ScanError,
    SelfMakeError,
    UnsupportedQuotingError,
)
from selfmake.core.models import Command, CommandStatus, Exited, Include, IncludeIndex, Signaled
from selfmake.execution.runner import ProcessRunner
from selfmake.resolution.resolver import IncludeResolver, resolve
from selfmake.runtime.config import ToolchainConfig
from selfmake.scanning import extract_includes, index_tree, scan_line
from selfmake.utils import extensions

__version__ = '0.3.0'

__all__ = [
    'Command',
    'CommandLaunchError',
    'CommandStatus',
    'EmptyCommandError',
    'Exited',
    'Include',
    'IncludeIndex',
    'IncludeResolver',
    'ProcessRunner',
    'RebuildError',
    'ScanError',
    'SelfMake',
    'SelfMakeError',
    'SelfRebuilder',
    'Signaled',
    'ToolchainConfig',
    'UnsupportedQuotingError',
    'extensions',
    'extract_includes',
    'index_tree',
    'rebuild_self',
    'resolve',
    'scan_line',
]
