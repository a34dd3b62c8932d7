from selfmake.core.errors import (
    CommandLaunchError,
    EmptyCommandError,
    RebuildError,
    ScanError,
    SelfMakeError,
    UnsupportedQuotingError,
)
from selfmake.core.models import (
    Command,
    CommandStatus,
    Exited,
    Include,
    IncludeIndex,
    Signaled,
    status_from_returncode,
)

__all__ = [
    'Command',
    'CommandLaunchError',
    'CommandStatus',
    'EmptyCommandError',
    'Exited',
    'Include',
    'IncludeIndex',
    'RebuildError',
    'ScanError',
    'SelfMakeError',
    'Signaled',
    'UnsupportedQuotingError',
    'status_from_returncode',
]
