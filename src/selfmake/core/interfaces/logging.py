from __future__ import annotations

"""Logger seams.

Every selfmake component that takes a ``logger=`` argument only calls the
methods below, so a `logging.Logger`, a `logging.LoggerAdapter` or any
recording stand-in can be passed.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Subset of `logging.Logger` used by scanners, runners and the bootstrap."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out loggers under the 'selfmake' namespace."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for `name`, configuring output on first use."""
        ...
