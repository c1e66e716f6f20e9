from __future__ import annotations

from typing import Protocol, Tuple, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """The four levels the injector logs at.

    ``extra={'context': {...}}`` is accepted as on :class:`logging.Logger` and
    ends up in the ``ctx`` field of JSON logs.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...
    def info(self, msg: str, *args, **kwargs) -> None: ...
    def warning(self, msg: str, *args, **kwargs) -> None: ...
    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Configures the ``postbuild`` handler for one mode and hands out child loggers."""

    @property
    def mode(self) -> Tuple[bool, int]:
        """``(json_logs, level)``; the CLI reconfigures only when this changes."""
        ...

    def get_logger(self, name: str) -> LoggerLikeProtocol: ...
