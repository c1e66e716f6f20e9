from __future__ import annotations

"""Logger names, handler setup and I/O tracing for postbuild.

Every component logs through a child of the ``postbuild`` logger; the CLI
decides once per mode how that logger prints (plain text or JSON lines on
stderr). Structured context travels on the record as ``context`` and is
emitted as ``ctx`` by :class:`JsonLogFormatter`.
"""

import logging
import os
from typing import Optional, TextIO

BASE_LOGGER = "postbuild"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


class JsonLogFormatter(logging.Formatter):
    """One compact JSON object per record.

    Keys: ``ts`` (UTC, milliseconds, ``Z`` suffix), ``level``, ``module``
    (logger name), ``msg``, ``version`` and, when the record carries a
    non-empty ``context`` dict, ``ctx``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        # postbuild/__init__ may still be importing when the first formatter is built
        try:
            from postbuild import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("POSTBUILD_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """(Re)build the single stderr handler of the ``postbuild`` logger.

    Existing handlers are dropped, so calling this again with another
    *json_logs* value switches the output format of every child logger.
    """
    import sys as _sys

    base = logging.getLogger(BASE_LOGGER)
    base.handlers.clear()
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """``get_logger('engine')`` -> ``postbuild.engine``; full names pass through."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_io_enabled() -> bool:
    return os.getenv("POSTBUILD_TRACE_IO") == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Log a DEBUG trace of a file read/scan when POSTBUILD_TRACE_IO=1.

    *ctx* is attached to the record as ``context`` (the JSON ``ctx`` field)
    and repeated in the text so plain logs show it too.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
