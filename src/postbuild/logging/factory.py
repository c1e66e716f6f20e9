from __future__ import annotations

import logging
from typing import Optional, TextIO, Tuple

from postbuild.core.interfaces.logging import LoggerFactoryProtocol
from postbuild.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory(LoggerFactoryProtocol):
    """Hands out ``postbuild.*`` loggers, configuring the base handler on first use."""

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream = stream
        self._configured = False

    @property
    def mode(self) -> Tuple[bool, int]:
        """(json_logs, level) this factory configures."""
        return self._json, self._level

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
            self._configured = True
        return get_logger(name)
