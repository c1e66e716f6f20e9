from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class DigestProtocol(Protocol):
    """Content digest used for cache-busting query strings."""

    def __call__(self, path: str | Path) -> str:  # pragma: no cover - interface
        ...
