from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable


@runtime_checkable
class GlobExpanderProtocol(Protocol):
    """Glob capability used by the pattern resolver."""

    def has_magic(self, pattern: str) -> bool:
        ...

    def expand(self, pattern: str, root_dir: Optional[str] = None) -> List[str]:
        ...


@runtime_checkable
class PatternResolverProtocol(Protocol):
    def resolve(self, pattern: str, extension: str) -> List[str]:
        ...
