from __future__ import annotations

from typing import List, Protocol, Sequence, runtime_checkable

from postbuild.core.models import AssetKind, RenderOptions


@runtime_checkable
class TagGeneratorProtocol(Protocol):
    """Turns resolved asset paths into HTML fragments, one per path."""

    def generate(self, files: Sequence[str], kind: AssetKind, options: RenderOptions) -> List[str]:
        ...
