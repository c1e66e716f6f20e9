from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from postbuild.constants import CSS_EXTENSION, JS_EXTENSION


class AssetKind(Enum):
    CSS = 'css'
    JS = 'js'

    @property
    def extension(self) -> str:
        return CSS_EXTENSION if self is AssetKind.CSS else JS_EXTENSION


@dataclass(frozen=True)
class AssetSpec:
    """User supplied locator: literal path, directory or glob."""
    pattern: str
    kind: AssetKind


@dataclass(frozen=True)
class RenderOptions:
    """Shape of the generated tags.

    ``async_`` wins over ``defer``; at most one of them is emitted.
    """
    inline: bool = False
    ignore_prefix: str | None = None
    etag: bool = False
    async_: bool = False
    defer: bool = False


@dataclass(frozen=True)
class InjectConfig:
    """Settings for one injector run, built from CLI flags."""
    input: Path
    output: Path | None = None
    css: str | None = None
    js: str | None = None
    remove: str | None = None
    hash: bool = False
    options: RenderOptions = field(default_factory=RenderOptions)

    @property
    def output_path(self) -> Path:
        return self.output if self.output is not None else self.input

    @property
    def remove_condition(self) -> str:
        if not self.remove:
            return ''
        return self.remove.split(':')[-1]

    def asset_specs(self) -> list[AssetSpec]:
        specs: list[AssetSpec] = []
        if self.js:
            specs.append(AssetSpec(self.js, AssetKind.JS))
        if self.css:
            specs.append(AssetSpec(self.css, AssetKind.CSS))
        return specs
