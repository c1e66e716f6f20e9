from __future__ import annotations

from postbuild.cli import PostBuild
from postbuild.core.models import AssetKind, AssetSpec, InjectConfig, RenderOptions
from postbuild.core.report import InjectionReport
from postbuild.discovery.git_revision import GitRevisionReader
from postbuild.discovery.pattern_resolver import PatternResolver
from postbuild.execution import InjectionEngine
from postbuild.parsing.parser import _build_parser
from postbuild.processing.pipeline import TransformPipeline
from postbuild.rendering.tags import TagGenerator
from postbuild.runtime.wiring import build_engine

__version__ = '1.1.0'


__all__ = [
    'PostBuild',
    'AssetKind',
    'AssetSpec',
    'InjectConfig',
    'RenderOptions',
    'InjectionReport',
    'InjectionEngine',
    'GitRevisionReader',
    'PatternResolver',
    'TagGenerator',
    'TransformPipeline',
    'build_engine',
    '_build_parser',
]
