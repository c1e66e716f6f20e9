from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from postbuild.core.interfaces.digest import DigestProtocol
from postbuild.core.interfaces.fs import GlobExpanderProtocol
from postbuild.core.interfaces.git import RevisionProviderProtocol
from postbuild.discovery.git_revision import GitRevisionReader
from postbuild.discovery.pattern_resolver import PatternResolver
from postbuild.execution import InjectionEngine
from postbuild.logging.helpers import get_logger
from postbuild.rendering.tags import TagGenerator


def build_engine(
    *,
    logger: Optional[logging.Logger] = None,
    cwd: Optional[Path] = None,
    glob_expander: Optional[GlobExpanderProtocol] = None,
    digest: Optional[DigestProtocol] = None,
    revision_provider: Optional[RevisionProviderProtocol] = None,
) -> InjectionEngine:
    """Assemble an InjectionEngine, defaulting every capability to the real one."""
    return InjectionEngine(
        resolver=PatternResolver(glob_expander=glob_expander, base=cwd, logger=get_logger('discovery.patterns')),
        tags=TagGenerator(digest=digest, base=cwd, logger=get_logger('render.tags')),
        revision_provider=revision_provider or GitRevisionReader(cwd=cwd, logger=get_logger('git')),
        logger=logger or get_logger('engine'),
    )
