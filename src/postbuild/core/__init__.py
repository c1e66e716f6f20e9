from __future__ import annotations

"""Public surface for postbuild.core.

Data models, the error hierarchy and the Protocol types the components are
wired through:

    from postbuild.core import AssetKind, RenderOptions, AssetNotFoundError
"""

from postbuild.core.errors import (
    AssetNotFoundError,
    InputFileError,
    PostBuildError,
    RevisionError,
)
from postbuild.core.models import AssetKind, AssetSpec, InjectConfig, RenderOptions
from postbuild.core.interfaces import (
    DigestProtocol,
    GlobExpanderProtocol,
    PatternResolverProtocol,
    RevisionProviderProtocol,
    TagGeneratorProtocol,
    TransformPipelineProtocol,
)

__all__ = [
    # Models
    "AssetKind",
    "AssetSpec",
    "InjectConfig",
    "RenderOptions",
    # Errors
    "PostBuildError",
    "InputFileError",
    "AssetNotFoundError",
    "RevisionError",
    # Protocols
    "DigestProtocol",
    "GlobExpanderProtocol",
    "PatternResolverProtocol",
    "RevisionProviderProtocol",
    "TagGeneratorProtocol",
    "TransformPipelineProtocol",
]
