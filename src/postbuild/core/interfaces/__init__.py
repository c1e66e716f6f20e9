from .digest import DigestProtocol
from .fs import GlobExpanderProtocol, PatternResolverProtocol
from .git import RevisionProviderProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .render import TagGeneratorProtocol
from .text import TransformPipelineProtocol

__all__ = [
    'DigestProtocol',
    'GlobExpanderProtocol',
    'PatternResolverProtocol',
    'RevisionProviderProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'TagGeneratorProtocol',
    'TransformPipelineProtocol',
]
