"""Public API surface for postbuild.processing."""
from postbuild.processing.pipeline import SubstitutionStage, TransformPipeline

__all__ = [
    "SubstitutionStage",
    "TransformPipeline",
]
