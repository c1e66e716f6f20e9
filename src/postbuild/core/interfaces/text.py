from __future__ import annotations
"""Transform pipeline protocol definitions."""

from typing import Protocol, TextIO


class TransformPipelineProtocol(Protocol):
    """Protocol for the marker rewriting pipeline.

    Methods:
        apply: Rewrite a whole document held in memory.
        transform: Read `input_stream` to the end and write the rewritten
            document to `output_stream`.
    """

    def apply(self, text: str) -> str:
        ...

    def transform(self, input_stream: TextIO, output_stream: TextIO) -> None:
        ...
