from __future__ import annotations
"""Marker rewriting pipeline.

Four global substitutions, always applied in this order:

    1. js inject regions      -> js fragments (region kept if none)
    2. css inject regions     -> css fragments (region kept if none)
    3. git-hash markers       -> ``<!-- REVISION -->``
    4. matching remove blocks -> deleted, markers included

Regions are captured non-greedily, so several regions of the same kind in
one document are handled independently. Already substituted text is never
scanned again by the same stage.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from postbuild.constants import (
    GIT_HASH_MARKER,
    INJECT_CSS_START,
    INJECT_END,
    INJECT_JS_START,
    REMOVE_END,
    REMOVE_START_TEMPLATE,
)
from postbuild.core.interfaces.text import TransformPipelineProtocol
from postbuild.logging.helpers import get_logger


def _region(start: str, end: str) -> re.Pattern[str]:
    return re.compile(rf'({re.escape(start)})([\s\S]*?)({re.escape(end)})', re.MULTILINE)


@dataclass(frozen=True)
class SubstitutionStage:
    name: str
    pattern: re.Pattern[str]
    replace: Callable[[re.Match[str]], str]

    def run(self, text: str) -> tuple[str, int]:
        return self.pattern.subn(self.replace, text)


class TransformPipeline(TransformPipelineProtocol):
    def __init__(
        self,
        *,
        js_fragments: Sequence[str] = (),
        css_fragments: Sequence[str] = (),
        revision: str = '',
        remove_condition: str = '',
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('pipeline')
        self.counts: Dict[str, int] = {}
        self.stages: List[SubstitutionStage] = [
            SubstitutionStage('js', _region(INJECT_JS_START, INJECT_END), self._injector(js_fragments)),
            SubstitutionStage('css', _region(INJECT_CSS_START, INJECT_END), self._injector(css_fragments)),
            SubstitutionStage(
                'git-hash',
                re.compile(re.escape(GIT_HASH_MARKER), re.MULTILINE),
                lambda _m, rev=f'<!-- {revision} -->': rev,
            ),
            SubstitutionStage(
                'remove',
                _region(REMOVE_START_TEMPLATE.format(condition=remove_condition), REMOVE_END),
                lambda _m: '',
            ),
        ]

    @staticmethod
    def _injector(fragments: Sequence[str]) -> Callable[[re.Match[str]], str]:
        if not fragments:
            return lambda m: m.group(0)
        joined = '\n'.join(fragments)
        return lambda _m: joined

    def apply(self, text: str) -> str:  # type: ignore[override]
        """Run every stage over *text* and return the rewritten document."""
        self.counts = {}
        for stage in self.stages:
            text, n = stage.run(text)
            self.counts[stage.name] = n
            self._log.debug('stage %s: %d match(es)', stage.name, n)
        return text

    def transform(self, input_stream: TextIO, output_stream: TextIO) -> None:  # type: ignore[override]
        output_stream.write(self.apply(input_stream.read()))
