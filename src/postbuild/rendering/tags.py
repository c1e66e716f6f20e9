"""
tags – HTML fragments for resolved css/js files.

Each resolved file becomes exactly one fragment, in input order:

    CSS linked   <link rel="stylesheet" href="PATH">
    CSS inline   <style>CONTENT</style>
    JS linked    <script src="PATH" async|defer></script>
    JS inline    <script>CONTENT</script>

Inline content is inserted verbatim, line endings included; nothing is
escaped. Files are read below *base* when one is given, while the emitted
paths stay as resolved.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

from postbuild.constants import ETAG_QUERY
from postbuild.core.interfaces.digest import DigestProtocol
from postbuild.core.interfaces.render import TagGeneratorProtocol
from postbuild.core.models import AssetKind, RenderOptions
from postbuild.logging.helpers import get_logger, trace_io
from postbuild.utils.digest import sha1_hexdigest
from postbuild.utils.paths import has_prefix, strip_prefix


class TagGenerator(TagGeneratorProtocol):
    def __init__(
        self,
        *,
        digest: Optional[DigestProtocol] = None,
        base: Optional[Path] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._digest = digest or sha1_hexdigest
        self._base = base
        self._log = logger or get_logger('render.tags')

    def generate(self, files: Sequence[str], kind: AssetKind, options: RenderOptions) -> List[str]:  # type: ignore[override]
        """Render one fragment per entry of *files*.

        Raises:
            OSError: a file could not be read (inline content or etag digest).
            UnicodeDecodeError: an inlined file is not valid UTF-8.
        """
        if options.inline:
            return [self._inline(fname, kind) for fname in files]
        return [self._linked(fname, kind, options) for fname in files]

    def _on_disk(self, fname: str) -> str:
        if self._base is None:
            return fname
        return os.path.join(self._base, fname)

    def _inline(self, fname: str, kind: AssetKind) -> str:
        with open(self._on_disk(fname), 'r', encoding='utf-8', newline='') as fh:
            content = fh.read()
        trace_io(self._log, 'inlined asset', path=fname, chars=len(content))
        if kind is AssetKind.CSS:
            return f'<style>{content}</style>'
        return f'<script>{content}</script>'

    def _linked(self, fname: str, kind: AssetKind, options: RenderOptions) -> str:
        href = self.public_path(fname, options)
        if kind is AssetKind.CSS:
            return f'<link rel="stylesheet" href="{href}">'

        attributes = [f'src="{href}"']
        if options.async_:
            attributes.append('async')
        elif options.defer:
            attributes.append('defer')
        return f'<script {" ".join(attributes)}></script>'

    def public_path(self, fname: str, options: RenderOptions) -> str:
        """Path as written in the href/src attribute."""
        path = fname
        if options.ignore_prefix is not None:
            if not has_prefix(fname, options.ignore_prefix):
                self._log.warning(
                    '⚠  %s does not start with ignore prefix %r – cutting %d character(s) anyway',
                    fname, options.ignore_prefix, len(options.ignore_prefix),
                )
            path = strip_prefix(fname, options.ignore_prefix)
        if options.etag:
            path = f'{path}{ETAG_QUERY}{self._digest(self._on_disk(fname))}'
        return path
