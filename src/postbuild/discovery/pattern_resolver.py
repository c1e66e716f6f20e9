from __future__ import annotations

"""
Asset pattern resolution.

Turns the value of ``--css``/``--js`` into the ordered list of files to
inject. Three shapes are accepted:

    - a glob (optionally wrapped in quotes so the shell leaves it alone),
    - a directory, scanned one level deep for the asset extension,
    - a single regular file.

Relative patterns are looked up below *base* (the run's working directory)
but returned exactly as written, since they end up in HTML attributes.
"""

import logging
import os
import stat
from pathlib import Path
from typing import List, Optional

from postbuild.adapters.glob import StdlibGlobAdapter
from postbuild.core.errors import AssetNotFoundError
from postbuild.core.interfaces.fs import GlobExpanderProtocol, PatternResolverProtocol
from postbuild.logging.helpers import get_logger, trace_io
from postbuild.utils.paths import join_posix, unquote


class PatternResolver(PatternResolverProtocol):
    def __init__(
        self,
        *,
        glob_expander: Optional[GlobExpanderProtocol] = None,
        base: Optional[Path] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._glob = glob_expander or StdlibGlobAdapter()
        self._base = base
        self._log = logger or get_logger('discovery.patterns')

    def _on_disk(self, pattern: str) -> str:
        if self._base is None:
            return pattern
        return os.path.join(self._base, pattern)

    def resolve(self, pattern: str, extension: str) -> List[str]:
        """Return the files designated by *pattern*.

        Raises:
            AssetNotFoundError: *pattern* is not a glob and nothing exists at
                that path.
        """
        if self._glob.has_magic(pattern):
            unwrapped = unquote(pattern)
            root_dir = None if self._base is None else str(self._base)
            found = self._glob.expand(unwrapped, root_dir=root_dir)
            self._log.debug('glob %r matched %d path(s)', unwrapped, len(found))
            return found

        location = self._on_disk(pattern)
        try:
            st = os.lstat(location)
        except FileNotFoundError as exc:
            raise AssetNotFoundError(pattern) from exc

        if stat.S_ISDIR(st.st_mode):
            names = os.listdir(location)
            trace_io(self._log, 'scanned directory', path=pattern, entries=len(names))
            return [join_posix(pattern, name) for name in names if name.endswith(extension)]

        if stat.S_ISREG(st.st_mode):
            return [pattern]

        self._log.warning('⚠  %s is neither a file nor a directory – skipped', pattern)
        return []
