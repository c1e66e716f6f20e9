"""
adapters.glob – Standard-library glob exposed through GlobExpanderProtocol.
"""

import glob as _glob
import os
from dataclasses import dataclass
from typing import List, Optional

from postbuild.core.interfaces.fs import GlobExpanderProtocol


@dataclass
class StdlibGlobAdapter(GlobExpanderProtocol):
    """Expand patterns with :mod:`glob` using recursive ``**`` semantics.

    Notes
    -----
    • Results keep the order produced by the glob module (filesystem order,
      not sorted).
    • Separators are always '/', as paths end up in HTML attributes.
    • Hidden entries are skipped, like a shell would.
    • With *root_dir* the pattern is matched below that directory and the
      results stay relative to it, as the pattern was written.
    """

    def has_magic(self, pattern: str) -> bool:  # type: ignore[override]
        return _glob.has_magic(pattern)

    def expand(self, pattern: str, root_dir: Optional[str] = None) -> List[str]:  # type: ignore[override]
        found = _glob.glob(pattern, root_dir=root_dir, recursive=True)
        if os.sep != '/':
            found = [p.replace(os.sep, '/') for p in found]
        return found
