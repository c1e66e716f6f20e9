from __future__ import annotations
"""Current commit lookup through the git executable."""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from postbuild.core.errors import RevisionError
from postbuild.core.interfaces.git import RevisionProviderProtocol
from postbuild.logging.helpers import get_logger


class GitRevisionReader(RevisionProviderProtocol):
    COMMAND: Sequence[str] = ('git', 'rev-parse', 'HEAD')

    def __init__(self, *, cwd: Optional[Path] = None, logger: Optional[logging.Logger] = None) -> None:
        self._cwd = Path(cwd) if cwd is not None else None
        self._log = logger or get_logger('git')

    def get_revision(self) -> str:
        """Return the full hash of HEAD, without surrounding whitespace."""
        try:
            out = subprocess.check_output(
                list(self.COMMAND),
                cwd=self._cwd,
                stderr=subprocess.PIPE,
                text=True,
            )
        except FileNotFoundError as exc:
            raise RevisionError('git executable not found') from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or '').strip() or f'exit status {exc.returncode}'
            raise RevisionError(f'git rev-parse HEAD failed: {detail}') from exc

        revision = out.strip()
        self._log.debug('HEAD is %s', revision)
        return revision
