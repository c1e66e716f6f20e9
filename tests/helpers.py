# -*- coding: utf-8 -*-
"""Shared fixtures for the postbuild test-suite."""
from __future__ import annotations

import contextlib
import os
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import Iterator

# Make the src/ layout importable without an install
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

TOOLS_DIR = Path(__file__).resolve().parent / "tools"
BUILD_SCRIPT = TOOLS_DIR / "build_fixtures.py"

CSS_FILES = ("styles1.css", "styles2.css", "styles3.css")
JS_FILES = ("script1.js", "script2.js", "script3.js")

GIT = shutil.which("git")


@contextlib.contextmanager
def fixture_tree() -> Iterator[Path]:
    """Build a fresh fixture tree in a temp dir and chdir into it."""
    cwd = Path.cwd()
    with tempfile.TemporaryDirectory() as td:
        root = Path(td) / "site"
        subprocess.check_call([sys.executable, str(BUILD_SCRIPT), str(root)])
        os.chdir(root)
        try:
            yield root
        finally:
            os.chdir(cwd)


def git_init(root: Path) -> str:
    """Turn *root* into a git repository with one commit and return HEAD."""
    def _git(*args: str) -> str:
        return subprocess.check_output(
            [GIT, "-c", "user.name=postbuild", "-c", "user.email=postbuild@example.com",
             "-c", "commit.gpgsign=false", *args],
            cwd=root,
            text=True,
            stderr=subprocess.DEVNULL,
        )

    _git("init", "-q")
    _git("add", "-A")
    _git("commit", "-q", "-m", "fixtures")
    return _git("rev-parse", "HEAD").strip()
