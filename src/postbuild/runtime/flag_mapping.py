# src/postbuild/runtime/flag_mapping.py
from __future__ import annotations
"""Mapping layer between parsed CLI flags and InjectConfig.

`namespace_to_config` is what the CLI uses; `config_to_argv` goes the other
way so programmatic callers can drive `PostBuild.run` from a config.
"""
import argparse
from pathlib import Path
from typing import List, Optional

from postbuild.core.models import InjectConfig, RenderOptions


def _full_path(cwd: Path, value: str) -> Path:
    return cwd / value


def namespace_to_config(ns: argparse.Namespace, *, cwd: Optional[Path] = None) -> InjectConfig:
    """Build the run configuration; ``ns.input`` must already be set."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    return InjectConfig(
        input=_full_path(base, ns.input),
        output=_full_path(base, ns.output) if ns.output else None,
        css=ns.css or None,
        js=ns.js or None,
        remove=ns.remove or None,
        hash=bool(ns.hash),
        options=RenderOptions(
            inline=bool(ns.inline),
            ignore_prefix=ns.ignore,
            etag=bool(ns.etag),
            async_=bool(ns.async_),
            defer=bool(ns.defer),
        ),
    )


def config_to_argv(cfg: InjectConfig) -> List[str]:
    argv: List[str] = ['-i', str(cfg.input)]
    if cfg.output is not None:
        argv += ['-o', str(cfg.output)]
    for flag, value in (('-c', cfg.css), ('-j', cfg.js), ('-r', cfg.remove), ('-g', cfg.options.ignore_prefix)):
        if value is not None:
            argv += [flag, value]
    for flag, enabled in (
        ('-H', cfg.hash),
        ('-e', cfg.options.etag),
        ('-I', cfg.options.inline),
        ('-A', cfg.options.async_),
        ('-D', cfg.options.defer),
    ):
        if enabled:
            argv.append(flag)
    return argv
