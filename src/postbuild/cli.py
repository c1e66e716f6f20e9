from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from postbuild.core.errors import PostBuildError, RevisionError
from postbuild.core.interfaces.git import RevisionProviderProtocol
from postbuild.core.report import InjectionReport
from postbuild.logging.factory import DefaultLoggerFactory
from postbuild.logging.helpers import get_logger, is_trace_io_enabled
from postbuild.parsing.parser import _build_parser
from postbuild.runtime.flag_mapping import namespace_to_config
from postbuild.runtime.wiring import build_engine


logger = get_logger('postbuild')


def _configure_logging(enable_json: bool) -> None:
    """Configure process-wide logging, rebuilding it only when the mode changes.

    The mode is the output format plus the level; POSTBUILD_TRACE_IO=1 lowers
    the level to DEBUG so I/O traces are printed.
    """
    level = logging.DEBUG if is_trace_io_enabled() else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    if getattr(_configure_logging, '_configured_mode', None) == factory.mode:
        return
    global logger
    logger = factory.get_logger('postbuild')
    setattr(_configure_logging, '_configured_mode', factory.mode)


def _fatal(msg: str, code: int = 1) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def _version() -> str:
    from postbuild import __version__
    return __version__


class PostBuild:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        cwd: Optional[Path] = None,
        revision_provider: Optional[RevisionProviderProtocol] = None,
    ) -> InjectionReport:
        """Run the injector with an argv-like sequence and return its report."""
        argv = list(argv)
        json_logs = '--json-logs' in argv or os.getenv('POSTBUILD_JSON_LOGS') == '1'
        _configure_logging(json_logs)

        ns: argparse.Namespace = _build_parser(_version()).parse_args(argv)
        if ns.input is None:
            _fatal('Please specify an input file')

        cfg = namespace_to_config(ns, cwd=cwd)
        engine = build_engine(logger=get_logger('engine'), cwd=cwd, revision_provider=revision_provider)

        try:
            report = engine.run(cfg)
        except RevisionError as exc:
            _fatal(f'Could not read git revision: {exc}')
        except PostBuildError as exc:
            _fatal(str(exc))

        logger.info('✔ %s → %s (%s)', cfg.input, cfg.output_path, report.summary())
        return report


def main() -> NoReturn:
    """Entry point for `python -m postbuild` and the `postbuild` script."""
    try:
        PostBuild.run(sys.argv[1:])
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
