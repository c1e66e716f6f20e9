from __future__ import annotations
import logging
import os
import stat
from pathlib import Path
from typing import List, Optional

from postbuild.core.errors import AssetNotFoundError, InputFileError
from postbuild.core.interfaces.fs import PatternResolverProtocol
from postbuild.core.interfaces.git import RevisionProviderProtocol
from postbuild.core.interfaces.render import TagGeneratorProtocol
from postbuild.core.models import AssetKind, AssetSpec, InjectConfig
from postbuild.core.report import InjectionReport, StageTimer
from postbuild.logging.helpers import get_logger, trace_io
from postbuild.processing.pipeline import TransformPipeline


class InjectionEngine:
    """Runs one injection: validate input, build fragments, rewrite the file."""

    def __init__(
        self,
        *,
        resolver: PatternResolverProtocol,
        tags: TagGeneratorProtocol,
        revision_provider: RevisionProviderProtocol,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._resolver = resolver
        self._tags = tags
        self._revision = revision_provider
        self._log = logger or get_logger('engine')

    @staticmethod
    def check_input(path: Path) -> None:
        """Fail unless *path* is an existing regular file."""
        try:
            st = os.lstat(path)
        except OSError as exc:
            raise InputFileError(f"File '{path}' not found", str(path)) from exc
        if stat.S_ISDIR(st.st_mode):
            raise InputFileError(f"'{path}' is a directory, please specify an input file", str(path))
        if not stat.S_ISREG(st.st_mode):
            raise InputFileError(f"File '{path}' not found", str(path))

    def render_spec(self, spec: AssetSpec, cfg: InjectConfig, report: InjectionReport) -> List[str]:
        """Resolve *spec* and render its fragments.

        Any filesystem or decoding failure is reported against the original
        pattern.
        """
        try:
            with StageTimer(report, 'resolve'):
                files = self._resolver.resolve(spec.pattern, spec.kind.extension)
            with StageTimer(report, 'render'):
                fragments = self._tags.generate(files, spec.kind, cfg.options)
        except AssetNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as exc:
            raise AssetNotFoundError(spec.pattern) from exc

        report.add_files(spec.kind.value, spec.pattern, len(files))
        self._log.info('%s: %d %s file(s) from %s', spec.kind.value, len(files), spec.kind.value, spec.pattern)
        return fragments

    def run(self, cfg: InjectConfig) -> InjectionReport:
        report = InjectionReport(input_path=str(cfg.input), output_path=str(cfg.output_path))
        self.check_input(cfg.input)

        fragments = {AssetKind.JS: [], AssetKind.CSS: []}
        for spec in cfg.asset_specs():
            fragments[spec.kind] = self.render_spec(spec, cfg, report)

        revision = ''
        if cfg.hash:
            with StageTimer(report, 'revision'):
                revision = self._revision.get_revision()
            report.revision = revision

        pipeline = TransformPipeline(
            js_fragments=fragments[AssetKind.JS],
            css_fragments=fragments[AssetKind.CSS],
            revision=revision,
            remove_condition=cfg.remove_condition,
            logger=get_logger('pipeline'),
        )

        with StageTimer(report, 'transform'):
            with open(cfg.input, 'r', encoding='utf-8', newline='') as src:
                text = src.read()
            trace_io(self._log, 'read template', path=str(cfg.input), chars=len(text))
            out = pipeline.apply(text)
            with open(cfg.output_path, 'w', encoding='utf-8', newline='') as dst:
                dst.write(out)
            trace_io(self._log, 'wrote output', path=str(cfg.output_path), chars=len(out))

        counts = pipeline.counts
        report.regions_injected = {
            'js': counts.get('js', 0) if fragments[AssetKind.JS] else 0,
            'css': counts.get('css', 0) if fragments[AssetKind.CSS] else 0,
        }
        report.hash_markers = counts.get('git-hash', 0)
        report.regions_removed = counts.get('remove', 0)
        report.finish()
        return report
