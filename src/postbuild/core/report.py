from __future__ import annotations

"""
Per-run injection report.

Collected by the engine while it resolves assets and rewrites the template,
then logged by the CLI as a one-line summary (or dumped as JSON).
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class InjectionReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    input_path: str | None = None
    output_path: str | None = None

    files_by_kind: Dict[str, int] = field(default_factory=lambda: {"css": 0, "js": 0})
    patterns: List[str] = field(default_factory=list)

    # Substitution counts per pipeline stage
    regions_injected: Dict[str, int] = field(default_factory=lambda: {"js": 0, "css": 0})
    hash_markers: int = 0
    regions_removed: int = 0
    revision: str | None = None

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {"resolve": 0.0, "render": 0.0, "revision": 0.0, "transform": 0.0}
    )

    def add_files(self, kind: str, pattern: str, count: int) -> None:
        self.files_by_kind[kind] = self.files_by_kind.get(kind, 0) + count
        self.patterns.append(pattern)

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def summary(self) -> str:
        return (
            f"{self.files_by_kind.get('js', 0)} js / {self.files_by_kind.get('css', 0)} css file(s), "
            f"{sum(self.regions_injected.values())} region(s) injected, "
            f"{self.hash_markers} hash marker(s), {self.regions_removed} region(s) removed"
        )

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "input_path": self.input_path,
                "output_path": self.output_path,
                "files_by_kind": self.files_by_kind,
                "patterns": self.patterns,
                "regions_injected": self.regions_injected,
                "hash_markers": self.hash_markers,
                "regions_removed": self.regions_removed,
                "revision": self.revision,
                "time_by_stage": self.time_by_stage,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: InjectionReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
