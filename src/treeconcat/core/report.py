from __future__ import annotations

"""
Per-run counters collected while walking and writing.

The report never influences output; it feeds the closing debug summary and
is available to programmatic callers via `TreeWalker.report`.
"""

import json
import time
from dataclasses import dataclass, field
from typing import List


@dataclass
class RunReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    dirs_visited: int = 0
    files_written: int = 0
    bytes_written: int = 0

    skipped_ignored: int = 0
    skipped_extension: int = 0
    skipped_binary: int = 0

    errors: List[str] = field(default_factory=list)

    def add_block(self, size: int) -> None:
        self.files_written += 1
        self.bytes_written += size

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "dirs_visited": self.dirs_visited,
                "files_written": self.files_written,
                "bytes_written": self.bytes_written,
                "skipped_ignored": self.skipped_ignored,
                "skipped_extension": self.skipped_extension,
                "skipped_binary": self.skipped_binary,
                "errors": self.errors,
            },
            indent=indent,
        )
