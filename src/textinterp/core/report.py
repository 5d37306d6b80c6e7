from __future__ import annotations

"""
Per-call interpolation report.

A report is optional: callers pass one to ``TextInterpolator.interp`` and the
engine fills it while expanding. The engine never keeps a reference to it
after the call returns.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class InterpolationReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: Optional[float] = None
    duration_s: Optional[float] = None

    substitutions: int = 0
    unresolved: List[str] = field(default_factory=list)
    max_depth: int = 0

    error: Optional[str] = None

    def record_substitution(self, depth: int) -> None:
        self.substitutions += 1
        if depth > self.max_depth:
            self.max_depth = depth

    def record_unresolved(self, name: str) -> None:
        if name not in self.unresolved:
            self.unresolved.append(name)

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = max(0.0, self.finished_at - self.started_at)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "substitutions": self.substitutions,
            "unresolved": list(self.unresolved),
            "max_depth": self.max_depth,
            "duration_s": round(self.duration_s, 6) if self.duration_s is not None else None,
            "error": self.error,
        }

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)
