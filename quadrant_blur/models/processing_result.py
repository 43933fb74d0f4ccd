from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List


@dataclass
class ProcessingResult:
    """
    Outcome of one pipeline run. Only `success` and `path` are part of the
    external response; the rest is bookkeeping for callers and logs.
    """
    success: bool
    path: Path
    size: int                                                  # bytes written for the result file
    segment_paths: List[Path] = field(default_factory=list)    # raw segments actually persisted

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "path": str(self.path)}
