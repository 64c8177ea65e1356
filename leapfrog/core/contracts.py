from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SimSummary:
    policy: str
    results: dict[str, Any]
    summary_path: Path | None = None
    replay_path: Path | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
