from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ReplayRun:
    ticks: int
    seed: int | None = None
    score: int = 0
    frames: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReplayRun":
        return cls(
            ticks=int(data.get("ticks", 0)),
            seed=data.get("seed"),
            score=int(data.get("score", 0)),
            frames=list(data.get("frames", [])),
        )


@dataclass(frozen=True)
class ReplayBundle:
    policy: str
    runs: list[ReplayRun]
    metrics: dict[str, Any] = field(default_factory=dict)
