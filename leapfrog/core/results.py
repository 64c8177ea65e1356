from __future__ import annotations

import json
from pathlib import Path
from typing import Any

SCHEMA_VERSION = 1
KINDS = ("summary", "replay")


def save_result_json(path: Path, payload: dict[str, Any], *, kind: str = "summary") -> Path:
    """Write a versioned result file tagged with what it holds."""
    if kind not in KINDS:
        raise ValueError(f"Unknown result kind: {kind!r}. Expected one of {KINDS}")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {"schema_version": SCHEMA_VERSION, "kind": kind, **payload}
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
    return path


def load_result_json(path: Path, *, kind: str | None = None) -> dict[str, Any]:
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    # Files written before versioning carry neither field.
    data.setdefault("schema_version", 0)
    data.setdefault("kind", kind or "summary")
    if kind is not None and data["kind"] != kind:
        raise ValueError(f"{path}: expected a {kind} file, found {data['kind']}")
    return data
