"""Read an exported JSON snapshot into a validated `Snapshot`.

The file is a JSON object with optional `users`, `pods`, `goals`,
`milestones` and `checkIns` arrays, as exported by the application's data
layer. Invalid records are logged and skipped.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from pod_progress.ingest.validate import validate_records
from pod_progress.models import CheckIn, Goal, Milestone, Pod, Snapshot, User

log = logging.getLogger(__name__)

COLLECTIONS: dict[str, tuple[str, type[BaseModel]]] = {
    "users": ("users", User),
    "pods": ("pods", Pod),
    "goals": ("goals", Goal),
    "milestones": ("milestones", Milestone),
    "checkIns": ("check_ins", CheckIn),
}


def snapshot_from_dict(data: dict[str, Any]) -> tuple[Snapshot, int]:
    """Build a `Snapshot` from a decoded JSON document.

    Returns:
        A tuple of (snapshot, total_bad_records).
    """
    fields: dict[str, list[Any]] = {}
    bad_total = 0

    for key, (field, model) in COLLECTIONS.items():
        raw = data.get(key) or data.get(field) or []
        if not isinstance(raw, list):
            raise ValueError(f"'{key}' must be a JSON array, got {type(raw).__name__}")
        good, bad = validate_records(raw, model)
        fields[field] = good
        bad_total += bad
        log.debug("Validated %s: good=%d bad=%d", key, len(good), bad)

    return Snapshot(**fields), bad_total


def load_snapshot(path: Path) -> Snapshot:
    """Load and validate a snapshot file.

    Args:
        path: JSON file exported by the data layer.

    Raises:
        ValueError: if the document is not a JSON object or a collection is
            not an array.
    """
    log.info("Loading snapshot from %s", path)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")

    snapshot, bad = snapshot_from_dict(data)
    log.info(
        "Snapshot loaded: users=%d pods=%d goals=%d milestones=%d check_ins=%d bad=%d",
        len(snapshot.users),
        len(snapshot.pods),
        len(snapshot.goals),
        len(snapshot.milestones),
        len(snapshot.check_ins),
        bad,
    )
    return snapshot
