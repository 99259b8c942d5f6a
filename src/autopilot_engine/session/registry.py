"""Persist the active project root between CLI invocations."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

import yaml

from autopilot_engine.paths import active_root_path
from autopilot_engine.store.variants import atomic_write_bytes

logger = logging.getLogger(__name__)


def save_active_root(root: Path | str, count: int | None = None, path: Path | None = None) -> Path:
    """Record root as the single active project root.

    Args:
        root: Project root that was activated.
        count: Number of sequences updated by the activation.
        path: Record location. Defaults to AUTOPILOT_STATE_DIR/active.yaml.

    Returns:
        Path of the record written.
    """
    record_path = path or active_root_path()
    record_path.parent.mkdir(parents=True, exist_ok=True)
    record = {
        "root": str(root),
        "activated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }
    if count is not None:
        record["sequences_updated"] = count
    atomic_write_bytes(record_path, yaml.safe_dump(record, sort_keys=False).encode("utf-8"))
    return record_path


def load_active_root(path: Path | None = None) -> Path | None:
    """Return the recorded active root, or None when nothing was activated."""
    record_path = path or active_root_path()
    if not record_path.is_file():
        return None
    try:
        with open(record_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable active-root record at %s: %s", record_path, e)
        return None
    if not isinstance(data, dict) or not data.get("root"):
        logger.warning("Ignoring malformed active-root record at %s", record_path)
        return None
    return Path(data["root"])
