"""Variant path resolution.

Derives the canonical file names for a project root and the location of
the active-root state file. Uses environment variables when available,
falls back to conventional defaults.

Environment variables:
    AUTOPILOT_STATE_DIR: where the active root is recorded (default: ~/.autopilot)
    AUTOPILOT_CONFIG: optional YAML config file
"""

from __future__ import annotations

import enum
import os
from pathlib import Path

_DEFAULT_STATE_DIR = Path.home() / ".autopilot"

LIVE_SCRIPT = "script_general.js"
BACKUP_PREFIX = "backup_"
MODIFIED_PREFIX = "modified_"
INDEX_FILE = "index.htm"


class FileVariant(str, enum.Enum):
    LIVE = "live"
    BACKUP = "backup"
    MODIFIED = "modified"


def variant_paths(
    root: Path | str,
    script_name: str = LIVE_SCRIPT,
    backup_prefix: str = BACKUP_PREFIX,
    modified_prefix: str = MODIFIED_PREFIX,
) -> dict[FileVariant, Path]:
    """Return the three variant paths for a project root.

    Args:
        root: Project root directory.
        script_name: File name of the live script.
        backup_prefix: Prefix prepended to the live name for the backup.
        modified_prefix: Prefix prepended to the live name for the modified copy.

    Returns:
        Mapping of FileVariant to absolute path.
    """
    base = Path(root)
    return {
        FileVariant.LIVE: base / script_name,
        FileVariant.BACKUP: base / f"{backup_prefix}{script_name}",
        FileVariant.MODIFIED: base / f"{modified_prefix}{script_name}",
    }


def state_dir() -> Path:
    """Return the directory holding the active-root record."""
    env = os.environ.get("AUTOPILOT_STATE_DIR")
    if env:
        return Path(env).expanduser()
    return _DEFAULT_STATE_DIR


def active_root_path() -> Path:
    """Return the path to active.yaml."""
    return state_dir() / "active.yaml"


def config_path() -> Path | None:
    """Return the config file named by AUTOPILOT_CONFIG, if any."""
    env = os.environ.get("AUTOPILOT_CONFIG")
    return Path(env).expanduser() if env else None
