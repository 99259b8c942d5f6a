"""Exception hierarchy for autopilot operations."""

from __future__ import annotations

from pathlib import Path


class AutopilotError(Exception):
    """Base class for every error surfaced to callers."""


class ConfigError(AutopilotError):
    """Configuration file is malformed or names unknown keys."""


class InvalidRoot(AutopilotError):
    """Project root is missing or not a directory."""

    def __init__(self, root: Path | str, reason: str = "folder not found"):
        self.root = Path(root)
        self.reason = reason
        super().__init__(f"{reason}: {root}")


class MissingLiveFile(InvalidRoot):
    """Project root exists but has no live script."""

    def __init__(self, root: Path | str, script_name: str):
        self.script_name = script_name
        super().__init__(root, f"missing {script_name}")


class NotFound(AutopilotError):
    """A required file variant does not exist."""

    def __init__(self, path: Path | str | None, message: str | None = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message or f"not found: {path}")


class NotActivated(NotFound):
    """Enable requested before an activation produced the modified variant."""


class NoBackup(NotFound):
    """Disable requested but no backup of the original exists."""


class IOFailure(AutopilotError):
    """Underlying read, write or copy failed."""

    def __init__(self, path: Path | str, error: OSError):
        self.path = Path(path)
        self.error = error
        super().__init__(f"I/O failure on {path}: {error}")


class FormatFailure(Exception):
    """The external formatter could not format the source.

    Raised and absorbed inside the normalizer; never reaches callers.
    """
