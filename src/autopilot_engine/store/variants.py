"""Filesystem identity and movement of the live/backup/modified variants.

Every write lands in a temp file beside its target and is renamed into
place, so a concurrent reader sees either the old or the new content,
never a truncated file. Backup creation, promotion and in-place cleanup
of the live file are serialized per project root.
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from pathlib import Path

from autopilot_engine.errors import (
    InvalidRoot,
    IOFailure,
    MissingLiveFile,
    NoBackup,
    NotActivated,
    NotFound,
)
from autopilot_engine.paths import (
    BACKUP_PREFIX,
    LIVE_SCRIPT,
    MODIFIED_PREFIX,
    FileVariant,
    variant_paths,
)

logger = logging.getLogger(__name__)

_ROOT_LOCKS: dict[Path, threading.Lock] = {}
_ROOT_LOCKS_GUARD = threading.Lock()


def _root_lock(root: Path) -> threading.Lock:
    with _ROOT_LOCKS_GUARD:
        lock = _ROOT_LOCKS.get(root)
        if lock is None:
            lock = _ROOT_LOCKS[root] = threading.Lock()
        return lock


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Write data to path via a temp file in the same directory and rename."""
    try:
        mode = path.stat().st_mode & 0o777
    except FileNotFoundError:
        mode = 0o644
    fd, tmp_path = tempfile.mkstemp(
        dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


class VariantStore:
    """The three script variants of one project root.

    Use :meth:`bind` to validate a root and build a store for it.
    """

    _MISSING = {
        FileVariant.MODIFIED: NotActivated,
        FileVariant.BACKUP: NoBackup,
    }

    def __init__(self, root: Path, paths: dict[FileVariant, Path]):
        self.root = root
        self.paths = paths

    @classmethod
    def bind(
        cls,
        root: Path | str,
        script_name: str = LIVE_SCRIPT,
        backup_prefix: str = BACKUP_PREFIX,
        modified_prefix: str = MODIFIED_PREFIX,
    ) -> "VariantStore":
        """Validate root and compute its variant paths.

        Raises:
            InvalidRoot: If root does not exist or is not a directory.
            MissingLiveFile: If the live script is absent.
        """
        base = Path(root).expanduser()
        if not base.is_dir():
            raise InvalidRoot(root)
        base = base.resolve()
        paths = variant_paths(base, script_name, backup_prefix, modified_prefix)
        if not paths[FileVariant.LIVE].is_file():
            raise MissingLiveFile(base, script_name)
        return cls(base, paths)

    def path(self, variant: FileVariant) -> Path:
        return self.paths[variant]

    def locked(self) -> threading.Lock:
        """Return the lock serializing writes to this root's live and backup files."""
        return _root_lock(self.root)

    def exists(self, variant: FileVariant) -> bool:
        return self.paths[variant].is_file()

    def read_live(self) -> str:
        """Return the live script text.

        Raises:
            NotFound: If the live script has disappeared since binding.
        """
        live = self.paths[FileVariant.LIVE]
        try:
            return live.read_text(encoding="utf-8", errors="surrogateescape")
        except FileNotFoundError as e:
            raise NotFound(live) from e
        except OSError as e:
            logger.error("Failed to read %s: %s", live, e)
            raise IOFailure(live, e) from e

    def write_modified(self, text: str) -> None:
        """Overwrite the modified variant unconditionally."""
        target = self.paths[FileVariant.MODIFIED]
        self._write(target, text.encode("utf-8", errors="surrogateescape"))

    def ensure_backup(self) -> bool:
        """Snapshot live into backup unless a backup already exists.

        Returns:
            True if the backup was created by this call.
        """
        backup = self.paths[FileVariant.BACKUP]
        with _root_lock(self.root):
            if backup.exists():
                return False
            data = self._read_bytes(FileVariant.LIVE)
            self._write(backup, data)
        logger.info("Backup created: %s", backup)
        return True

    def promote(self, source: FileVariant, target: FileVariant) -> None:
        """Copy the bytes of one variant over another.

        Raises:
            NotActivated: If source is the modified variant and it is absent.
            NoBackup: If source is the backup and it is absent.
            NotFound: If any other source variant is absent.
        """
        with _root_lock(self.root):
            data = self._read_bytes(source)
            self._write(self.paths[target], data)
        logger.info("Promoted %s -> %s in %s", source.value, target.value, self.root)

    def matches(self, variant: FileVariant) -> bool:
        """Return True if live has the same bytes as variant."""
        if not (self.exists(variant) and self.exists(FileVariant.LIVE)):
            return False
        return self._read_bytes(FileVariant.LIVE) == self._read_bytes(variant)

    def describe(self) -> dict:
        """Summarize existence and size of each variant and the live mode."""
        files = {}
        for variant, p in self.paths.items():
            files[variant.value] = {
                "path": str(p),
                "exists": p.is_file(),
                "size": p.stat().st_size if p.is_file() else None,
            }
        if self.matches(FileVariant.MODIFIED):
            mode = "autopilot"
        elif self.matches(FileVariant.BACKUP):
            mode = "original"
        else:
            mode = "custom"
        return {"root": str(self.root), "mode": mode, "files": files}

    def _read_bytes(self, variant: FileVariant) -> bytes:
        p = self.paths[variant]
        try:
            return p.read_bytes()
        except FileNotFoundError as e:
            exc = self._MISSING.get(variant, NotFound)
            raise exc(p, f"{variant.value} variant not found: {p}") from e
        except OSError as e:
            logger.error("Failed to read %s: %s", p, e)
            raise IOFailure(p, e) from e

    def _write(self, target: Path, data: bytes) -> None:
        try:
            atomic_write_bytes(target, data)
        except OSError as e:
            logger.error("Failed to write %s: %s", target, e)
            raise IOFailure(target, e) from e
