"""Autopilot session: binds a project root and switches its live script.

Activation pipeline:
1. Validate the root (no state change on failure)
2. Snapshot live into backup, only if no backup exists yet
3. Optional preparation: index page controls, inline PNG cleanup
4. Read live → normalize → inject → normalize → write modified

enable() and disable() are plain copies between variants and never
touch the transformer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from autopilot_engine.config import AutopilotConfig
from autopilot_engine.errors import NoBackup, NotActivated
from autopilot_engine.markup.index_patch import patch_index
from autopilot_engine.markup.inline_images import strip_inline_images
from autopilot_engine.paths import FileVariant
from autopilot_engine.session.state_machine import SessionState, check_transition
from autopilot_engine.store.variants import VariantStore
from autopilot_engine.transform.injector import inject_autopilot
from autopilot_engine.transform.normalizer import Normalizer

logger = logging.getLogger(__name__)


@dataclass
class ActivationResult:
    root: Path
    count: int = 0
    backup_created: bool = False
    index_action: str = "skipped"
    cleaned: list[Path] = field(default_factory=list)

    def summary(self) -> str:
        lines = [
            f"Autopilot activated for {self.root}",
            "─" * 40,
            f"  Sequences updated: {self.count}",
            f"  Backup:            {'created' if self.backup_created else 'kept existing'}",
            f"  Index controls:    {self.index_action}",
            f"  Cleaned files:     {len(self.cleaned)}",
        ]
        if self.count == 0:
            lines.append("\n  No sequence references found; modified script equals live.")
        return "\n".join(lines)


class AutopilotSession:
    """Caller-owned session holding the single bound project root."""

    def __init__(self, config: AutopilotConfig | None = None, normalizer: Normalizer | None = None):
        self.config = config or AutopilotConfig()
        self.normalizer = normalizer or Normalizer(
            self.config.formatter, self.config.formatter_timeout,
        )
        self.state = SessionState.UNBOUND
        self.store: VariantStore | None = None
        self.last_activation: ActivationResult | None = None

    @property
    def root(self) -> Path | None:
        return self.store.root if self.store else None

    def _bind_store(self, root: Path | str) -> VariantStore:
        return VariantStore.bind(
            root,
            script_name=self.config.script_name,
            backup_prefix=self.config.backup_prefix,
            modified_prefix=self.config.modified_prefix,
        )

    def bind(self, root: Path | str) -> VariantStore:
        """Bind root without regenerating anything.

        Used when another process already activated the root and this
        session only needs to enable or disable.
        """
        self.store = self._bind_store(root)
        self.state = SessionState.BOUND
        return self.store

    def activate(self, root: Path | str) -> ActivationResult:
        """Bind root, secure the backup and regenerate the modified script.

        Raises:
            InvalidRoot: Root missing or lacks the live script; session unchanged.
            NotFound, IOFailure: A later step failed; session is left UNBOUND.
        """
        store = self._bind_store(root)
        _, msg = check_transition(self.state, "activate")
        logger.debug("activate: %s", msg)

        self.store = store
        self.state = SessionState.BOUND
        try:
            result = self._run_pipeline(store)
        except Exception:
            logger.error("Activation failed for %s", store.root)
            self.store = None
            self.state = SessionState.UNBOUND
            raise

        self.last_activation = result
        logger.info(
            "Autopilot version created (%d panoramas updated) in %s",
            result.count, store.root,
        )
        return result

    def _run_pipeline(self, store: VariantStore) -> ActivationResult:
        result = ActivationResult(root=store.root)
        result.backup_created = store.ensure_backup()

        if self.config.patch_index:
            result.index_action = patch_index(store.root / self.config.index_name)
        if self.config.strip_inline_images:
            with store.locked():
                result.cleaned = strip_inline_images(
                    store.root, exclude={store.path(FileVariant.BACKUP)},
                )

        raw = store.read_live()
        pretty = self.normalizer.normalize(raw)
        transformed = inject_autopilot(pretty, self.config.injection_block())
        final = self.normalizer.normalize(transformed.text)
        store.write_modified(final)
        result.count = transformed.count
        return result

    def enable(self) -> None:
        """Make the autopilot script live.

        Raises:
            NotActivated: No root bound, or the modified script is missing.
        """
        ok, msg = check_transition(self.state, "enable")
        if not ok or self.store is None:
            raise NotActivated(None, f"Autopilot not activated: {msg}")
        self.store.promote(FileVariant.MODIFIED, FileVariant.LIVE)

    def disable(self) -> None:
        """Restore the original script from backup.

        Raises:
            NoBackup: No root bound, or the backup is missing.
        """
        ok, msg = check_transition(self.state, "disable")
        if not ok or self.store is None:
            raise NoBackup(None, f"No backup available: {msg}")
        self.store.promote(FileVariant.BACKUP, FileVariant.LIVE)

    def status(self) -> dict:
        """Describe the bound root's variants, or report the session unbound."""
        if self.store is None:
            return {"state": self.state.value, "root": None}
        info = self.store.describe()
        info["state"] = self.state.value
        if self.last_activation is not None:
            info["sequences_updated"] = self.last_activation.count
        return info
