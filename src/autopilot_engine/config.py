"""Load autopilot configuration from YAML and the environment."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from autopilot_engine.errors import ConfigError
from autopilot_engine.paths import (
    BACKUP_PREFIX,
    INDEX_FILE,
    LIVE_SCRIPT,
    MODIFIED_PREFIX,
    config_path,
)

DEFAULT_FORMATTER = ["prettier", "--parser", "babel"]


@dataclass
class AutopilotConfig:
    script_name: str = LIVE_SCRIPT
    backup_prefix: str = BACKUP_PREFIX
    modified_prefix: str = MODIFIED_PREFIX
    index_name: str = INDEX_FILE
    formatter: list[str] | None = field(default_factory=lambda: list(DEFAULT_FORMATTER))
    formatter_timeout: float = 30.0
    patch_index: bool = True
    strip_inline_images: bool = True
    injection_block_file: str | None = None

    def injection_block(self) -> str | None:
        """Return the override block text, or None for the built-in one."""
        if not self.injection_block_file:
            return None
        block_path = Path(self.injection_block_file).expanduser()
        try:
            return block_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read injection block {block_path}: {e}") from e


def load_config(path: Path | str | None = None) -> AutopilotConfig:
    """Build the effective configuration.

    Args:
        path: YAML config file. Defaults to AUTOPILOT_CONFIG, then built-in defaults.

    Returns:
        AutopilotConfig with file values and environment overrides applied.

    Raises:
        ConfigError: If the file is unreadable, not a mapping, or has unknown keys.
    """
    cfg_path = Path(path) if path else config_path()
    data: dict = {}
    if cfg_path is not None:
        try:
            with open(cfg_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config {cfg_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed config {cfg_path}: {e}") from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config at {cfg_path} is not a YAML mapping")
        data = loaded

    known = {f.name for f in fields(AutopilotConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    if isinstance(data.get("formatter"), str):
        data["formatter"] = shlex.split(data["formatter"])

    config = AutopilotConfig(**data)
    _apply_env(config)
    return config


def _apply_env(config: AutopilotConfig) -> None:
    raw = os.environ.get("AUTOPILOT_FORMATTER")
    if raw is None:
        return
    if raw.strip().lower() in ("", "off", "none", "false", "0"):
        config.formatter = None
    else:
        config.formatter = shlex.split(raw)
