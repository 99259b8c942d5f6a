"""Project preparation steps: viewer controls and inline image cleanup."""

from autopilot_engine.markup.index_patch import patch_index
from autopilot_engine.markup.inline_images import strip_inline_images

__all__ = ["patch_index", "strip_inline_images"]
