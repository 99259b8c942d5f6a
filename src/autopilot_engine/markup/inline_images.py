"""Strip base64 inline PNGs from project text files."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from autopilot_engine.store.variants import atomic_write_bytes

logger = logging.getLogger(__name__)

INLINE_PNG = re.compile(r"""data:image/png;base64,[^'"\s)]+""")
TEXT_EXTENSIONS = {".js", ".html", ".htm", ".json"}


def strip_inline_images(
    root: Path | str,
    exclude: set[Path] | None = None,
    extensions: set[str] | None = None,
) -> list[Path]:
    """Replace every inline PNG data URI under root with ``null``.

    Args:
        root: Directory to walk recursively.
        exclude: Files to leave untouched (compared after resolving).
        extensions: File suffixes to scan. Defaults to TEXT_EXTENSIONS.

    Returns:
        Sorted list of files that were rewritten.
    """
    base = Path(root)
    skip = {p.resolve() for p in (exclude or set())}
    suffixes = extensions or TEXT_EXTENSIONS

    cleaned: list[Path] = []
    for path in sorted(base.rglob("*")):
        if path.suffix.lower() not in suffixes or not path.is_file():
            continue
        if path.resolve() in skip:
            continue
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping %s: %s", path, e)
            continue
        new_content = INLINE_PNG.sub("null", content)
        if new_content == content:
            continue
        try:
            atomic_write_bytes(path, new_content.encode("utf-8"))
        except OSError as e:
            logger.warning("Failed to clean %s: %s", path, e)
            continue
        logger.info("Cleaned inline images: %s", path)
        cleaned.append(path)

    return cleaned
