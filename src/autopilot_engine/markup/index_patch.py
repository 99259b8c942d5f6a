"""Inject the autopilot controls into the project's index page.

The patch is applied at most once: if the controls marker is already in
the page, the file is left untouched. Everything else in the page is
preserved.
"""

from __future__ import annotations

import logging
from pathlib import Path

from autopilot_engine.errors import IOFailure
from autopilot_engine.store.variants import atomic_write_bytes
from autopilot_engine.transform.templates import CONTROLS_HTML, CONTROLS_MARKER

logger = logging.getLogger(__name__)


def patch_index(
    file_path: Path,
    fragment: str = CONTROLS_HTML,
    marker: str = CONTROLS_MARKER,
    dry_run: bool = False,
) -> str:
    """Insert fragment before </body> unless marker is already present.

    Returns:
        "missing" if the page does not exist, "unchanged" if it already
        has the marker, "patched" otherwise.
    """
    if not file_path.is_file():
        logger.info("No index page at %s, skipping controls", file_path)
        return "missing"

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise IOFailure(file_path, e) from e

    if marker in content:
        logger.info("Autopilot controls already present in %s", file_path)
        return "unchanged"

    if "</body>" in content:
        new_content = content.replace("</body>", f"{fragment}\n</body>", 1)
    else:
        new_content = content.rstrip() + "\n" + fragment + "\n"

    if not dry_run:
        try:
            atomic_write_bytes(file_path, new_content.encode("utf-8"))
        except OSError as e:
            raise IOFailure(file_path, e) from e
        logger.info("Autopilot controls injected into %s", file_path)
    return "patched"
