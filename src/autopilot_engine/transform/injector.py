"""Replace quoted sequence references with the autopilot block.

A panorama export declares each panorama's start-up camera sequence as a
reference to a named sequence object:

    initialSequence: "this.sequence_8F2A0C1D_..."

Every such reference has its quoted value swapped for the inline
autopilot sequence. Once swapped, the value is an object literal and no
longer matches, so running the injector again is a no-op.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from autopilot_engine.transform.templates import AUTOPILOT_BLOCK

SEQUENCE_REF = re.compile(
    r"""(?P<key>initialSequence\s*:\s*)(?P<quote>["'])this\.sequence_[A-Z0-9_]+(?P=quote)"""
)


class TransformResult(NamedTuple):
    text: str
    count: int


def inject_autopilot(source: str, block: str | None = None) -> TransformResult:
    """Swap every quoted sequence reference for the autopilot block.

    Args:
        source: Script text.
        block: Replacement value. Defaults to AUTOPILOT_BLOCK.

    Returns:
        TransformResult with the new text and the number of replaced sites.
    """
    replacement = AUTOPILOT_BLOCK if block is None else block
    text, count = SEQUENCE_REF.subn(lambda m: m.group("key") + replacement, source)
    return TransformResult(text, count)
