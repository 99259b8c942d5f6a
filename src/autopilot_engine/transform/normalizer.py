"""Best-effort source formatting through an external formatter.

The formatter (prettier by default) is optional. When it is missing,
times out, or rejects the input, the source is returned unchanged and a
warning is logged; formatting never fails the pipeline.
"""

from __future__ import annotations

import logging
import subprocess

from autopilot_engine.errors import FormatFailure

logger = logging.getLogger(__name__)


class Normalizer:
    """Format source text with an external command reading stdin.

    Args:
        command: argv of the formatter, or None to disable formatting.
        timeout: Seconds to wait for the formatter.
    """

    def __init__(self, command: list[str] | None, timeout: float = 30.0):
        self.command = list(command) if command else None
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return self.command is not None

    def normalize(self, source: str) -> str:
        """Return formatted source, or source unchanged if formatting fails."""
        if not self.enabled:
            logger.debug("Formatter disabled, leaving source as-is")
            return source
        try:
            return self._run(source)
        except FormatFailure as e:
            logger.warning("Formatter failed, using unformatted source: %s", e)
            return source

    def _run(self, source: str) -> str:
        try:
            result = subprocess.run(
                self.command,
                input=source,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise FormatFailure(f"{self.command[0]} not found") from e
        except subprocess.TimeoutExpired as e:
            raise FormatFailure(f"timed out after {self.timeout}s") from e
        except OSError as e:
            raise FormatFailure(str(e)) from e
        except UnicodeError as e:
            raise FormatFailure(f"undecodable formatter I/O: {e}") from e

        if result.returncode != 0:
            detail = (result.stderr or "").strip().splitlines()
            raise FormatFailure(detail[0] if detail else f"exit code {result.returncode}")
        if not result.stdout.strip() and source.strip():
            raise FormatFailure("formatter produced no output")
        return result.stdout
