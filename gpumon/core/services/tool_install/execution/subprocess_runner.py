"""
L4 Execution: Core subprocess runner.

The SINGLE PLACE where ``subprocess.run`` is called. Detection,
installation, and polling all go through here, so spawn failures
and output decoding are handled the same way everywhere.
"""

from __future__ import annotations

import logging
import subprocess
import time

from gpumon.core.errors import InvalidOutputEncoding, ToolExecutionFailed

logger = logging.getLogger(__name__)


def _run_subprocess(cmd: list[str]) -> subprocess.CompletedProcess[bytes]:
    """Run a command to completion, capturing stdout and stderr as bytes.

    No timeout: a hung tool blocks the caller until the process is
    killed from outside.

    Args:
        cmd: Command list for ``subprocess.run()``.

    Returns:
        The completed process, whatever its exit status.

    Raises:
        ToolExecutionFailed: If the command could not be spawned at all
            (binary missing, not executable, ...).
    """
    logger.debug("exec: %s", " ".join(cmd))
    start = time.monotonic()
    try:
        result = subprocess.run(cmd, capture_output=True, check=False)
    except OSError as exc:
        logger.warning("Could not spawn %s: %s", cmd[0], exc)
        raise ToolExecutionFailed(cmd, str(exc)) from exc

    elapsed_ms = int((time.monotonic() - start) * 1000)
    logger.debug("exit %d after %dms: %s", result.returncode, elapsed_ms, cmd[0])
    return result


def _decode_output(raw: bytes, cmd: list[str]) -> str:
    """Decode captured output as strict UTF-8.

    Raises:
        InvalidOutputEncoding: If the bytes are not valid UTF-8.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidOutputEncoding(cmd) from exc


def run_for_text(cmd: list[str]) -> str:
    """Run a command and return its stdout as text.

    The exit status is not checked; callers that care about it use
    ``_run_subprocess`` directly.
    """
    result = _run_subprocess(cmd)
    return _decode_output(result.stdout, cmd)


def _tail(raw: bytes, limit: int = 2000) -> str:
    """Last ``limit`` characters of captured output, for error messages."""
    return raw.decode("utf-8", errors="replace")[-limit:].strip() if raw else ""
