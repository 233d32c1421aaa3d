"""
Utilization poller: sample the monitoring tool once per second.

One state, one loop: spawn the tool, wait for it, print its output,
sleep, repeat. Any error ends the loop; there is no retry, backoff,
or timeout.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from gpumon.core.models.gpu import GpuVendor
from gpumon.core.services.tool_install.data.registry import tool_spec
from gpumon.core.services.tool_install.execution.subprocess_runner import run_for_text

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 1.0


def poll_once(vendor: GpuVendor) -> str:
    """Take one utilization sample and return the trimmed tool output.

    Raises:
        ToolExecutionFailed: The monitoring tool could not be spawned.
        InvalidOutputEncoding: Its output is not UTF-8.
    """
    return run_for_text(tool_spec(vendor).poll_command).strip()


def format_utilization(text: str) -> str:
    return f"GPU Utilization: {text}%"


def run_poller(
    vendor: GpuVendor,
    *,
    echo: Callable[[str], None] = print,
    sleep: Callable[[float], None] = time.sleep,
    interval: float = POLL_INTERVAL_SECONDS,
    max_ticks: int | None = None,
) -> int:
    """Poll forever, printing one utilization line per tick.

    Args:
        vendor: Detected GPU vendor; selects the monitoring command.
        echo: Line sink for utilization lines.
        sleep: Blocking sleep between ticks.
        interval: Seconds between ticks.
        max_ticks: Stop after this many ticks. ``None`` (the CLI's
            setting) never stops.

    Returns:
        Number of completed ticks, only when ``max_ticks`` is reached.
    """
    cmd = tool_spec(vendor).poll_command
    logger.info("Polling every %.1fs: %s", interval, " ".join(cmd))

    ticks = 0
    while max_ticks is None or ticks < max_ticks:
        echo(format_utilization(poll_once(vendor)))
        ticks += 1
        sleep(interval)
    return ticks
