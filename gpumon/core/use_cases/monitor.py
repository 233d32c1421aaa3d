"""
Monitor use case: detect, bootstrap the tool, then poll.

Services raise ``GpuMonitorError``; this layer turns the first one
into a result with ``error`` set so callers (CLI, tests) can inspect
the outcome without the process exiting.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from gpumon.core.errors import GpuMonitorError
from gpumon.core.models.gpu import GpuVendor, PackageManagerKind
from gpumon.core.services.poller import POLL_INTERVAL_SECONDS, run_poller
from gpumon.core.services.tool_install.data.registry import tool_spec
from gpumon.core.services.tool_install.detection.environment import (
    identify_package_manager,
    tool_present,
)
from gpumon.core.services.tool_install.detection.hardware import identify_gpu
from gpumon.core.services.tool_install.execution.installer import install_tool

logger = logging.getLogger(__name__)


@dataclass
class BootstrapResult:
    """Outcome of vendor detection and tool bootstrapping."""

    vendor: GpuVendor | None = None
    tool_found: bool = False
    package_manager: PackageManagerKind | None = None
    installed: bool = False
    error: str | None = None
    exception: GpuMonitorError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def ready(self) -> bool:
        """The monitoring tool can be polled."""
        return self.ok and (self.tool_found or self.installed)


@dataclass
class WatchResult:
    """Outcome of a full run. Only reached on error or a tick bound."""

    bootstrap: BootstrapResult
    ticks: int = 0
    error: str | None = None
    exception: GpuMonitorError | None = None


def bootstrap(
    echo: Callable[[str], None] = print,
    install: bool = True,
) -> BootstrapResult:
    """Identify the GPU and make sure its monitoring tool is present.

    Args:
        echo: Sink for progress lines.
        install: When False, stop after choosing the package manager
            (read-only detection).

    Returns:
        BootstrapResult; ``error`` is set on the first failure.
    """
    result = BootstrapResult()

    try:
        echo("Identifying GPU type...")
        vendor = identify_gpu()
        result.vendor = vendor
        echo(f"GPU type: {vendor.label}")

        binary = tool_spec(vendor).binary
        echo(f"Checking if {binary} exists locally...")
        result.tool_found = tool_present(vendor)
        echo(f"{binary} exists locally: {str(result.tool_found).lower()}")
        if result.tool_found:
            return result

        echo("Identifying package manager...")
        manager = identify_package_manager()
        result.package_manager = manager
        echo(f"Package manager: {manager.label}")
        if not install:
            return result

        echo(f"Installing {tool_spec(vendor).install_package} with {manager}...")
        install_tool(vendor, manager)
        result.installed = True
    except GpuMonitorError as e:
        logger.debug("Bootstrap failed: %r", e)
        result.error = str(e)
        result.exception = e

    return result


def watch(
    echo: Callable[[str], None] = print,
    sleep: Callable[[float], None] | None = None,
    max_ticks: int | None = None,
) -> WatchResult:
    """Bootstrap, then poll utilization until an error occurs.

    With ``max_ticks=None`` this only returns on error.
    """
    boot = bootstrap(echo=echo)
    result = WatchResult(bootstrap=boot)
    if not boot.ok:
        result.error = boot.error
        result.exception = boot.exception
        return result

    assert boot.vendor is not None  # set whenever bootstrap succeeded
    try:
        result.ticks = run_poller(
            boot.vendor,
            echo=echo,
            sleep=sleep or time.sleep,
            interval=POLL_INTERVAL_SECONDS,
            max_ticks=max_ticks,
        )
    except GpuMonitorError as e:
        logger.debug("Polling stopped: %r", e)
        result.error = str(e)
        result.exception = e

    return result
