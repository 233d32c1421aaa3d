"""
L3 Detection: Environment capabilities.

Read-only probes: is the vendor's monitoring tool on the search path,
and which package manager could install it. Both use a ``which``
subprocess, so a missing ``which`` is an error rather than a silent
"not found".
"""

from __future__ import annotations

import logging

from gpumon.core.errors import NoPackageManagerFound
from gpumon.core.models.gpu import GpuVendor, PackageManagerKind
from gpumon.core.services.tool_install.data.registry import (
    PACKAGE_MANAGER_CHECK_ORDER,
    package_manager_spec,
    tool_spec,
)
from gpumon.core.services.tool_install.execution.subprocess_runner import _run_subprocess

logger = logging.getLogger(__name__)


def _on_search_path(binary: str) -> bool:
    """``which <binary>``: exit 0 means resolvable.

    Raises:
        ToolExecutionFailed: ``which`` itself could not be spawned.
    """
    result = _run_subprocess(["which", binary])
    return result.returncode == 0


def tool_present(vendor: GpuVendor) -> bool:
    """Check whether the vendor's monitoring tool is installed.

    Absence is the normal case on a fresh host and returns False.

    Raises:
        ToolExecutionFailed: The lookup mechanism could not run.
    """
    spec = tool_spec(vendor)
    found = _on_search_path(spec.binary)
    logger.info("%s %s", spec.binary, "found" if found else "not found")
    return found


def identify_package_manager() -> PackageManagerKind:
    """Return the first available package manager: apt, pacman, yum.

    Raises:
        NoPackageManagerFound: None of them is on the search path.
        ToolExecutionFailed: The lookup mechanism could not run.
    """
    tried: list[str] = []
    for kind in PACKAGE_MANAGER_CHECK_ORDER:
        binary = package_manager_spec(kind).binary
        tried.append(binary)
        if _on_search_path(binary):
            logger.info("Using package manager: %s", binary)
            return kind
    raise NoPackageManagerFound(tried)
