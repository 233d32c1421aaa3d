"""
L4 Execution: Install the monitoring tool.

The only step with a host-visible side effect. One attempt, one
package manager; any failure ends the run.
"""

from __future__ import annotations

import logging

from gpumon.core.errors import InstallFailed, ToolExecutionFailed
from gpumon.core.models.gpu import GpuVendor, PackageManagerKind
from gpumon.core.services.tool_install.data.registry import (
    package_manager_spec,
    tool_spec,
)
from gpumon.core.services.tool_install.execution.subprocess_runner import (
    _run_subprocess,
    _tail,
)

logger = logging.getLogger(__name__)


def install_command(vendor: GpuVendor, manager: PackageManagerKind) -> list[str]:
    """Full argv that installs the vendor's tool with ``manager``.

    e.g. ``["pacman", "-S", "--noconfirm", "radeontop"]``
    """
    package = tool_spec(vendor).install_package
    return package_manager_spec(manager).install_command(package)


def install_tool(vendor: GpuVendor, manager: PackageManagerKind) -> None:
    """Install the vendor's monitoring tool.

    Raises:
        InstallFailed: The package manager exited non-zero or could
            not be spawned.
    """
    cmd = install_command(vendor, manager)
    logger.info("Installing: %s", " ".join(cmd))

    try:
        result = _run_subprocess(cmd)
    except ToolExecutionFailed as exc:
        raise InstallFailed(cmd, reason=exc.reason) from exc

    if result.returncode != 0:
        raise InstallFailed(cmd, returncode=result.returncode, stderr=_tail(result.stderr))

    logger.info("Installed %s with %s", tool_spec(vendor).install_package, manager)
