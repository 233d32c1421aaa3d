"""
L0 Data: Monitoring tool and package manager registry.

Pure data plus two lookup functions. No subprocess, no I/O.
Check orders are tuples: iteration order is the priority order.
"""

from __future__ import annotations

from gpumon.core.models.gpu import (
    GpuVendor,
    PackageManagerKind,
    PackageManagerSpec,
    ToolSpec,
)

TOOL_SPECS: dict[GpuVendor, ToolSpec] = {
    GpuVendor.NVIDIA: ToolSpec(
        vendor=GpuVendor.NVIDIA,
        binary="nvidia-smi",
        poll_args=("--query-gpu=utilization.gpu", "--format=csv,noheader,nounits"),
        install_package="nvidia-smi",
    ),
    GpuVendor.AMD: ToolSpec(
        vendor=GpuVendor.AMD,
        binary="radeontop",
        poll_args=("-d", "-"),
        install_package="radeontop",
    ),
    GpuVendor.INTEL: ToolSpec(
        vendor=GpuVendor.INTEL,
        binary="intel_gpu_top",
        poll_args=("-s", "1", "-o", "-"),
        install_package="intel_gpu_top",
    ),
}

PACKAGE_MANAGER_SPECS: dict[PackageManagerKind, PackageManagerSpec] = {
    PackageManagerKind.APT: PackageManagerSpec(
        kind=PackageManagerKind.APT,
        binary="apt",
        install_verb="install",
        non_interactive_flag="-y",
    ),
    PackageManagerKind.PACMAN: PackageManagerSpec(
        kind=PackageManagerKind.PACMAN,
        binary="pacman",
        install_verb="-S",
        non_interactive_flag="--noconfirm",
    ),
    PackageManagerKind.YUM: PackageManagerSpec(
        kind=PackageManagerKind.YUM,
        binary="yum",
        install_verb="install",
        non_interactive_flag="-y",
    ),
}

# (substring in `lspci -v` output, vendor). First substring present wins,
# regardless of where it appears in the text.
VENDOR_CHECK_ORDER: tuple[tuple[str, GpuVendor], ...] = (
    ("NVIDIA", GpuVendor.NVIDIA),
    ("AMD", GpuVendor.AMD),
    ("Intel", GpuVendor.INTEL),
)

PACKAGE_MANAGER_CHECK_ORDER: tuple[PackageManagerKind, ...] = (
    PackageManagerKind.APT,
    PackageManagerKind.PACMAN,
    PackageManagerKind.YUM,
)

PCI_LISTING_COMMAND: list[str] = ["lspci", "-v"]


def tool_spec(vendor: GpuVendor) -> ToolSpec:
    """Return the monitoring tool spec for a vendor."""
    return TOOL_SPECS[vendor]


def package_manager_spec(kind: PackageManagerKind) -> PackageManagerSpec:
    """Return the install spec for a package manager."""
    return PACKAGE_MANAGER_SPECS[kind]
