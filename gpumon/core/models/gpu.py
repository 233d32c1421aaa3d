"""
GPU models: vendors, package managers, and the commands they imply.

Vendor and package manager are closed sets. Everything else here is
derived from them: a ToolSpec says which binary reports utilization
for a vendor and how to install it, a PackageManagerSpec says how to
drive a package manager non-interactively.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class GpuVendor(StrEnum):
    """Supported GPU vendors."""

    NVIDIA = "nvidia"
    AMD = "amd"
    INTEL = "intel"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``Nvidia``."""
        return _VENDOR_LABELS[self]


class PackageManagerKind(StrEnum):
    """Supported host package managers."""

    APT = "apt"
    PACMAN = "pacman"
    YUM = "yum"

    @property
    def label(self) -> str:
        return self.value.capitalize()


_VENDOR_LABELS: dict[GpuVendor, str] = {
    GpuVendor.NVIDIA: "Nvidia",
    GpuVendor.AMD: "Amd",
    GpuVendor.INTEL: "Intel",
}


class ToolSpec(BaseModel):
    """Monitoring tool for one vendor.

    ``poll_args`` are the arguments passed after the binary on every
    tick. ``install_package`` is the name handed to the package manager
    when the binary is missing.
    """

    model_config = ConfigDict(frozen=True)

    vendor: GpuVendor
    binary: str                                  # e.g. "nvidia-smi"
    poll_args: tuple[str, ...] = Field(default_factory=tuple)
    install_package: str

    @property
    def presence_check(self) -> list[str]:
        """Search-path lookup for the binary (exit 0 = present)."""
        return ["which", self.binary]

    @property
    def poll_command(self) -> list[str]:
        """Full argv for one utilization sample."""
        return [self.binary, *self.poll_args]


class PackageManagerSpec(BaseModel):
    """How to install a package non-interactively with one manager."""

    model_config = ConfigDict(frozen=True)

    kind: PackageManagerKind
    binary: str                    # e.g. "pacman"
    install_verb: str              # e.g. "-S"
    non_interactive_flag: str      # e.g. "--noconfirm"

    def install_command(self, package: str) -> list[str]:
        """``<binary> <verb> <flag> <package>``"""
        return [self.binary, self.install_verb, self.non_interactive_flag, package]
