"""
Tests for models and the tool / package manager registry.
"""

import pytest
from pydantic import ValidationError

from gpumon.core.models import GpuVendor, PackageManagerKind, PackageManagerSpec, ToolSpec
from gpumon.core.services.tool_install.data.registry import (
    PACKAGE_MANAGER_CHECK_ORDER,
    TOOL_SPECS,
    VENDOR_CHECK_ORDER,
    package_manager_spec,
    tool_spec,
)
from gpumon.core.services.tool_install.execution.installer import install_command


class TestToolRegistry:
    def test_every_vendor_has_a_tool(self):
        for vendor in GpuVendor:
            spec = tool_spec(vendor)
            assert spec.vendor is vendor
            assert spec.binary
            assert spec.install_package

    def test_binaries_are_unique(self):
        binaries = [spec.binary for spec in TOOL_SPECS.values()]
        assert len(set(binaries)) == len(GpuVendor)

    def test_binaries(self):
        assert tool_spec(GpuVendor.NVIDIA).binary == "nvidia-smi"
        assert tool_spec(GpuVendor.AMD).binary == "radeontop"
        assert tool_spec(GpuVendor.INTEL).binary == "intel_gpu_top"

    def test_poll_commands(self):
        assert tool_spec(GpuVendor.NVIDIA).poll_command == [
            "nvidia-smi",
            "--query-gpu=utilization.gpu",
            "--format=csv,noheader,nounits",
        ]
        assert tool_spec(GpuVendor.AMD).poll_command == ["radeontop", "-d", "-"]
        assert tool_spec(GpuVendor.INTEL).poll_command == ["intel_gpu_top", "-s", "1", "-o", "-"]

    def test_presence_check(self):
        assert tool_spec(GpuVendor.AMD).presence_check == ["which", "radeontop"]

    def test_specs_are_frozen(self):
        with pytest.raises(ValidationError):
            tool_spec(GpuVendor.NVIDIA).binary = "other"


class TestPackageManagerRegistry:
    def test_every_manager_has_a_spec(self):
        for kind in PackageManagerKind:
            assert package_manager_spec(kind).kind is kind

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (PackageManagerKind.APT, ["apt", "install", "-y", "pkg"]),
            (PackageManagerKind.PACMAN, ["pacman", "-S", "--noconfirm", "pkg"]),
            (PackageManagerKind.YUM, ["yum", "install", "-y", "pkg"]),
        ],
    )
    def test_install_command(self, kind, expected):
        assert package_manager_spec(kind).install_command("pkg") == expected

    def test_install_command_for_vendor(self):
        assert install_command(GpuVendor.AMD, PackageManagerKind.PACMAN) == [
            "pacman", "-S", "--noconfirm", "radeontop",
        ]
        assert install_command(GpuVendor.NVIDIA, PackageManagerKind.APT) == [
            "apt", "install", "-y", "nvidia-smi",
        ]


class TestCheckOrders:
    def test_vendor_order(self):
        assert [vendor for _, vendor in VENDOR_CHECK_ORDER] == [
            GpuVendor.NVIDIA, GpuVendor.AMD, GpuVendor.INTEL,
        ]

    def test_package_manager_order(self):
        assert PACKAGE_MANAGER_CHECK_ORDER == (
            PackageManagerKind.APT, PackageManagerKind.PACMAN, PackageManagerKind.YUM,
        )


class TestLabels:
    def test_vendor_labels(self):
        assert GpuVendor.NVIDIA.label == "Nvidia"
        assert GpuVendor.AMD.label == "Amd"
        assert GpuVendor.INTEL.label == "Intel"

    def test_manager_labels(self):
        assert PackageManagerKind.PACMAN.label == "Pacman"

    def test_str_values(self):
        assert str(GpuVendor.AMD) == "amd"
        assert f"{PackageManagerKind.YUM}" == "yum"

    def test_models_construct(self):
        spec = ToolSpec(vendor="intel", binary="x", install_package="x")
        assert spec.vendor is GpuVendor.INTEL
        assert spec.poll_command == ["x"]
        pm = PackageManagerSpec(kind="apt", binary="apt", install_verb="install", non_interactive_flag="-y")
        assert pm.kind is PackageManagerKind.APT
