"""
Domain models: GPU vendors, package managers, and their specs.

All models are re-exported here for convenient access:

    from gpumon.core.models import GpuVendor, PackageManagerKind, ToolSpec
"""

from gpumon.core.models.gpu import (
    GpuVendor,
    PackageManagerKind,
    PackageManagerSpec,
    ToolSpec,
)

__all__ = [
    "GpuVendor",
    "PackageManagerKind",
    "PackageManagerSpec",
    "ToolSpec",
]
