"""
L3 Detection: GPU vendor identification.

Read-only probe: ``lspci -v``. The vendor is classified by
substring match against a fixed priority list, so a host with both
an integrated and a discrete GPU always resolves the same way.
"""

from __future__ import annotations

import logging

from gpumon.core.errors import UnsupportedHardware
from gpumon.core.models.gpu import GpuVendor
from gpumon.core.services.tool_install.data.registry import (
    PCI_LISTING_COMMAND,
    VENDOR_CHECK_ORDER,
)
from gpumon.core.services.tool_install.execution.subprocess_runner import run_for_text

logger = logging.getLogger(__name__)


def classify_vendor(pci_text: str) -> GpuVendor:
    """Classify the GPU vendor from a PCI device listing.

    Markers are checked in ``VENDOR_CHECK_ORDER``; the first marker
    present anywhere in the text wins, e.g. text mentioning both
    "AMD" and "NVIDIA" is NVIDIA.

    Raises:
        UnsupportedHardware: If no marker is present.
    """
    for marker, vendor in VENDOR_CHECK_ORDER:
        if marker in pci_text:
            logger.debug("PCI listing matched %r → %s", marker, vendor)
            return vendor
    raise UnsupportedHardware()


def identify_gpu() -> GpuVendor:
    """Run the PCI listing and classify the GPU vendor.

    Raises:
        ToolExecutionFailed: ``lspci`` could not be spawned.
        InvalidOutputEncoding: ``lspci`` output is not UTF-8.
        UnsupportedHardware: No known vendor in the listing.
    """
    text = run_for_text(PCI_LISTING_COMMAND)
    return classify_vendor(text)
