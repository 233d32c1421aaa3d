"""
L0 Data: pure registry data, re-exported.
"""

from gpumon.core.services.tool_install.data.registry import (  # noqa: F401
    PACKAGE_MANAGER_CHECK_ORDER,
    PACKAGE_MANAGER_SPECS,
    PCI_LISTING_COMMAND,
    TOOL_SPECS,
    VENDOR_CHECK_ORDER,
    package_manager_spec,
    tool_spec,
)
