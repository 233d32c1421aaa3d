"""
L3 Detection: ``__init__.py`` re-exports all detection functions.

These functions READ system state but never WRITE.
"""

from gpumon.core.services.tool_install.detection.environment import (  # noqa: F401
    identify_package_manager,
    tool_present,
)
from gpumon.core.services.tool_install.detection.hardware import (  # noqa: F401
    classify_vendor,
    identify_gpu,
)
