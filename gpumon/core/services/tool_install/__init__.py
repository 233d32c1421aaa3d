"""
Tool installation service: package re-exports.

    from gpumon.core.services.tool_install import identify_gpu, install_tool

Each symbol lives in its single-responsibility module inside the
appropriate layer (data → detection → execution).
"""

# ── L0: Data ──
from gpumon.core.services.tool_install.data.registry import (  # noqa: F401
    package_manager_spec,
    tool_spec,
)

# ── L3: Detection ──
from gpumon.core.services.tool_install.detection.environment import (  # noqa: F401
    identify_package_manager,
    tool_present,
)
from gpumon.core.services.tool_install.detection.hardware import (  # noqa: F401
    classify_vendor,
    identify_gpu,
)

# ── L4: Execution ──
from gpumon.core.services.tool_install.execution.installer import (  # noqa: F401
    install_command,
    install_tool,
)
