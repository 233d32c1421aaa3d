"""
L4 Execution: subprocess runner and installer.
"""

from gpumon.core.services.tool_install.execution.installer import (  # noqa: F401
    install_command,
    install_tool,
)
from gpumon.core.services.tool_install.execution.subprocess_runner import (  # noqa: F401
    run_for_text,
)
