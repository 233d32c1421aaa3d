"""
Error taxonomy: every failure that can end a run.

All errors are fatal. Services raise them, nothing retries them, and
they flow up to the use case layer as a single ``GpuMonitorError``
family so callers can observe failures without the process exiting.
"""

from __future__ import annotations


class GpuMonitorError(Exception):
    """Base class for all gpumon failures."""


class ToolExecutionFailed(GpuMonitorError):
    """A required subprocess could not be spawned."""

    def __init__(self, command: list[str], reason: str) -> None:
        self.command = list(command)
        self.reason = reason
        super().__init__(f"Failed to execute '{' '.join(self.command)}': {reason}")


class UnsupportedHardware(GpuMonitorError):
    """No NVIDIA, AMD or Intel device found in the PCI listing."""

    def __init__(self, message: str = "GPU not found: no NVIDIA, AMD or Intel device listed") -> None:
        super().__init__(message)


class NoPackageManagerFound(GpuMonitorError):
    """None of the supported package managers is on the search path."""

    def __init__(self, tried: list[str]) -> None:
        self.tried = list(tried)
        super().__init__(
            f"Package manager not found (tried: {', '.join(self.tried)})"
        )


class InstallFailed(GpuMonitorError):
    """The package manager exited non-zero or could not be started."""

    def __init__(
        self,
        command: list[str],
        returncode: int | None = None,
        stderr: str = "",
        reason: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        cmd = " ".join(self.command)
        if returncode is None:
            message = f"Install failed: could not run '{cmd}': {reason}"
        else:
            message = f"Install failed: '{cmd}' exited with status {returncode}"
            if stderr:
                message += f"\n{stderr}"
        super().__init__(message)


class InvalidOutputEncoding(GpuMonitorError):
    """Captured subprocess output is not valid UTF-8 text."""

    def __init__(self, command: list[str]) -> None:
        self.command = list(command)
        super().__init__(f"Output of '{' '.join(self.command)}' is not valid UTF-8")
