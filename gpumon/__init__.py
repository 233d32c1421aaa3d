"""gpumon: single-host GPU utilization monitor."""

__version__ = "0.1.0"
