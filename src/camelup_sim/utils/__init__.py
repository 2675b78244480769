"""Utility modules for the simulator."""

from .rich_display import SimulationDisplay, setup_rich_logging

__all__ = [
    "SimulationDisplay",
    "setup_rich_logging",
]
