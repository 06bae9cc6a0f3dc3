"""
Core utilities.

Helpers with no grid-specific logic.
"""

from .performance_monitor import Timing, timer

__all__ = [
    "Timing",
    "timer",
]
