"""
Shared utilities for AUTOSCOPE.

Common functionality used across contexts:
- Score arithmetic (clamping, rounding)
- Logging setup
- Report formatting
- Timestamps
"""

from autoscope.utils.scoring import clamp, round_half_up
from autoscope.utils.timestamp import now, now_ms

__all__ = ["clamp", "round_half_up", "now", "now_ms"]
