"""Timestamp helpers for log directories and subtask ids."""

import time
from datetime import datetime


def now() -> str:
    """
    Current local time formatted for directory names.

    Returns:
        Timestamp like "20251114_123456"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)
