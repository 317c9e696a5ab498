"""Duration formatting for timers and reports."""

import math
import numbers
from typing import Any


def format_time(ms: Any) -> str:
    """Render a millisecond duration as ``M:SS`` or ``H:MM:SS``.

    Non-numeric, non-finite and negative values render as ``"0:00"``.
    Hours are unbounded, so multi-day durations keep counting up.

    >>> format_time(3661000)
    '1:01:01'
    """
    if isinstance(ms, bool) or not isinstance(ms, numbers.Real):
        return "0:00"
    if isinstance(ms, numbers.Integral):
        total_seconds = int(ms) // 1000
    else:
        value = float(ms)
        if not math.isfinite(value):
            return "0:00"
        total_seconds = math.floor(value / 1000)
    if total_seconds < 0:
        return "0:00"

    total_minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{total_minutes}:{seconds:02d}"
