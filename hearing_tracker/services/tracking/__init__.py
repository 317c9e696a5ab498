"""
Tracking module - speaking-time state machine and participant registry.
"""

from .clock import Clock, ManualClock, SystemClock
from .registry import add_party, remove_party
from .state_machine import (
    check_invariants,
    current_speaker_elapsed,
    hearing_elapsed,
    initialize_speaking_time,
    reset_tracking,
    start_speaking,
    stop_tracking,
)

__all__ = [
    "Clock",
    "ManualClock",
    "SystemClock",
    "add_party",
    "check_invariants",
    "current_speaker_elapsed",
    "hearing_elapsed",
    "initialize_speaking_time",
    "remove_party",
    "reset_tracking",
    "start_speaking",
    "stop_tracking",
]
