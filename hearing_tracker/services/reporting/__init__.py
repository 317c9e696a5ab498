"""
Reporting module - duration formatting, statistics and report projections.
"""

from .formatter import format_time
from .reports import build_session_report, generate_chart_data, generate_text_report
from .statistics import calculate_statistics

__all__ = [
    "build_session_report",
    "calculate_statistics",
    "format_time",
    "generate_chart_data",
    "generate_text_report",
]
