"""
Report generators built on the statistics engine.

``generate_text_report`` renders the plain-text speaking-time report that
the UI offers for download; ``generate_chart_data`` projects statistics
into a pie-chart payload; ``build_session_report`` bundles both with the
statistics when a hearing's report is saved. Writing files and drawing
charts is left to the caller.
"""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from hearing_tracker.core.config import get_settings
from hearing_tracker.core.models import (
    ChartData,
    ChartDataset,
    SessionReport,
    SpeakingStatistics,
)
from hearing_tracker.services.reporting.formatter import format_time
from hearing_tracker.services.reporting.statistics import (
    as_mapping,
    as_millis,
    calculate_statistics,
    read_field,
)
from hearing_tracker.services.tracking.boundary import defensive
from hearing_tracker.services.tracking.clock import Clock, SystemClock, read_now
from hearing_tracker.services.tracking.state_machine import initialize_speaking_time

logger = logging.getLogger(__name__)

REPORT_ERROR_TEXT = "Error generating report"
NOT_AVAILABLE = "N/A"

# Docket column -> report label
CASE_FIELDS = (
    ("Case Number", "Case"),
    ("Client Name", "Client"),
    ("Division", "Division"),
)


def _format_wall_clock(ms: Any, fmt: str) -> str | None:
    """Render an epoch-millisecond timestamp in local time, or None if invalid."""
    millis = as_millis(ms)
    if not millis:
        return None
    try:
        return datetime.fromtimestamp(millis / 1000).strftime(fmt)
    except (OverflowError, OSError, ValueError):
        logger.warning("Unrenderable timestamp in report: %r", ms)
        return None


def _timeline_line(index: int, entry: Any, time_format: str) -> str | None:
    """Format one timeline entry; None for entries missing required fields."""
    view = as_mapping(entry)
    party = read_field(view, "party")
    duration = read_field(view, "duration")
    if not party or not isinstance(party, str) or duration is None:
        return None
    started = _format_wall_clock(read_field(view, "start"), time_format)
    if started is None:
        return None
    return f"{index}. {started} - {party} ({format_time(duration)})"


@defensive(fallback=lambda *_args, **_kwargs: REPORT_ERROR_TEXT)
def generate_text_report(state: Any, case_metadata: Mapping[str, Any] | None = None) -> str:
    """Render the speaking-time report for a hearing.

    Args:
        state: Tracking snapshot (model or mapping); None reports an empty hearing.
        case_metadata: Docket row for the hearing. ``Case Number``,
            ``Client Name`` and ``Division`` are shown, ``N/A`` when absent.

    Returns:
        The report text, or ``REPORT_ERROR_TEXT`` if it could not be built.
    """
    settings = get_settings()
    if state is None:
        state = initialize_speaking_time()
    metadata = case_metadata if isinstance(case_metadata, Mapping) else {}
    stats = calculate_statistics(state)
    view = as_mapping(state)

    hearing_date = _format_wall_clock(
        read_field(view, "hearing_start_time"), settings.report_datetime_format
    )

    lines = ["SPEAKING TIME REPORT", "====================", ""]
    for key, label in CASE_FIELDS:
        lines.append(f"{label}: {metadata.get(key) or NOT_AVAILABLE}")
    lines.append(f"Date: {hearing_date or NOT_AVAILABLE}")
    lines.append("")

    lines += [
        "SUMMARY",
        "-------",
        f"Total Hearing Duration: {format_time(stats.total_hearing_time)}",
        f"Total Speaking Time: {format_time(stats.total_speaking_time)}",
        f"Silence/Transitions: {format_time(stats.silence_time)}",
        "",
        "SPEAKING TIME BY PARTY",
        "---------------------",
    ]
    for party, data in stats.parties.items():
        lines += [
            f"{party}:",
            f"  Total Time: {format_time(data.total_time)} ({data.percentage}%)",
            f"  Speaking Turns: {data.segment_count}",
            f"  Average per Turn: {format_time(data.average_segment_time)}",
            "",
        ]

    lines += ["TIMELINE", "--------"]
    timeline = read_field(view, "timeline")
    if isinstance(timeline, (list, tuple)):
        for index, entry in enumerate(timeline, start=1):
            line = _timeline_line(index, entry, settings.report_time_format)
            if line is not None:
                lines.append(line)

    return "\n".join(lines) + "\n"


def _empty_chart(*_args: Any, **_kwargs: Any) -> ChartData:
    return ChartData(datasets=[ChartDataset(border_color=get_settings().chart_border_color)])


@defensive(fallback=_empty_chart)
def generate_chart_data(state: Any) -> ChartData:
    """Project per-party totals into a pie-chart payload.

    Labels follow the statistics order (descending total time). Colors come
    from ``settings.chart_palette``, cycled when there are more parties than
    colors and truncated when there are fewer.
    """
    settings = get_settings()
    stats = calculate_statistics(state)
    labels = list(stats.parties)
    palette = settings.chart_palette
    colors = [palette[i % len(palette)] for i in range(len(labels))] if palette else []

    return ChartData(
        labels=labels,
        datasets=[
            ChartDataset(
                data=[p.total_time for p in stats.parties.values()],
                background_color=colors,
                border_width=2,
                border_color=settings.chart_border_color,
            )
        ],
    )


def _failed_session_report(*_args: Any, **_kwargs: Any) -> SessionReport:
    return SessionReport(
        report=REPORT_ERROR_TEXT,
        chart_data=_empty_chart(),
        stats=SpeakingStatistics(),
        timestamp=0,
    )


@defensive(fallback=_failed_session_report)
def build_session_report(
    state: Any,
    case_metadata: Mapping[str, Any] | None = None,
    clock: Clock | None = None,
) -> SessionReport:
    """Bundle report text, chart data and statistics for saving."""
    return SessionReport(
        report=generate_text_report(state, case_metadata),
        chart_data=generate_chart_data(state),
        stats=calculate_statistics(state),
        timestamp=read_now(clock or SystemClock()),
    )
