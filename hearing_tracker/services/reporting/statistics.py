"""
Statistics engine: hearing totals and per-party speaking metrics.

Works on finalized or in-progress snapshots and tolerates partial or
tampered state (plain dicts with missing keys, wrong types) by treating
anything unreadable as zero or empty.
"""

import math
import numbers
from collections.abc import Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from hearing_tracker.core.models import PartyStatistics, SpeakingStatistics
from hearing_tracker.services.tracking.boundary import defensive


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return a read-only mapping view of a model or mapping; anything else is empty."""
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, Mapping):
        return value
    return {}


def read_field(view: Mapping[str, Any], name: str) -> Any:
    """Look up a snake_case field, accepting its camelCase alias too."""
    if name in view:
        return view[name]
    return view.get(to_camel(name))


def as_millis(value: Any) -> int:
    """Coerce a stored duration/timestamp to int milliseconds, 0 if unusable."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return int(value)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _percentage(part: int, whole: int) -> str:
    """One-decimal share of ``whole``, rounding exact ties away from zero."""
    share = Decimal(part * 100) / Decimal(whole)
    return str(share.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _empty_statistics(*_args: Any, **_kwargs: Any) -> SpeakingStatistics:
    return SpeakingStatistics()


@defensive(fallback=_empty_statistics)
def calculate_statistics(state: Any) -> SpeakingStatistics:
    """Derive totals, silence and per-party metrics from a snapshot.

    Percentages are one-decimal strings that sum to ~100; when nobody has
    spoken yet every percentage is ``"0"``. Parties come back ordered by
    descending total time, ties keeping registration order.

    Args:
        state: A ``TrackingState``, an equivalent mapping, or None.

    Returns:
        SpeakingStatistics, zeroed for absent or unreadable input.
    """
    view = as_mapping(state)
    start = as_millis(read_field(view, "hearing_start_time"))
    end = as_millis(read_field(view, "hearing_end_time"))
    total_hearing_time = max(0, end - start)

    parties = read_field(view, "parties")
    if not isinstance(parties, Mapping):
        parties = {}
    records = {
        str(name): as_mapping(record)
        for name, record in parties.items()
        if isinstance(record, (Mapping, BaseModel))
    }

    total_speaking_time = sum(as_millis(read_field(r, "total_time")) for r in records.values())

    per_party: dict[str, PartyStatistics] = {}
    for name, record in records.items():
        total_time = as_millis(read_field(record, "total_time"))
        segments = read_field(record, "segments")
        if not isinstance(segments, Sequence) or isinstance(segments, str):
            segments = ()
        segment_count = len(segments)

        if total_speaking_time > 0:
            percentage = _percentage(total_time, total_speaking_time)
        else:
            percentage = "0"

        per_party[name] = PartyStatistics(
            total_time=total_time,
            percentage=percentage,
            segment_count=segment_count,
            average_segment_time=_round_half_up(total_time / segment_count) if segment_count else 0,
        )

    ordered = dict(sorted(per_party.items(), key=lambda item: item[1].total_time, reverse=True))
    return SpeakingStatistics(
        total_hearing_time=total_hearing_time,
        total_speaking_time=total_speaking_time,
        silence_time=max(0, total_hearing_time - total_speaking_time),
        parties=ordered,
    )
