"""Speaking-time state machine.

Tracks which participant holds the floor and for how long. States move
between idle, active (someone speaking) and stopped (recess); each
transition takes a ``TrackingState`` snapshot and returns a new one.

Usage::

    from hearing_tracker.services.tracking import (
        initialize_speaking_time, start_speaking, stop_tracking,
    )

    state = initialize_speaking_time(["State", "Defense", "Court"])
    state = start_speaking(state, "Court")
    state = start_speaking(state, "State")
    state = stop_tracking(state)
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from hearing_tracker.core.config import get_settings
from hearing_tracker.core.exceptions import TrackingInvariantError
from hearing_tracker.core.models import (
    ParticipantRecord,
    Segment,
    TimelineEntry,
    TrackingState,
)
from hearing_tracker.services.tracking.boundary import defensive, unchanged_state
from hearing_tracker.services.tracking.clock import Clock, SystemClock, read_now

logger = logging.getLogger(__name__)

_SYSTEM_CLOCK = SystemClock()


def clean_party_name(name: Any) -> str | None:
    """Return the trimmed participant name, or None if it is unusable."""
    if not isinstance(name, str):
        return None
    cleaned = name.strip()
    return cleaned or None


def coerce_state(state: TrackingState | Mapping[str, Any]) -> TrackingState:
    """Validate a snapshot handed over by the UI layer.

    Plain mappings (snake_case or camelCase keys) are accepted; keys whose
    value is None fall back to the model defaults.
    """
    if isinstance(state, TrackingState):
        return state
    return TrackingState.model_validate({k: v for k, v in state.items() if v is not None})


def check_invariants(state: TrackingState) -> None:
    """Assert the accounting invariants of a snapshot.

    Raises:
        TrackingInvariantError: On the first violated invariant.
    """
    if (state.current_speaker is not None) != state.is_active:
        raise TrackingInvariantError(
            f"current_speaker={state.current_speaker!r} disagrees with is_active={state.is_active}"
        )
    if state.current_speaker is not None and state.current_speaker not in state.parties:
        raise TrackingInvariantError(f"Current speaker {state.current_speaker!r} is not registered")

    for name, record in state.parties.items():
        segment_sum = sum(s.duration for s in record.segments)
        if segment_sum != record.total_time:
            raise TrackingInvariantError(
                f"{name}: total_time {record.total_time} != segment sum {segment_sum}"
            )

    # Removed participants take their segments with them, so the timeline
    # may only ever be longer than what the registry still holds.
    segment_count = sum(len(r.segments) for r in state.parties.values())
    if len(state.timeline) < segment_count:
        raise TrackingInvariantError(
            f"timeline has {len(state.timeline)} entries for {segment_count} segments"
        )


def _verified(state: TrackingState) -> TrackingState:
    if get_settings().strict_mode:
        check_invariants(state)
    return state


def _close_turn(
    state: TrackingState, now: int
) -> tuple[dict[str, ParticipantRecord], tuple[TimelineEntry, ...]]:
    """Finalize the open turn at ``now``; returns new parties and timeline."""
    speaker = state.current_speaker
    record = state.parties.get(speaker) if speaker is not None else None
    if record is None or state.start_time is None:
        return dict(state.parties), state.timeline

    duration = now - state.start_time
    if duration < 0:
        logger.warning(
            "Clock moved backward during %s's turn (%d ms); keeping negative duration",
            speaker,
            duration,
        )

    parties = dict(state.parties)
    parties[speaker] = ParticipantRecord(
        total_time=record.total_time + duration,
        segments=(*record.segments, Segment(start=state.start_time, end=now, duration=duration)),
    )
    entry = TimelineEntry(party=speaker, start=state.start_time, end=now, duration=duration)
    logger.debug("Closed turn for %s: %d ms", speaker, duration)
    return parties, (*state.timeline, entry)


def initialize_speaking_time(party_names: Sequence[str] | None = None) -> TrackingState:
    """Build a fresh, idle tracking state.

    Args:
        party_names: Participants to register. Anything other than a list or
            tuple falls back to ``settings.default_parties``. Non-string and
            blank names are skipped; duplicates collapse.
    """
    if not isinstance(party_names, (list, tuple)):
        party_names = get_settings().default_parties

    parties: dict[str, ParticipantRecord] = {}
    for raw in party_names:
        name = clean_party_name(raw)
        if name is not None and name not in parties:
            parties[name] = ParticipantRecord()
    return TrackingState(parties=parties)


def _fresh_state(*_args: Any, **_kwargs: Any) -> TrackingState:
    return initialize_speaking_time()


@defensive(fallback=unchanged_state)
def start_speaking(
    state: TrackingState | Mapping[str, Any] | None,
    name: str,
    clock: Clock | None = None,
) -> TrackingState:
    """Give the floor to ``name``.

    Closes the previous speaker's turn, registers unknown participants on
    the fly and stamps the hearing start on the first transition. Asking
    the current speaker to start again changes nothing.

    Args:
        state: Current snapshot; None yields a fresh state.
        name: Participant taking the floor.
        clock: Time source; defaults to the system clock.

    Returns:
        The new snapshot, or ``state`` itself when the call is a no-op.
    """
    if state is None:
        return initialize_speaking_time()
    party = clean_party_name(name)
    if party is None:
        return state

    current = coerce_state(state)
    if current.current_speaker == party:
        return current

    now = read_now(clock or _SYSTEM_CLOCK)
    parties, timeline = _close_turn(current, now)
    if party not in parties:
        logger.info("Auto-registering participant %s", party)
        parties[party] = ParticipantRecord()

    hearing_start = current.hearing_start_time
    if hearing_start is None:
        hearing_start = now
        logger.info("Hearing started at %d", now)

    return _verified(
        current.model_copy(
            update={
                "parties": parties,
                "timeline": timeline,
                "current_speaker": party,
                "start_time": now,
                "hearing_start_time": hearing_start,
                "is_active": True,
                "is_paused": False,
            }
        )
    )


@defensive(fallback=unchanged_state)
def stop_tracking(
    state: TrackingState | Mapping[str, Any] | None,
    clock: Clock | None = None,
) -> TrackingState:
    """Call a recess: close the open turn and stamp the hearing end."""
    if state is None:
        return initialize_speaking_time()

    current = coerce_state(state)
    now = read_now(clock or _SYSTEM_CLOCK)
    parties, timeline = _close_turn(current, now)
    logger.info("Tracking stopped at %d (speaker was %s)", now, current.current_speaker)

    return _verified(
        current.model_copy(
            update={
                "parties": parties,
                "timeline": timeline,
                "current_speaker": None,
                "start_time": None,
                "hearing_end_time": now,
                "is_active": False,
                "is_paused": True,
            }
        )
    )


@defensive(fallback=_fresh_state)
def reset_tracking(state: TrackingState | Mapping[str, Any] | None) -> TrackingState:
    """Start over with the same participants and no recorded time."""
    if state is None:
        return initialize_speaking_time()
    return initialize_speaking_time(list(coerce_state(state).parties))


@defensive(fallback=lambda *_args, **_kwargs: 0)
def current_speaker_elapsed(
    state: TrackingState | Mapping[str, Any] | None,
    clock: Clock | None = None,
) -> int:
    """Milliseconds the current speaker has held the floor (0 when idle)."""
    if state is None:
        return 0
    current = coerce_state(state)
    if current.current_speaker is None or current.start_time is None:
        return 0
    return read_now(clock or _SYSTEM_CLOCK) - current.start_time


@defensive(fallback=lambda *_args, **_kwargs: 0)
def hearing_elapsed(
    state: TrackingState | Mapping[str, Any] | None,
    clock: Clock | None = None,
) -> int:
    """Milliseconds since the hearing started.

    While someone holds the floor the clock keeps running; once tracking is
    stopped the count ends at the last recess.
    """
    if state is None:
        return 0
    current = coerce_state(state)
    if current.hearing_start_time is None:
        return 0
    end = current.hearing_end_time
    if current.is_active or end is None:
        end = read_now(clock or _SYSTEM_CLOCK)
    return end - current.hearing_start_time
