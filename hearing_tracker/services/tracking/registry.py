"""Participant registry: adding and removing parties from a tracking state."""

import logging
from collections.abc import Mapping
from typing import Any

from hearing_tracker.core.models import ParticipantRecord, TrackingState
from hearing_tracker.services.tracking.boundary import defensive, unchanged_state
from hearing_tracker.services.tracking.state_machine import (
    clean_party_name,
    coerce_state,
    initialize_speaking_time,
)

logger = logging.getLogger(__name__)


@defensive(fallback=unchanged_state)
def add_party(state: TrackingState | Mapping[str, Any] | None, name: str) -> TrackingState:
    """Register a new participant with no recorded time.

    Blank, non-string and already registered names leave the state as is.
    The name is stored trimmed.
    """
    current = initialize_speaking_time() if state is None else coerce_state(state)
    party = clean_party_name(name)
    if party is None or party in current.parties:
        return current

    logger.info("Adding participant %s", party)
    return current.model_copy(update={"parties": {**current.parties, party: ParticipantRecord()}})


@defensive(fallback=unchanged_state)
def remove_party(state: TrackingState | Mapping[str, Any] | None, name: str) -> TrackingState:
    """Drop a participant and their history.

    The participant currently holding the floor cannot be removed; unknown
    names are ignored. The name is matched trimmed, as ``add_party`` stores it.
    """
    current = initialize_speaking_time() if state is None else coerce_state(state)
    party = clean_party_name(name)
    if party is None or party not in current.parties:
        return current
    if party == current.current_speaker:
        logger.warning("Refusing to remove %s while they are speaking", party)
        return current

    logger.info("Removing participant %s", party)
    parties = {k: v for k, v in current.parties.items() if k != party}
    return current.model_copy(update={"parties": parties})
