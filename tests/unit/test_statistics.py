"""Tests for the statistics engine.

Validates totals, silence, percentages and averages on finalized and
in-progress hearings, plus tolerance of partial or tampered state.
"""

import pytest

from hearing_tracker.core.models import SpeakingStatistics
from hearing_tracker.services.reporting import calculate_statistics
from hearing_tracker.services.tracking import (
    initialize_speaking_time,
    start_speaking,
    stop_tracking,
)

MINUTE_MS = 60_000


class TestTotals:
    """Hearing, speaking and silence totals."""

    def test_scenario_totals(self, court_scenario):
        stats = calculate_statistics(court_scenario)
        assert stats.total_hearing_time == 29 * MINUTE_MS
        assert stats.total_speaking_time == 29 * MINUTE_MS
        assert stats.silence_time == 0

    def test_round_trip(self, clock):
        state = start_speaking(initialize_speaking_time(["A", "B"]), "A", clock=clock)
        clock.advance(45_000)
        state = start_speaking(state, "B", clock=clock)
        clock.advance(15_000)
        stats = calculate_statistics(stop_tracking(state, clock=clock))

        assert stats.total_hearing_time == 60_000
        assert stats.parties["A"].total_time == 45_000
        assert stats.parties["B"].total_time == 15_000
        assert stats.silence_time == 0

    def test_recess_time_counts_as_silence(self, clock):
        state = start_speaking(initialize_speaking_time(), "State", clock=clock)
        clock.advance(10_000)
        state = stop_tracking(state, clock=clock)
        clock.advance(30_000)
        state = start_speaking(state, "Defense", clock=clock)
        clock.advance(20_000)
        stats = calculate_statistics(stop_tracking(state, clock=clock))

        assert stats.total_hearing_time == 60_000
        assert stats.total_speaking_time == 30_000
        assert stats.silence_time == 30_000

    def test_in_progress_hearing_has_zero_duration(self, clock):
        """Without an end stamp the hearing total is clamped to zero, never negative."""
        state = start_speaking(initialize_speaking_time(), "State", clock=clock)
        stats = calculate_statistics(state)
        assert stats.total_hearing_time == 0
        assert stats.silence_time == 0


class TestPerParty:
    """Per-party percentages, turn counts and averages."""

    def test_percentages_sum_to_100(self, court_scenario):
        stats = calculate_statistics(court_scenario)
        total = sum(float(p.percentage) for p in stats.parties.values())
        assert total == pytest.approx(100.0, abs=0.15)

    def test_percentage_one_decimal(self, court_scenario):
        stats = calculate_statistics(court_scenario)
        assert stats.parties["State"].percentage == "51.7"
        assert stats.parties["Defense"].percentage == "41.4"
        assert stats.parties["Court"].percentage == "6.9"

    def test_percentage_ties_round_up(self):
        """An exact 0.25% share renders as "0.3", the same way averages round."""
        state = {
            "parties": {
                "A": {"total_time": 1, "segments": [{"start": 0, "end": 1, "duration": 1}]},
                "B": {"total_time": 399, "segments": [{"start": 1, "end": 400, "duration": 399}]},
            },
        }
        stats = calculate_statistics(state)
        assert stats.parties["A"].percentage == "0.3"
        assert stats.parties["B"].percentage == "99.8"

    def test_zero_duration_hearing_reports_zero_strings(self, clock):
        """A hearing that ends the instant it starts yields "0", not NaN."""
        state = start_speaking(initialize_speaking_time(), "State", clock=clock)
        state = stop_tracking(state, clock=clock)
        assert state.hearing_start_time == state.hearing_end_time

        stats = calculate_statistics(state)
        assert stats.total_hearing_time == 0
        assert all(p.percentage == "0" for p in stats.parties.values())
        assert stats.parties["State"].segment_count == 1
        assert stats.parties["State"].average_segment_time == 0

    def test_turns_and_average(self, clock):
        state = initialize_speaking_time()
        for party, ms in (("State", 1000), ("Defense", 500), ("State", 2001), ("Defense", 500)):
            state = start_speaking(state, party, clock=clock)
            clock.advance(ms)
        stats = calculate_statistics(stop_tracking(state, clock=clock))

        assert stats.parties["State"].segment_count == 2
        assert stats.parties["State"].average_segment_time == 1501  # 1500.5 rounds up
        assert stats.parties["Defense"].average_segment_time == 500
        assert stats.parties["Court"].segment_count == 0
        assert stats.parties["Court"].average_segment_time == 0

    def test_ordered_by_descending_total(self, court_scenario):
        stats = calculate_statistics(court_scenario)
        assert list(stats.parties) == ["State", "Defense", "Court"]

    def test_ties_keep_registration_order(self):
        stats = calculate_statistics(initialize_speaking_time(["Court", "State", "Defense"]))
        assert list(stats.parties) == ["Court", "State", "Defense"]


class TestMalformedState:
    """Partial or tampered snapshots never raise."""

    def test_none_state(self):
        assert calculate_statistics(None) == SpeakingStatistics()

    def test_missing_parties(self):
        stats = calculate_statistics({"hearing_start_time": 1000, "hearing_end_time": 5000})
        assert stats.total_hearing_time == 4000
        assert stats.parties == {}

    def test_non_mapping_party_entries_skipped(self):
        state = {
            "parties": {
                "State": {"totalTime": 3000, "segments": [{"start": 1, "end": 3001, "duration": 3000}]},
                "Broken": "not a record",
                "Empty": None,
            },
            "hearingStartTime": 1,
            "hearingEndTime": 4001,
        }
        stats = calculate_statistics(state)
        assert list(stats.parties) == ["State"]
        assert stats.parties["State"].percentage == "100.0"
        assert stats.silence_time == 1000

    def test_missing_start_never_negative(self):
        stats = calculate_statistics({"hearing_end_time": None, "hearing_start_time": 10_000})
        assert stats.total_hearing_time == 0

    def test_wrong_types_zeroed(self):
        state = {
            "parties": {"State": {"total_time": "lots", "segments": "many"}},
            "hearing_start_time": "yesterday",
        }
        stats = calculate_statistics(state)
        assert stats.parties["State"].total_time == 0
        assert stats.parties["State"].segment_count == 0

    def test_not_a_state_at_all(self):
        assert calculate_statistics(["State"]) == SpeakingStatistics()
