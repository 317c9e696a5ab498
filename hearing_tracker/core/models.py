"""
Pydantic v2 models shared by the tracking, reporting and docket services.

All snapshot models are frozen and serialise with camelCase aliases, so
``model_dump(by_alias=True)`` yields the shape the UI layer renders
(``totalTime``, ``currentSpeaker``, ``backgroundColor`` ...).
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Snapshot(BaseModel):
    """Base for immutable value objects exchanged with the UI layer."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ---------------------------------------------------------------------------
# Tracking state
# ---------------------------------------------------------------------------


class Segment(Snapshot):
    """One completed speaking turn of a single participant (times in ms)."""

    start: int
    end: int
    duration: int


class TimelineEntry(Snapshot):
    """A completed turn in the hearing-wide chronological log."""

    party: str
    start: int
    end: int
    duration: int


class ParticipantRecord(Snapshot):
    """Accumulated speaking time and turn history for one participant."""

    total_time: int = 0
    segments: tuple[Segment, ...] = ()


class TrackingState(Snapshot):
    """Immutable speaking-time ledger for one hearing.

    Every tracking operation returns a new ``TrackingState``; holding a
    reference to an earlier snapshot is always safe.
    """

    parties: dict[str, ParticipantRecord] = Field(default_factory=dict)
    current_speaker: str | None = None
    start_time: int | None = None
    hearing_start_time: int | None = None
    hearing_end_time: int | None = None
    is_active: bool = False
    is_paused: bool = False
    timeline: tuple[TimelineEntry, ...] = ()


# ---------------------------------------------------------------------------
# Statistics & reports
# ---------------------------------------------------------------------------


class PartyStatistics(Snapshot):
    """Derived metrics for one participant."""

    total_time: int = 0
    percentage: str = "0"
    segment_count: int = 0
    average_segment_time: int = 0


class SpeakingStatistics(Snapshot):
    """Hearing-wide metrics; ``parties`` is ordered by descending total time."""

    total_hearing_time: int = 0
    total_speaking_time: int = 0
    silence_time: int = 0
    parties: dict[str, PartyStatistics] = Field(default_factory=dict)


class ChartDataset(Snapshot):
    """A single pie-chart dataset."""

    data: list[int] = Field(default_factory=list)
    background_color: list[str] = Field(default_factory=list)
    border_width: int = 2
    border_color: str = "#fff"


class ChartData(Snapshot):
    """Chart payload: one label per participant, one dataset."""

    labels: list[str] = Field(default_factory=list)
    datasets: list[ChartDataset] = Field(default_factory=lambda: [ChartDataset()])


class SessionReport(Snapshot):
    """Everything the UI saves when a hearing's report is stored."""

    report: str
    chart_data: ChartData
    stats: SpeakingStatistics
    timestamp: int


# ---------------------------------------------------------------------------
# Docket
# ---------------------------------------------------------------------------


class RecordingStatus(StrEnum):
    """Possible states for a hearing's recording slot."""

    ready = "ready"
    recording = "recording"
    transcribing = "transcribing"
    completed = "completed"


class RecordingState(Snapshot):
    """Per-hearing recording slot created when a docket is loaded."""

    is_recording: bool = False
    transcript: str = ""
    notes: str = ""
    duration: int = 0
    status: RecordingStatus = RecordingStatus.ready


class HeaderValidation(Snapshot):
    """Result of checking docket CSV headers against the required fields."""

    is_valid: bool
    missing: list[str] = Field(default_factory=list)
    found: list[str] = Field(default_factory=list)
