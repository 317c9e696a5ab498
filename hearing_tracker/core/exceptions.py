"""
Hearing tracker exception hierarchy.

All application-specific exceptions inherit from HearingTrackerError.
Tracking and reporting operations never let these escape to the live UI
unless strict mode is enabled; docket and transcript helpers raise them
to their callers.
"""

from datetime import UTC, datetime


class HearingTrackerError(Exception):
    """Base exception for all hearing tracker errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "HEARING_TRACKER_ERROR",
    ) -> None:
        self.detail = detail
        self.code = code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class TrackingInvariantError(HearingTrackerError):
    """Raised in strict mode when a state snapshot violates an accounting invariant."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail=detail, code="TRACKING_INVARIANT_VIOLATED")


class DocketParseError(HearingTrackerError):
    """Raised when a docket CSV cannot be parsed into hearings."""

    def __init__(self, detail: str = "Docket could not be parsed") -> None:
        super().__init__(detail=detail, code="DOCKET_PARSE_ERROR")


class TranscriptionError(HearingTrackerError):
    """Raised when transcription cannot run."""

    def __init__(self, detail: str = "Transcription failed") -> None:
        super().__init__(detail=detail, code="TRANSCRIPTION_ERROR")


class TranscriptExportError(HearingTrackerError):
    """Raised when a transcript document cannot be assembled."""

    def __init__(self, detail: str = "Transcript export failed") -> None:
        super().__init__(detail=detail, code="TRANSCRIPT_EXPORT_ERROR")
