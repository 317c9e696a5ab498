"""Plain-text transcript document offered for download after a hearing."""

from collections.abc import Mapping
from typing import Any

from hearing_tracker.core.exceptions import TranscriptExportError
from hearing_tracker.services.reporting.formatter import format_time


def build_transcript_document(
    hearing: Mapping[str, Any],
    transcript: str | None,
    notes: str | None,
    duration_seconds: float,
) -> str:
    """Assemble the transcript file contents: case header, transcript, notes.

    Raises:
        TranscriptExportError: If there is no transcript text.
    """
    if not transcript:
        raise TranscriptExportError("No transcript available for download")

    return (
        f"Case: {hearing.get('Case Number', '')}\n"
        f"Client: {hearing.get('Client Name', '')}\n"
        f"Division: {hearing.get('Division', '')}\n"
        f"Time: {hearing.get('Time', '')}\n"
        f"Duration: {format_time(duration_seconds * 1000)}\n"
        "\n"
        f"TRANSCRIPT:\n{transcript}\n"
        "\n"
        f"NOTES:\n{notes or ''}\n"
    )
