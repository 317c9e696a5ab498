"""Mock transcription provider.

Simulates processing latency and returns a canned courtroom transcript
stamped with the hearing's docket details, so the recording workflow can
be exercised without a speech model.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from hearing_tracker.core.config import get_settings
from hearing_tracker.core.exceptions import TranscriptionError
from hearing_tracker.services.reporting.formatter import format_time
from hearing_tracker.services.transcription.base import BaseTranscriber

logger = logging.getLogger(__name__)

MOCK_DISCLAIMER = (
    "[This is a mock transcript. Real transcription requires integrating "
    "a speech recognition engine such as a Whisper/Vosk model.]"
)

MOCK_EXCHANGE = (
    "THE COURT: We are on the record. Counsel, please state your appearances.",
    "STATE: Good morning, Your Honor, appearing on behalf of the State.",
    "DEFENSE: Good morning, Your Honor, appearing on behalf of the defendant.",
    "THE COURT: Thank you. Let's proceed.",
)


class MockTranscriber(BaseTranscriber):
    """Transcriber that fabricates a transcript after a configurable delay.

    Args:
        delay: Simulated processing time in seconds; defaults to
            ``settings.mock_transcription_delay``.
    """

    def __init__(self, delay: float | None = None) -> None:
        self._delay = get_settings().mock_transcription_delay if delay is None else delay

    async def transcribe(
        self,
        audio: bytes | None,
        hearing: Mapping[str, Any],
        duration_seconds: float,
    ) -> str:
        """Return a mock transcript for ``hearing``.

        Raises:
            TranscriptionError: If no audio was recorded.
        """
        if not audio:
            raise TranscriptionError("No audio data available for transcription")

        logger.info("Mock-transcribing %d bytes for case %s", len(audio), hearing.get("Case Number"))
        await asyncio.sleep(self._delay)

        header = [
            "COURT HEARING TRANSCRIPT",
            f"Case Number: {hearing.get('Case Number') or 'N/A'}",
            f"Client: {hearing.get('Client Name') or 'N/A'}",
            f"Division: {hearing.get('Division') or 'N/A'}",
            f"Scheduled Time: {hearing.get('Time') or 'N/A'}",
            f"Duration: {format_time(duration_seconds * 1000)}",
            "",
        ]
        return "\n".join([*header, *MOCK_EXCHANGE, "", MOCK_DISCLAIMER])
