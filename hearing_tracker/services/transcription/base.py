"""
Abstract base class for hearing transcription providers.

Only a mock provider ships today; a Whisper/Vosk backend would implement
the same interface so the UI layer stays provider-agnostic.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class BaseTranscriber(ABC):
    """Interface that every transcription provider must implement."""

    @abstractmethod
    async def transcribe(
        self,
        audio: bytes | None,
        hearing: Mapping[str, Any],
        duration_seconds: float,
    ) -> str:
        """Transcribe a hearing recording.

        Args:
            audio: Recorded audio bytes.
            hearing: Docket row for the hearing (case number, client, ...).
            duration_seconds: Length of the recording.

        Returns:
            The transcript text.
        """
