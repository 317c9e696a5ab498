"""
Transcription module - transcriber abstraction and transcript documents.

Factory function for creating transcriber instances by provider name.
"""

from .base import BaseTranscriber
from .document import build_transcript_document

__all__ = ["BaseTranscriber", "build_transcript_document", "create_transcriber"]


def create_transcriber(provider: str = "mock", **kwargs) -> BaseTranscriber:
    """
    Factory function to create a transcriber based on provider.

    Args:
        provider: Transcriber provider name (only "mock" today)
        **kwargs: Provider-specific configuration

    Returns:
        BaseTranscriber implementation instance

    Raises:
        ValueError: If provider is unknown
    """
    if provider == "mock":
        from .mock import MockTranscriber
        return MockTranscriber(**kwargs)
    else:
        raise ValueError(f"Unknown transcription provider: {provider}")
