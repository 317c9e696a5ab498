"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for courtroom use.
Use ``get_settings()`` to obtain the cached singleton instance.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Hearing tracker settings loaded from environment / .env file.

    All settings can be overridden via ``HEARING_TRACKER_``-prefixed
    environment variables or a `.env` file (case-insensitive).

    Attributes:
        strict_mode: Re-raise failures inside the defensive boundary and
            assert tracking invariants after every transition.
        default_parties: Participants used when no valid name list is given.
        chart_palette: Colors cycled across chart slices.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEARING_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    # --- Application ---
    log_level: str = "INFO"  # Python logging level
    strict_mode: bool = False  # Debug build: surface errors instead of degrading

    # --- Tracking ---
    default_parties: list[str] = Field(default_factory=lambda: ["State", "Defense", "Court"])

    # --- Reporting ---
    chart_palette: list[str] = Field(
        default_factory=lambda: [
            "#e74c3c",  # State
            "#3498db",  # Defense
            "#95a5a6",  # Court
            "#f39c12",
            "#9b59b6",
            "#1abc9c",
        ]
    )
    chart_border_color: str = "#fff"
    report_datetime_format: str = "%m/%d/%Y, %I:%M:%S %p"
    report_time_format: str = "%I:%M:%S %p"

    # --- Docket import ---
    docket_required_headers: list[str] = Field(
        default_factory=lambda: ["Case Number", "Client Name", "Division", "Time"]
    )

    # --- Mock transcription ---
    mock_transcription_delay: float = 2.0  # Seconds of simulated processing


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()
