"""Domain services: tracking, reporting, docket import and transcription."""
