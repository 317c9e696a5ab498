"""
Docket module - CSV calendar import and per-hearing recording slots.
"""

from .parser import Hearing, initialize_recording_states, parse_docket_csv, validate_docket_headers

__all__ = ["Hearing", "initialize_recording_states", "parse_docket_csv", "validate_docket_headers"]
