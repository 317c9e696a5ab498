"""
Docket import: turns a court calendar CSV into hearing records.

A hearing is a plain ``dict[str, str]`` keyed by the CSV headers plus a
generated ``id``; the same dict is later passed to the report and
transcript helpers as case metadata.
"""

import csv
import io
import logging
import uuid
from collections.abc import Iterable, Sequence

from hearing_tracker.core.config import get_settings
from hearing_tracker.core.exceptions import DocketParseError
from hearing_tracker.core.models import HeaderValidation, RecordingState

logger = logging.getLogger(__name__)

Hearing = dict[str, str]


def parse_docket_csv(csv_text: str) -> list[Hearing]:
    """Parse docket CSV text into hearings.

    Blank lines are ignored, cells are trimmed and short rows are padded
    with empty strings. Each hearing gets a unique ``id`` derived from its
    case number.

    Args:
        csv_text: Raw CSV content with a header row.

    Returns:
        One dict per data row, in file order.

    Raises:
        DocketParseError: If there is no header row plus at least one data row.
    """
    rows = [
        [cell.strip() for cell in row]
        for row in csv.reader(io.StringIO(csv_text or ""))
        if any(cell.strip() for cell in row)
    ]
    if len(rows) < 2:
        raise DocketParseError("CSV must contain at least a header row and one data row")

    headers = rows[0]
    hearings: list[Hearing] = []
    for values in rows[1:]:
        hearing = {header: (values[i] if i < len(values) else "") for i, header in enumerate(headers)}
        hearing["id"] = f"{hearing.get('Case Number', '')}-{uuid.uuid4().hex}"
        hearings.append(hearing)

    logger.info("Parsed %d hearings from docket", len(hearings))
    return hearings


def validate_docket_headers(
    headers: Sequence[str], required: Sequence[str] | None = None
) -> HeaderValidation:
    """Check that every required column appears among ``headers``.

    Matching is a case-insensitive substring test, so ``"Hearing Time"``
    satisfies ``"Time"``.
    """
    required = list(required if required is not None else get_settings().docket_required_headers)
    lowered = [h.lower() for h in headers]
    missing = [r for r in required if not any(r.lower() in h for h in lowered)]
    if missing:
        logger.warning("Docket is missing columns: %s", ", ".join(missing))
    return HeaderValidation(is_valid=not missing, missing=missing, found=list(headers))


def initialize_recording_states(hearings: Iterable[Hearing]) -> dict[str, RecordingState]:
    """Create an idle recording slot for each hearing, keyed by hearing id."""
    return {hearing["id"]: RecordingState() for hearing in hearings}
