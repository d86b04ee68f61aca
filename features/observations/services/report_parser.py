import logging
import math
import re
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from features.observations.models.observation_types import Observation

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"
MISSING_TOKEN = "MM"
MIN_REPORT_LINES = 3  # header, units, at least one observation

# Observation field -> (NDBC column, missing-value threshold).
# A reading at or above its threshold is NDBC's filler for "not measured".
MEASUREMENT_COLUMNS: Dict[str, Tuple[str, float]] = {
    "wind_dir": ("WDIR", 999),
    "wind_speed": ("WSPD", 99),
    "gust_speed": ("GST", 99),
    "wave_height": ("WVHT", 99),
    "dom_period": ("DPD", 99),
    "avg_period": ("APD", 99),
    "wave_dir": ("MWD", 999),
    "pressure": ("PRES", 9999),
    "air_temp": ("ATMP", 999),
    "water_temp": ("WTMP", 999),
    "dew_point": ("DEWP", 999),
}

TIMESTAMP_COLUMNS = ("YY", "MM", "DD", "hh", "mm")

_TWO_DIGITS = re.compile(r"[0-9]{2}")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

class RealtimeReport:
    """Header-aligned view of the newest row in an NDBC realtime report."""

    def __init__(self, columns: List[str], values: List[str]):
        self.columns = columns
        self.values = values

    def get(self, column: str) -> Optional[str]:
        """Raw token for a column, or None if the column or value is absent."""
        try:
            idx = self.columns.index(column)
        except ValueError:
            return None
        return self.values[idx] if idx < len(self.values) else None

    def get_number(self, column: str, threshold: float) -> Optional[float]:
        """Numeric value for a column with NDBC missing-data filler removed."""
        raw = self.get(column)
        if not raw or raw == MISSING_TOKEN:
            return None
        # Plain ASCII decimals only
        if not _DECIMAL.fullmatch(raw):
            return None
        value = float(raw)
        if not math.isfinite(value) or value >= threshold:
            return None
        return value

    def get_timestamp(self) -> Optional[datetime]:
        """UTC observation time from the YY MM DD hh mm columns."""
        raw = [self.get(column) for column in TIMESTAMP_COLUMNS]
        if not all(raw):
            return None
        year_token, *rest = raw

        if not _INTEGER.fullmatch(year_token):
            return None
        year = _expand_year(int(year_token))

        parts = [token.zfill(2) for token in rest]
        if not all(_TWO_DIGITS.fullmatch(part) for part in parts):
            return None
        month, day, hour, minute = (int(part) for part in parts)

        try:
            return datetime(year, month, day, hour, minute, 0, tzinfo=timezone.utc)
        except ValueError:
            logger.debug(f"Discarding invalid observation time {raw}")
            return None

def _expand_year(year: int) -> int:
    """Four-digit year, inferring the century for legacy two-digit values."""
    if year > 1900:
        return year
    return 2000 + year if year < 50 else 1900 + year

def read_latest_row(raw_text: str) -> Optional[RealtimeReport]:
    """Pair the header columns with the newest observation row."""
    lines = [line.strip() for line in raw_text.splitlines()]
    lines = [line for line in lines if line]
    if len(lines) < MIN_REPORT_LINES:
        return None

    columns = lines[0].removeprefix(COMMENT_MARKER).strip().split()

    # Rows are newest first; the first non-comment line is the latest
    data_line = next((line for line in lines if not line.startswith(COMMENT_MARKER)), None)
    if data_line is None:
        return None

    return RealtimeReport(columns, data_line.split())

def parse_report(raw_text: str, station_id: str) -> Optional[Observation]:
    """Parse an NDBC realtime2 standard meteorological report.

    Args:
        raw_text: Full report body as served by NDBC
        station_id: Identifier the caller requested; echoed in the result

    Returns:
        Observation for the newest row, or None when the report has no
        usable data row. Individual missing measurements are None.
    """
    report = read_latest_row(raw_text)
    if report is None:
        return None

    measurements = {
        field: report.get_number(column, threshold)
        for field, (column, threshold) in MEASUREMENT_COLUMNS.items()
    }

    return Observation(
        station_id=station_id,
        timestamp=report.get_timestamp(),
        **measurements
    )
