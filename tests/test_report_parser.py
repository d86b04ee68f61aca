from datetime import datetime, timezone

import pytest

from features.observations.services.report_parser import (
    MEASUREMENT_COLUMNS,
    parse_report,
)

HEADER = "#YY  MM DD hh mm WDIR WSPD GST  WVHT   DPD   APD MWD   PRES  ATMP  WTMP  DEWP"
UNITS = "#yr  mo dy hr mn degT m/s  m/s     m   sec   sec degT   hPa  degC  degC  degC"
ROW = "2024 03 15 14 30 270  8.5 11.2   1.3     7   5.5 280 1013.2   9.5   6.2   4.1"
OLDER_ROW = "2024 03 15 14 00 260  7.0  9.0   1.1     6   5.0 270 1013.5   9.0   6.1   4.0"
MISSING_ROW = "2024 03 15 14 30 999 99.0 99.0 99.00    MM    MM 999 9999.0 999.0 999.0 999.0"

FIELDS = list(MEASUREMENT_COLUMNS)

def build_report(*rows, header=HEADER):
    return "\n".join([header, UNITS, *rows]) + "\n"

def report_with_value(column, token):
    """Single-row report where only `column` carries a reading."""
    header = f"#YY MM DD hh mm {column}"
    return "\n".join([header, "#yr mo dy hr mn x", f"2024 03 15 14 30 {token}"])

def test_parses_complete_row():
    observation = parse_report(build_report(ROW, OLDER_ROW), "44007")

    assert observation.station_id == "44007"
    assert observation.timestamp == datetime(2024, 3, 15, 14, 30, tzinfo=timezone.utc)
    assert observation.wind_dir == 270
    assert observation.wind_speed == 8.5
    assert observation.gust_speed == 11.2
    assert observation.wave_height == 1.3
    assert observation.dom_period == 7
    assert observation.avg_period == 5.5
    assert observation.wave_dir == 280
    assert observation.pressure == 1013.2
    assert observation.air_temp == 9.5
    assert observation.water_temp == 6.2
    assert observation.dew_point == 4.1

def test_serializes_with_camel_case_keys_and_millisecond_timestamp():
    observation = parse_report(build_report(ROW), "44007")

    payload = observation.model_dump(mode="json", by_alias=True)

    assert list(payload) == [
        "stationId", "timestamp", "windDir", "windSpeed", "gustSpeed",
        "waveHeight", "domPeriod", "avgPeriod", "waveDir", "pressure",
        "airTemp", "waterTemp", "dewPoint",
    ]
    assert payload["timestamp"] == "2024-03-15T14:30:00.000Z"
    assert payload["waterTemp"] == 6.2

def test_missing_value_filler_is_dropped_for_every_field():
    observation = parse_report(build_report(MISSING_ROW), "44007")

    assert observation.timestamp == datetime(2024, 3, 15, 14, 30, tzinfo=timezone.utc)
    for field in FIELDS:
        assert getattr(observation, field) is None, field

    payload = observation.model_dump(mode="json", by_alias=True)
    assert payload["windDir"] is None
    assert payload["dewPoint"] is None

@pytest.mark.parametrize("field", FIELDS)
def test_mm_token_is_absent(field):
    column, _ = MEASUREMENT_COLUMNS[field]

    observation = parse_report(report_with_value(column, "MM"), "44007")

    assert getattr(observation, field) is None

@pytest.mark.parametrize("field", FIELDS)
def test_threshold_is_exclusive(field):
    column, threshold = MEASUREMENT_COLUMNS[field]

    at_threshold = parse_report(report_with_value(column, str(threshold)), "44007")
    above_threshold = parse_report(report_with_value(column, str(threshold + 1)), "44007")
    below_threshold = parse_report(report_with_value(column, str(threshold - 0.5)), "44007")

    assert getattr(at_threshold, field) is None
    assert getattr(above_threshold, field) is None
    assert getattr(below_threshold, field) == threshold - 0.5

@pytest.mark.parametrize("token", ["abc", "nan", "-inf", "1.2.3", "1_0", "\uff11\uff10", "\u0668.5"])
def test_unparseable_or_non_finite_tokens_are_absent(token):
    observation = parse_report(report_with_value("WSPD", token), "44007")

    assert observation.wind_speed is None

def test_zero_is_a_reading_not_missing():
    observation = parse_report(report_with_value("WSPD", "0.0"), "44007")

    assert observation.wind_speed == 0.0

def test_negative_temperatures_survive():
    observation = parse_report(report_with_value("ATMP", "-12.4"), "MDRM1")

    assert observation.air_temp == -12.4

@pytest.mark.parametrize("year_token,expected_year", [
    ("23", 2023),
    ("99", 1999),
    ("49", 2049),
    ("50", 1950),
    ("2024", 2024),
])
def test_year_interpretation(year_token, expected_year):
    row = f"{year_token} 03 15 14 30 270 8.5 11.2 1.3 7 5.5 280 1013.2 9.5 6.2 4.1"

    observation = parse_report(build_report(row), "44007")

    assert observation.timestamp.year == expected_year

def test_single_digit_date_parts_are_zero_padded():
    row = "2024 3 5 4 7 270 8.5 11.2 1.3 7 5.5 280 1013.2 9.5 6.2 4.1"

    observation = parse_report(build_report(row), "44007")

    assert observation.timestamp == datetime(2024, 3, 5, 4, 7, tzinfo=timezone.utc)

@pytest.mark.parametrize("missing_column", ["YY", "MM", "DD", "hh", "mm"])
def test_missing_time_column_gives_no_timestamp(missing_column):
    columns = [c for c in ["YY", "MM", "DD", "hh", "mm", "WSPD"] if c != missing_column]
    values = {"YY": "2024", "MM": "03", "DD": "15", "hh": "14", "mm": "30", "WSPD": "8.5"}
    report = "\n".join([
        "#" + " ".join(columns),
        "#units",
        " ".join(values[c] for c in columns),
    ])

    observation = parse_report(report, "44007")

    assert observation.timestamp is None
    assert observation.wind_speed == 8.5

@pytest.mark.parametrize("row", [
    "2024 02 30 14 30 270",
    "2024 13 15 14 30 270",
    "2024 03 15 25 30 270",
    "2024 MM 15 14 30 270",
    "20x4 03 15 14 30 270",
    "2024 003 15 14 30 270",
    "2_024 03 15 14 30 270",
    "2024 \u0660\u0663 15 14 30 270",
    "2024 03 \uff11\uff15 14 30 270",
])
def test_invalid_calendar_values_give_no_timestamp(row):
    report = "\n".join(["#YY MM DD hh mm WDIR", "#yr mo dy hr mn degT", row])

    observation = parse_report(report, "44007")

    assert observation is not None
    assert observation.timestamp is None
    assert observation.wind_dir == 270

def test_column_lookup_is_by_name():
    reordered_header = "#WTMP DEWP YY MM DD hh mm PRES ATMP WDIR WSPD GST WVHT DPD APD MWD"
    reordered_row = "6.2 4.1 2024 03 15 14 30 1013.2 9.5 270 8.5 11.2 1.3 7 5.5 280"

    in_feed_order = parse_report(build_report(ROW), "44007")
    reordered = parse_report(build_report(reordered_row, header=reordered_header), "44007")

    assert reordered == in_feed_order

def test_short_row_leaves_trailing_columns_absent():
    observation = parse_report(build_report("2024 03 15 14 30 270 8.5"), "44007")

    assert observation.timestamp == datetime(2024, 3, 15, 14, 30, tzinfo=timezone.utc)
    assert observation.wind_dir == 270
    assert observation.wind_speed == 8.5
    assert observation.gust_speed is None
    assert observation.dew_point is None

def test_malformed_row_returns_observation_with_absent_fields():
    observation = parse_report(build_report("garbage"), "44007")

    assert observation is not None
    assert observation.timestamp is None
    for field in FIELDS:
        assert getattr(observation, field) is None

def test_header_only_report_is_unusable():
    assert parse_report(HEADER + "\n", "44007") is None

def test_two_line_report_is_unusable():
    assert parse_report(f"{HEADER}\n{ROW}\n", "44007") is None

def test_empty_body_is_unusable():
    assert parse_report("", "44007") is None

def test_report_without_data_row_is_unusable():
    assert parse_report(f"{HEADER}\n{UNITS}\n#another comment\n", "44007") is None

def test_blank_lines_and_crlf_do_not_affect_parsing():
    messy = f"\r\n{HEADER}\r\n\r\n{UNITS}\r\n   {ROW}   \r\n\r\n\r\n"

    assert parse_report(messy, "44007") == parse_report(build_report(ROW), "44007")

def test_newest_row_wins():
    observation = parse_report(build_report(OLDER_ROW, ROW), "44007")

    assert observation.timestamp.minute == 0
    assert observation.wind_dir == 260

def test_station_id_echoes_request_not_report():
    observation = parse_report(build_report(ROW), "mdrm1")

    assert observation.station_id == "mdrm1"
