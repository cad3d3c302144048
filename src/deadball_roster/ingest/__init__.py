"""Input adapters that normalize raw batting and pitching exports."""

from .stats import (
    BATTING_COLUMNS,
    PITCHING_COLUMNS,
    IngestReport,
    RawStatRow,
    apply_column_mapping,
    batting_row_to_record,
    batting_rows_to_records,
    clean_name,
    handedness_from_name,
    load_stat_csv,
    parse_stat_text,
    pitching_row_to_record,
    pitching_rows_to_records,
    resolve_position,
)

__all__ = [
    "BATTING_COLUMNS",
    "PITCHING_COLUMNS",
    "IngestReport",
    "RawStatRow",
    "apply_column_mapping",
    "batting_row_to_record",
    "batting_rows_to_records",
    "clean_name",
    "handedness_from_name",
    "load_stat_csv",
    "parse_stat_text",
    "pitching_row_to_record",
    "pitching_rows_to_records",
    "resolve_position",
]
