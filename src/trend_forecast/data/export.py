from __future__ import annotations
import csv
from typing import Any, Iterable, Mapping

import pandas as pd

from ..errors import SchemaMismatchError
from .series import ForecastPoint, SeriesLike


def _num(x: float) -> str:
    # repr is the shortest string that parses back to the same float
    return repr(float(x))


def to_delimited_text(
    series: SeriesLike,
    date_header: str = "date",
    value_header: str = "value",
    include_predicted: bool = False,
    delimiter: str = ",",
) -> str:
    """
    Render observations (historical, forecast or both) as `date,value` text.

    The output parses back with parse_series to the same observations.
    With include_predicted a third column carries the forecast value,
    empty on history rows.
    """
    points = list(series)
    frame = pd.DataFrame({
        date_header: [p.date.isoformat() for p in points],
        value_header: [_num(p.value) for p in points],
    }, dtype=object)
    if include_predicted:
        frame["predicted"] = [
            _num(p.predicted) if isinstance(p, ForecastPoint) and p.predicted is not None else ""
            for p in points
        ]
    return frame.to_csv(index=False, sep=delimiter, lineterminator="\n")


def _field(value: Any) -> str:
    return "" if value is None else str(value)


def tabular_export(records: Iterable[Mapping[str, Any]], exclude_key: str = "id") -> str:
    """
    Export labelled records as CSV with every data field double-quoted.

    Columns follow the first record's key order minus `exclude_key`; the
    header line itself is not quoted. All records must share the first
    record's keys.
    """
    records = list(records)
    if not records:
        return ""

    keys = list(records[0].keys())
    expected = set(keys)
    for i, record in enumerate(records[1:], start=1):
        seen = set(record.keys())
        if seen != expected:
            missing = sorted(map(str, expected - seen))
            extra = sorted(map(str, seen - expected))
            raise SchemaMismatchError(
                f"Record {i} does not match the fields of record 0 (missing={missing}, extra={extra})"
            )

    headers = [k for k in keys if k != exclude_key]
    header_line = ",".join(str(h) for h in headers) + "\n"
    if not headers:
        return header_line + "\n" * len(records)

    frame = pd.DataFrame([[_field(r[h]) for h in headers] for r in records], columns=headers)
    body = frame.to_csv(header=False, index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    return header_line + body
