from __future__ import annotations
import datetime as dt
import logging
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from ..config import NonFinitePolicy
from ..errors import ParseError
from .series import Observation, Series

logger = logging.getLogger(__name__)

SAMPLE_ROWS: Tuple[Tuple[str, float], ...] = (
    ("2023-01-01", 150.25),
    ("2023-01-02", 152.10),
    ("2023-01-03", 149.75),
    ("2023-01-04", 153.40),
    ("2023-01-05", 155.20),
    ("2023-01-06", 154.80),
    ("2023-01-07", 156.90),
    ("2023-01-08", 158.30),
    ("2023-01-09", 157.60),
    ("2023-01-10", 159.20),
)


def sample_csv(value_header: str = "price") -> str:
    """Ten days of example prices in the accepted input format."""
    lines = [f"date,{value_header}"] + [f"{d},{v:.2f}" for d, v in SAMPLE_ROWS]
    return "\n".join(lines)


def _split_rows(text: str, delimiter: str) -> List[Tuple[int, str, str]]:
    # first line is the header; it is never validated
    rows = []
    for lineno, line in enumerate(text.splitlines()[1:], start=2):
        if not line.strip():
            continue
        fields = line.split(delimiter)
        date_tok = fields[0].strip()
        value_tok = fields[1].strip() if len(fields) > 1 else ""
        if not date_tok or not value_tok:
            logger.debug("Skipping line %d: empty date or value field", lineno)
            continue
        rows.append((lineno, date_tok, value_tok))
    return rows


def _iso_date(token: str) -> Optional[dt.date]:
    try:
        return dt.date.fromisoformat(token)
    except ValueError:
        return None


def _parse_dates(raw: pd.Series) -> Tuple[pd.Series, pd.Series]:
    """
    Calendar date and UTC time-of-day (microseconds) for each token.

    Plain ISO dates are read directly so the whole date range is accepted;
    anything else goes through pandas. Unreadable tokens give None.
    """
    dates = raw.map(_iso_date).astype(object)
    micros = pd.Series(0, index=raw.index, dtype="int64")
    rest = dates.isna()
    if rest.any():
        ts = pd.to_datetime(raw[rest], utc=True, errors="coerce", format="mixed")
        ts = ts[ts.notna()]
        dates.loc[ts.index] = ts.dt.date
        micros.loc[ts.index] = (ts - ts.dt.normalize()) // pd.Timedelta(microseconds=1)
    return dates, micros


def parse_series(
    text: str,
    delimiter: str = ",",
    non_finite: NonFinitePolicy = "drop",
) -> Series:
    """
    Parse two-column delimited text (header + `date,value` rows) into a Series.

    - dates are read chronologically and normalised to UTC calendar dates
    - rows with an unreadable date are dropped
    - rows with a non-finite value are dropped (non_finite='drop') or
      rejected with ParseError (non_finite='reject')
    - the result is stably sorted by date, so equal dates keep input order

    Raises ParseError when no usable row remains.
    """
    if non_finite not in ("drop", "reject"):
        raise ValueError(f"Unknown non_finite={non_finite}")

    rows = _split_rows(text, delimiter)
    if not rows:
        raise ParseError("No data rows found after the header.")

    df = pd.DataFrame(rows, columns=["line", "raw_date", "raw_value"])
    df["date"], df["micros"] = _parse_dates(df["raw_date"])
    df["y"] = pd.to_numeric(df["raw_value"], errors="coerce").astype(float)

    bad_date = df["date"].isna()
    if bad_date.any():
        logger.warning(
            "Dropping %d row(s) with unreadable dates at line(s) %s",
            int(bad_date.sum()), df.loc[bad_date, "line"].tolist(),
        )
        df = df[~bad_date]

    bad_value = ~np.isfinite(df["y"].to_numpy())
    if bad_value.any():
        lines = df.loc[bad_value, "line"].tolist()
        if non_finite == "reject":
            raise ParseError(
                f"Non-numeric value at line(s) {lines}",
                user_message=f"Non-numeric value on line {lines[0]}. Please check the format.",
            )
        logger.warning("Dropping %d row(s) with non-numeric values at line(s) %s", len(lines), lines)
        df = df[~bad_value]

    if df.empty:
        raise ParseError("No rows with a valid date and numeric value.")

    # day ordinal and time of day as one integer so a single stable sort suffices
    df = df.assign(key=df["date"].map(dt.date.toordinal).astype("int64") * 86_400_000_000 + df["micros"])
    df = df.sort_values("key", kind="mergesort")
    series = tuple(
        Observation(date=d, value=float(y))
        for d, y in zip(df["date"], df["y"])
    )
    logger.debug("Parsed %d observations (%s .. %s)", len(series), series[0].date, series[-1].date)
    return series
