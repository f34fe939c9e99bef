"""
FARS Month x Year Summary (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/summary.py

The summary is built in three steps:

1. Union the per-year ``(MONTH, year)`` projections into one long table.
2. Count rows per ``(year, MONTH)`` group.
3. Pivot so each year becomes a column and each month a row.

Months appear only when at least one year observed them, sorted 1-12.
Year columns are sorted ascending.  A month observed in one year but not
another is filled with ``fill_value`` (0 by default) so the result is a
dense integer matrix.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

_MONTH_COL = "MONTH"
_YEAR_COL = "year"


def project_months(df: pd.DataFrame, year: int) -> pd.DataFrame:
    """
    Tag every record with *year* and keep only ``MONTH`` and ``year``.

    Args:
        df: One year's accident table.
        year: Source year to tag the records with.

    Returns:
        New two-column DataFrame; *df* is not modified.

    Raises:
        KeyError: If *df* has no ``MONTH`` column.
    """
    if _MONTH_COL not in df.columns:
        raise KeyError(f"table is missing required column '{_MONTH_COL}'")
    out = df[[_MONTH_COL]].copy()
    out[_YEAR_COL] = int(year)
    return out


def month_year_counts(
    frames: Iterable[pd.DataFrame],
    fill_value: Optional[int] = 0,
) -> pd.DataFrame:
    """
    Count observations per month and year and pivot years into columns.

    Args:
        frames: ``(MONTH, year)`` projections as produced by
            :func:`project_months`.  An empty iterable is allowed.
        fill_value: Value for month/year combinations with no records.
            ``None`` leaves them as ``NaN`` (float columns).

    Returns:
        DataFrame indexed by ``MONTH`` with one column per year.  Returns
        an empty DataFrame (no rows, no columns) when there is nothing to
        count.
    """
    frames = [f for f in frames if f is not None]
    if not frames:
        return _empty_summary()

    combined = pd.concat(frames, ignore_index=True)
    if combined.empty:
        return _empty_summary()

    counts = combined.groupby([_YEAR_COL, _MONTH_COL]).size()
    if fill_value is None:
        wide = counts.unstack(_YEAR_COL)
    else:
        wide = counts.unstack(_YEAR_COL, fill_value=fill_value).astype("int64")

    wide = wide.sort_index(axis=0).sort_index(axis=1)
    wide.index.name = _MONTH_COL
    wide.columns.name = _YEAR_COL
    return wide


def _empty_summary() -> pd.DataFrame:
    """Empty summary with the usual axis names."""
    empty = pd.DataFrame(index=pd.Index([], name=_MONTH_COL, dtype="int64"))
    empty.columns.name = _YEAR_COL
    return empty
