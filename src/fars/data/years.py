"""
FARS Multi-Year Aggregation (Imperative Shell)

Loads several years of accident data, tags each record with its source
year, and delegates counting/pivoting to the Functional Core
(analysis/summary.py).

Package Location: src/fars/data/years.py

Partial Failure Rule:
    Years are independent.  A year that cannot be loaded (no file, an
    unparseable file, a table without ``MONTH``, or a year that is not
    integer-coercible) does not abort the request.  It is logged as an
    ``invalid year`` warning and returned as a missing ``YearResult`` in
    the same position as the input, so callers can see exactly which years
    failed and why.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

import pandas as pd

from .reader import load_year_table, make_filename
from ..analysis.summary import month_year_counts, project_months

logger = logging.getLogger(__name__)

# Failures absorbed per year.  NotFoundError is an OSError; pandas parser
# errors are ValueErrors; an infinite year overflows int().
_YEAR_ERRORS = (OSError, ValueError, KeyError, TypeError, OverflowError)


@dataclass(frozen=True, eq=False)
class YearResult:
    """
    Outcome of loading one requested year.

    Attributes:
        year: The year exactly as requested.
        data: ``(MONTH, year)`` projection, or ``None`` when missing.
        error: Failure description when missing, else ``None``.
    """

    year: Union[int, float, str]
    data: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def missing(self) -> bool:
        return self.data is None

    @property
    def ok(self) -> bool:
        return self.data is not None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def aggregate_years(
    years: Iterable[Union[int, float, str]],
    data_dir: Optional[Union[str, Path]] = None,
) -> List[YearResult]:
    """
    Load each year and project it to ``(MONTH, year)``.

    Args:
        years: Years to load, in the order the results should follow.
        data_dir: Optional override of the package data directory.

    Returns:
        One :class:`YearResult` per input year, same order and length.
        Never raises for a bad year; see the module docstring.
    """
    return [_load_one_year(year, data_dir) for year in years]


def frames(results: Sequence[YearResult]) -> List[pd.DataFrame]:
    """The projected tables of the non-missing results, in order."""
    return [r.data for r in results if r.ok]


def failed_years(results: Sequence[YearResult]) -> list:
    """The requested years whose result is missing, in order."""
    return [r.year for r in results if r.missing]


def summarize_years(
    years: Iterable[Union[int, float, str]],
    data_dir: Optional[Union[str, Path]] = None,
    fill_value: Optional[int] = 0,
) -> pd.DataFrame:
    """
    Count accidents per month for each loadable year.

    Example::

        summary = summarize_years([2013, 2014, 2015])
        summary.loc[1, 2014]   # January 2014 count

    Args:
        years: Years to summarize.  Missing years are skipped with a
            warning (see :func:`aggregate_years`).
        data_dir: Optional override of the package data directory.
        fill_value: Count used for months with no records in a year.
            ``None`` leaves those cells as ``NaN``.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with one integer column
        per loaded year (ascending).  Empty when no year could be loaded.
    """
    results = aggregate_years(years, data_dir=data_dir)
    return month_year_counts(frames(results), fill_value=fill_value)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _load_one_year(
    year: Union[int, float, str],
    data_dir: Optional[Union[str, Path]],
) -> YearResult:
    """Load and project a single year, converting failures to a result."""
    try:
        filename = make_filename(year)
        df = load_year_table(filename, data_dir=data_dir)
        projected = project_months(df, int(float(year)))
    except _YEAR_ERRORS as exc:
        logger.warning(
            f"invalid year: {year}",
            extra={"year": str(year), "reason": str(exc)},
        )
        return YearResult(year=year, error=str(exc))
    return YearResult(year=year, data=projected)
