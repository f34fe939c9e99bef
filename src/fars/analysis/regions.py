"""
FARS Region Filtering and Coordinate Sanitization (Functional Core)

Pure functions only. No I/O, no plotting.

Package Location: src/fars/analysis/regions.py

Sentinel Rule:
    The source dataset encodes "not recorded" coordinates as out-of-range
    numbers.  A ``LONGITUD`` greater than 900 or a ``LATITUDE`` greater
    than 90 is missing.  Sanitization replaces those values with ``NaN``;
    nothing else is reinterpreted (e.g. 77.7777 stays as-is).
"""

from __future__ import annotations

from typing import Dict, Tuple

import numpy as np
import pandas as pd

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

REGION_COL = "STATE"
LAT_COL = "LATITUDE"
LON_COL = "LONGITUD"

# Values strictly above these limits are sentinel "missing" markers.
LAT_SENTINEL_LIMIT: float = 90.0
LON_SENTINEL_LIMIT: float = 900.0

# FARS state codes (FIPS based) -> display name.
REGION_NAMES: Dict[int, str] = {
    1: "Alabama", 2: "Alaska", 4: "Arizona", 5: "Arkansas",
    6: "California", 8: "Colorado", 9: "Connecticut", 10: "Delaware",
    11: "District of Columbia", 12: "Florida", 13: "Georgia", 15: "Hawaii",
    16: "Idaho", 17: "Illinois", 18: "Indiana", 19: "Iowa", 20: "Kansas",
    21: "Kentucky", 22: "Louisiana", 23: "Maine", 24: "Maryland",
    25: "Massachusetts", 26: "Michigan", 27: "Minnesota",
    28: "Mississippi", 29: "Missouri", 30: "Montana", 31: "Nebraska",
    32: "Nevada", 33: "New Hampshire", 34: "New Jersey", 35: "New Mexico",
    36: "New York", 37: "North Carolina", 38: "North Dakota", 39: "Ohio",
    40: "Oklahoma", 41: "Oregon", 42: "Pennsylvania", 43: "Puerto Rico",
    44: "Rhode Island", 45: "South Carolina", 46: "South Dakota",
    47: "Tennessee", 48: "Texas", 49: "Utah", 50: "Vermont",
    51: "Virginia", 52: "Virgin Islands", 53: "Washington",
    54: "West Virginia", 55: "Wisconsin", 56: "Wyoming",
}


class InvalidRegionError(ValueError):
    """
    Raised when a region code does not occur in the loaded year's data.

    Attributes:
        region: The rejected region code.
    """

    def __init__(self, region: int):
        self.region = region
        super().__init__(f"invalid region number: {region}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_region(df: pd.DataFrame, region: int) -> int:
    """
    Check that *region* is one of the distinct ``STATE`` values in *df*.

    Args:
        df: One year's accident table.
        region: Integer-coercible region code.

    Returns:
        The region code as an ``int``.

    Raises:
        ValueError: If *df* has no ``STATE`` column.
        InvalidRegionError: If the code is not present.
    """
    _validate_columns(df, required=[REGION_COL])
    region = int(region)
    if region not in set(df[REGION_COL].dropna().astype(int).unique()):
        raise InvalidRegionError(region)
    return region


def filter_region(df: pd.DataFrame, region: int) -> pd.DataFrame:
    """Return a copy of the rows of *df* whose ``STATE`` equals *region*."""
    _validate_columns(df, required=[REGION_COL])
    return df.loc[df[REGION_COL] == int(region)].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with ``NaN``.

    Args:
        df: Table with ``LATITUDE`` and ``LONGITUD`` columns.

    Returns:
        Copy of *df* with float coordinate columns; every ``LONGITUD > 900``
        and every ``LATITUDE > 90`` is ``NaN``.  The two columns are
        sanitized independently.

    Raises:
        ValueError: If either coordinate column is absent.
    """
    _validate_columns(df, required=[LAT_COL, LON_COL])
    out = df.copy()
    lat = pd.to_numeric(out[LAT_COL], errors="coerce").astype(float)
    lon = pd.to_numeric(out[LON_COL], errors="coerce").astype(float)
    out[LAT_COL] = lat.where(~(lat > LAT_SENTINEL_LIMIT), np.nan)
    out[LON_COL] = lon.where(~(lon > LON_SENTINEL_LIMIT), np.nan)
    return out


def coordinate_bounds(
    df: pd.DataFrame,
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    Bounding latitude and longitude ranges over non-missing values.

    Each axis is reduced on its own, matching a NaN-skipping ``range()``
    per column.

    Args:
        df: Sanitized table (see :func:`sanitize_coordinates`).

    Returns:
        ``((lat_min, lat_max), (lon_min, lon_max))``.  An axis with no
        valid values yields ``(nan, nan)``.
    """
    _validate_columns(df, required=[LAT_COL, LON_COL])
    lat = df[LAT_COL]
    lon = df[LON_COL]
    return (
        (float(lat.min(skipna=True)), float(lat.max(skipna=True))),
        (float(lon.min(skipna=True)), float(lon.max(skipna=True))),
    )


def plottable_points(df: pd.DataFrame) -> pd.DataFrame:
    """Rows of a sanitized table where both coordinates are present."""
    return df.dropna(subset=[LAT_COL, LON_COL])


def region_name(region: int) -> str:
    """Display name for a region code, e.g. ``28 -> 'Mississippi'``."""
    return REGION_NAMES.get(int(region), f"Region {int(region)}")


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: List of column names that must be present.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"accident table is missing required columns: {missing}"
        )
