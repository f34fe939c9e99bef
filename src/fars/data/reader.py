"""
FARS Data Reader (Imperative Shell)

Resolves yearly accident files against the package-local data directory
and parses them into DataFrames.

Package Location: src/fars/data/reader.py

File naming:
    Every year maps to exactly one file, ``accident_<year>.csv.bz2``.
    The year is truncated to an integer (``2013.9`` -> ``2013``), so the
    filename is a pure function of the year and never collides across
    years.

Data directory:
    Files are looked up in ``DATA_DIR`` (``src/fars/extdata``) unless a
    ``data_dir`` is passed explicitly.  Nothing in this module writes to
    the data directory.
"""

from __future__ import annotations

import logging
import re
import warnings
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "extdata"

_FILENAME_TEMPLATE = "accident_{year:d}.csv.bz2"
_FILENAME_PATTERN = re.compile(r"^accident_(\d+)\.csv\.bz2$")

# Whole-file type inference, so a column gets one dtype regardless of size.
_READ_OPTIONS = {"low_memory": False, "on_bad_lines": "warn"}


class NotFoundError(FileNotFoundError):
    """
    Raised when the file for a requested year is not in the data directory.

    Attributes:
        path: The resolved path that was checked.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"file '{self.path}' does not exist")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: Union[int, float, str]) -> str:
    """
    Build the canonical filename for one year of accident data.

    Args:
        year: Any integer-coercible value.  Floats are truncated toward
            zero, not rounded.

    Returns:
        Filename of the form ``accident_<year>.csv.bz2``.

    Example:
        >>> make_filename(2013.9)
        'accident_2013.csv.bz2'
    """
    if isinstance(year, str):
        year = float(year)
    return _FILENAME_TEMPLATE.format(year=int(year))


def resolve_path(filename: str, data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return *filename* joined onto the data directory (not checked)."""
    base = Path(data_dir) if data_dir is not None else DATA_DIR
    return base / filename


def load_year_table(
    filename: str,
    data_dir: Optional[Union[str, Path]] = None,
    quiet: bool = True,
) -> pd.DataFrame:
    """
    Read one accident file into a DataFrame.

    Args:
        filename: Bare filename, usually from :func:`make_filename`.
        data_dir: Directory to resolve *filename* against.  Defaults to
            the package ``extdata`` directory.
        quiet: When ``True`` (default), parser warnings (``ParserWarning``
            for skipped malformed rows) are suppressed.  Parsing itself is
            identical either way.

    Returns:
        DataFrame with every column in the file.  Rows with more fields
        than the header are skipped.

    Raises:
        NotFoundError: If the resolved path does not exist.
    """
    path = resolve_path(filename, data_dir)
    if not path.is_file():
        raise NotFoundError(path)

    with warnings.catch_warnings():
        if quiet:
            warnings.simplefilter("ignore")
        df = pd.read_csv(path, **_READ_OPTIONS)

    logger.debug(
        f"Loaded {len(df)} rows from {path.name}",
        extra={"path": str(path), "rows": len(df)},
    )
    return df


def available_years(data_dir: Optional[Union[str, Path]] = None) -> List[int]:
    """
    List the years that have a file in the data directory.

    Args:
        data_dir: Directory to scan.  Defaults to the package data directory.

    Returns:
        Sorted list of integer years.  Empty if the directory is absent.
    """
    base = Path(data_dir) if data_dir is not None else DATA_DIR
    if not base.is_dir():
        return []

    years = []
    for entry in base.iterdir():
        match = _FILENAME_PATTERN.match(entry.name)
        if match and entry.is_file():
            years.append(int(match.group(1)))
    return sorted(years)
