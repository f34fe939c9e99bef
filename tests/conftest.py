"""Shared fixtures: small accident files written to a temporary data dir."""

from pathlib import Path

import pandas as pd
import pytest

_COLUMNS = ["STATE", "ST_CASE", "MONTH", "DAY", "LATITUDE", "LONGITUD", "FATALS"]


def write_accidents(data_dir: Path, year: int, rows: list) -> Path:
    """Write *rows* (tuples in ``_COLUMNS`` order) as accident_<year>.csv.bz2."""
    data_dir.mkdir(parents=True, exist_ok=True)
    path = data_dir / f"accident_{year}.csv.bz2"
    pd.DataFrame(rows, columns=_COLUMNS).to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture
def data_dir(tmp_path):
    """Two years of hand-made data.

    2001: Jan x2, Mar x1 (state 1); Jan x1 (state 2, one sentinel point).
    2002: Mar x2 (state 1); Dec x1 (state 5, all sentinel coordinates).
    """
    d = tmp_path / "extdata"
    write_accidents(d, 2001, [
        (1, 10001, 1, 3, 32.5, -86.5, 1),
        (1, 10002, 1, 9, 33.0, -87.0, 2),
        (1, 10003, 3, 1, 99.9999, 999.9999, 1),
        (2, 20001, 1, 4, 61.2, -149.9, 1),
    ])
    write_accidents(d, 2002, [
        (1, 10001, 3, 2, 31.9, -85.1, 1),
        (1, 10002, 3, 5, 34.7, 888.8888, 1),
        (5, 50001, 12, 24, 99.9999, 999.9999, 1),
    ])
    return d
