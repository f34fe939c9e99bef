"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS system.

Modules:
- reader: Filename derivation, data directory resolution, file parsing
- years:  Multi-year loading with per-year failure results, summaries
"""

from .reader import (
    DATA_DIR,
    NotFoundError,
    available_years,
    load_year_table,
    make_filename,
    resolve_path,
)

from .years import (
    YearResult,
    aggregate_years,
    failed_years,
    frames,
    summarize_years,
)

__all__ = [
    # Reader
    'DATA_DIR',
    'NotFoundError',
    'available_years',
    'load_year_table',
    'make_filename',
    'resolve_path',
    # Years
    'YearResult',
    'aggregate_years',
    'failed_years',
    'frames',
    'summarize_years',
]
