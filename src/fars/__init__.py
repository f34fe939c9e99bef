"""
FARS - Fatality Analysis Reporting System utilities

Loads yearly US traffic-fatality accident files, summarizes accident
counts by month and year, and maps accident locations for one state.

Structure:
- data/     : Imperative Shell (file resolution, reading, multi-year loads)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : map orchestration and file output
"""

__version__ = "0.1.0"

from .data.reader import NotFoundError, load_year_table, make_filename
from .data.years import YearResult, aggregate_years, summarize_years
from .analysis.regions import InvalidRegionError
from .reports.generators import map_region

__all__ = [
    'NotFoundError',
    'InvalidRegionError',
    'YearResult',
    'make_filename',
    'load_year_table',
    'aggregate_years',
    'summarize_years',
    'map_region',
]
