"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return new DataFrames or values.

Modules:
- summary: Month x year observation counts
- regions: Region validation/filtering and coordinate sanitization
"""

from .summary import (
    month_year_counts,
    project_months,
)

from .regions import (
    InvalidRegionError,
    REGION_NAMES,
    coordinate_bounds,
    filter_region,
    plottable_points,
    region_name,
    sanitize_coordinates,
    validate_region,
)

__all__ = [
    # Summary
    'month_year_counts',
    'project_months',
    # Regions
    'InvalidRegionError',
    'REGION_NAMES',
    'coordinate_bounds',
    'filter_region',
    'plottable_points',
    'region_name',
    'sanitize_coordinates',
    'validate_region',
]
