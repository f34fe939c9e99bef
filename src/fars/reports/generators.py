"""
FARS Report Generators (Imperative Shell)

Thin orchestration layer: resolves a year to its file, calls reader.py to
load it, calls the Functional Core to validate/filter/sanitize, calls the
plotting function to build the figure, and optionally writes output.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import map_region, write_summary
    from fars.data.years import summarize_years

    fig = map_region(28, 2013, output_path="ms_2013.html")
    write_summary(summarize_years([2013, 2014]), "summary.csv")

Mapping is strict: a missing file (``NotFoundError``) or an unknown region
(``InvalidRegionError``) propagates to the caller.  A region whose rows
are all filtered away is a successful no-op that returns ``None``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.regions import (
    coordinate_bounds,
    filter_region,
    plottable_points,
    region_name,
    sanitize_coordinates,
    validate_region,
)
from ..data.reader import load_year_table, make_filename
from ..plotting.region_map import plot_region

logger = logging.getLogger(__name__)


def map_region(
    region: int,
    year: Union[int, float, str],
    data_dir: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
) -> Optional[go.Figure]:
    """
    Map the fatal accidents of one region in one year.

    Steps: load the year, check the region exists in it, keep its rows,
    blank sentinel coordinates, bound the remaining points, and draw them
    over the region outlines.

    Args:
        region: Integer-coercible region (``STATE``) code.
        year: Integer-coercible year.
        data_dir: Optional override of the package data directory.
        output_path: When given, the figure is also written to this path
            as HTML.  Parent directories are created.

    Returns:
        The plotted figure, or ``None`` when there is nothing to plot.

    Raises:
        NotFoundError: If the year's file does not exist.
        InvalidRegionError: If *region* does not occur in that year.
    """
    df = load_year_table(make_filename(year), data_dir=data_dir)
    region = validate_region(df, region)

    df_region = filter_region(df, region)
    if df_region.empty:
        logger.info(
            "no accidents to plot",
            extra={"region": region, "year": str(year)},
        )
        return None

    df_region = sanitize_coordinates(df_region)
    if plottable_points(df_region).empty:
        logger.warning(
            f"no valid coordinates for region {region} in {year}; nothing to plot",
            extra={"region": region, "year": str(year), "rows": len(df_region)},
        )
        return None

    bounds = coordinate_bounds(df_region)
    title = f"Fatal accidents: {region_name(region)} ({int(float(year))})"
    fig = plot_region(df_region, bounds, title=title)

    if output_path is not None:
        out_path = Path(output_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out_path))
        logger.info(
            f"Map saved -> {out_path}",
            extra={"region": region, "path": str(out_path)},
        )

    return fig


def write_summary(summary: pd.DataFrame, output_path: Union[str, Path]) -> Path:
    """
    Write a month x year summary to CSV, ``MONTH`` as the first column.

    Args:
        summary: Result of ``data.years.summarize_years``.
        output_path: Destination ``.csv`` path.  Parent directories are
            created.

    Returns:
        The path written.
    """
    out_path = Path(output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(out_path, index=True)
    logger.info(f"Summary saved -> {out_path}", extra={"path": str(out_path)})
    return out_path
