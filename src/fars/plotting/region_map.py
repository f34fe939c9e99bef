"""
FARS Region Fatality Map (Functional Core)

Pure function - no file I/O, no side effects.
Input: sanitized accident DataFrame + bounding box.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/region_map.py

Backdrop:
    The geo layer draws country and first-level administrative outlines
    (``showsubunits``), clipped to the bounding latitude/longitude range
    of the points plus ``_BOUNDS_PAD_DEG`` on each side.  The pad keeps a
    single-accident map from collapsing to a zero-width range.

Markers:
    Each accident is one minimal ``Scattergeo`` point.  Rows with a
    missing coordinate are not drawn.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import pandas as pd
import plotly.graph_objects as go

from ..analysis.regions import LAT_COL, LON_COL, plottable_points

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_BOUNDS_PAD_DEG: float = 0.5

_MARKER_STYLE: Dict[str, Any] = {
    'size': 2,
    'color': 'black',
    'opacity': 0.8,
}

_GEO_STYLE: Dict[str, Any] = {
    'projection_type': 'mercator',
    'resolution': 50,
    'showland': True,
    'landcolor': 'rgb(245, 245, 245)',
    'showcountries': True,
    'countrycolor': 'rgb(120, 120, 120)',
    'showsubunits': True,
    'subunitcolor': 'rgb(120, 120, 120)',
    'showlakes': False,
}

# Extra columns surfaced in the hover label when present.
_HOVER_COLS = ('ST_CASE', 'MONTH', 'DAY', 'FATALS')


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_region(
    df: pd.DataFrame,
    bounds: Tuple[Tuple[float, float], Tuple[float, float]],
    title: Optional[str] = None,
) -> go.Figure:
    """
    Build a scatter map of accident locations inside a bounding box.

    Args:
        df: Sanitized accident rows (``LATITUDE`` / ``LONGITUD`` with
            ``NaN`` for missing values).
        bounds: ``((lat_min, lat_max), (lon_min, lon_max))`` as returned
            by ``analysis.regions.coordinate_bounds``.
        title: Optional figure title.

    Returns:
        ``plotly.graph_objects.Figure`` with a single ``Scattergeo`` trace.
    """
    (lat_min, lat_max), (lon_min, lon_max) = bounds
    points = plottable_points(df)

    fig = go.Figure()
    fig.add_trace(
        go.Scattergeo(
            lon=points[LON_COL].tolist(),
            lat=points[LAT_COL].tolist(),
            mode='markers',
            marker=_MARKER_STYLE,
            name='Fatal accidents',
            text=_hover_text(points),
            hoverinfo='text',
        )
    )

    fig.update_geos(
        lataxis_range=[lat_min - _BOUNDS_PAD_DEG, lat_max + _BOUNDS_PAD_DEG],
        lonaxis_range=[lon_min - _BOUNDS_PAD_DEG, lon_max + _BOUNDS_PAD_DEG],
        **_GEO_STYLE,
    )
    fig.update_layout(
        title=title,
        showlegend=False,
        margin={'l': 10, 'r': 10, 't': 50 if title else 10, 'b': 10},
        template='plotly_white',
    )
    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _hover_text(points: pd.DataFrame) -> list[str]:
    """One hover string per point: coordinates plus any known case fields."""
    cols = [c for c in _HOVER_COLS if c in points.columns]
    labels = []
    for row in points[cols + [LAT_COL, LON_COL]].to_dict('records'):
        parts = [f"{c}: {row[c]}" for c in cols]
        parts.append(f"({row[LAT_COL]:.4f}, {row[LON_COL]:.4f})")
        labels.append('<br>'.join(parts))
    return labels
