"""
FARS Plotting Package (Functional Core)

Pure plotting functions only - no file I/O, no side effects.
Every public function accepts DataFrames and returns a
``plotly.graph_objects.Figure``.

Modules:
    region_map: Accident locations as a geo scatter over state outlines.
"""

from .region_map import plot_region

__all__ = [
    'plot_region',
]
