"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, plot generation, and file output.
No analysis logic lives here - this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: map_region() and write_summary().
"""

from .generators import (
    map_region,
    write_summary,
)

__all__ = [
    'map_region',
    'write_summary',
]
