"""
FARS Command-Line Interface

Exposes three subcommands:

    fars years                                       List years with data files
    fars summarize --years 2013 2014 [--output CSV]  Month x year accident counts
    fars map --region 28 --year 2013 [--output HTML] Accident map for one state

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .analysis.regions import InvalidRegionError, region_name
from .analysis.summary import month_year_counts
from .data.reader import NotFoundError, available_years
from .data.years import aggregate_years, failed_years, frames
from .reports.generators import map_region, write_summary
from .utils.logging import configure_logging


def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\nError: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_years(args: argparse.Namespace) -> None:
    """Print the years that have a data file."""
    years = available_years(args.data_dir)
    if not years:
        _die(f"No accident files found in {args.data_dir or 'package data'}")
    for year in years:
        print(year)


def handle_summarize(args: argparse.Namespace) -> None:
    """Print (and optionally save) the month x year count table.

    Years without a file are reported and skipped; the command fails only
    when none of the requested years could be loaded.

    Args:
        args: Parsed CLI arguments.
    """
    results = aggregate_years(args.years, data_dir=args.data_dir)
    summary = month_year_counts(frames(results))

    skipped = failed_years(results)
    if skipped:
        print(f"Skipped years: {', '.join(str(y) for y in skipped)}",
              file=sys.stderr)
    if summary.empty:
        _die("None of the requested years could be loaded.")

    print(summary.to_string())
    if args.output:
        path = write_summary(summary, args.output)
        print(f"\nSaved -> {path}")


def handle_map(args: argparse.Namespace) -> None:
    """Build the accident map for one region and year.

    Args:
        args: Parsed CLI arguments.
    """
    try:
        fig = map_region(
            args.region,
            args.year,
            data_dir=args.data_dir,
            output_path=args.output,
        )
    except (NotFoundError, InvalidRegionError) as exc:
        _die(str(exc))
        return

    if fig is None:
        print(f"No accidents to plot for {region_name(args.region)} in {args.year}.")
        return

    if args.output:
        print(f"Saved -> {args.output}")
    if args.show or not args.output:
        fig.show()


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``years``, ``summarize`` and
        ``map`` subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS - Fatality Analysis Reporting System\n"
            "Monthly accident summaries and state accident maps."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 files "
             "(default: the data shipped with the package).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug messages.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log messages as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    p_years = subs.add_parser(
        "years",
        help="List the years that have an accident file.",
    )
    p_years.set_defaults(func=handle_years)

    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
        description=(
            "Count accidents per month and year.\n\n"
            "Years without a data file are skipped with a warning."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        type=int,
        metavar="YEAR",
        help="Years to summarize, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="CSV",
        help="Also write the summary table to this CSV file.",
    )
    p_sum.set_defaults(func=handle_summarize)

    p_map = subs.add_parser(
        "map",
        help="Map the accident locations of one state in one year.",
    )
    p_map.add_argument(
        "--region",
        required=True,
        type=int,
        metavar="CODE",
        help="FARS state code, e.g. 28 for Mississippi.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        type=int,
        metavar="YEAR",
        help="Year of data to map.",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="HTML",
        help="Write the map to this HTML file.",
    )
    p_map.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Open the map in a browser (default when --output is not given).",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        json_format=args.log_json,
    )
    args.func(args)


if __name__ == "__main__":
    main()
