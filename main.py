#!/usr/bin/env python3
"""
Command-line front end for the drain toolkit.

Examples:
    python main.py summary 1 2 2 3 3 4 4 5 100
    python main.py boxplot --csv data.csv --column height --plot output
    python main.py regress --csv data.csv --x dose --y response
    python main.py quadratic 1 0 -4
    python main.py col 3 1 2
"""

import argparse
import logging
import os
import sys

import pandas as pd

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from drain.algebra import solve_quadratic
from drain.output import col_text, save_summary_csv, summary_frame
from drain.stats import boxplot, lin_reg, r2

DEFAULT_OUTPUT_DIR = "output"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _read_column(path: str, column: str) -> list:
    df = pd.read_csv(path)
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found in {path}")
    values = pd.to_numeric(df[column], errors="coerce").dropna()
    logging.info("Read %d numeric values from %s[%s]", len(values), path, column)
    return values.astype(float).tolist()


def _samples(args) -> dict:
    """Collect named samples from positional values or CSV columns."""
    if args.csv:
        if not args.column:
            raise ValueError("--column is required with --csv")
        return {name: _read_column(args.csv, name) for name in args.column}
    if not args.values:
        raise ValueError("No values given")
    return {"sample": list(args.values)}


def _run_summary(args) -> None:
    samples = _samples(args)
    print(summary_frame(samples).to_string(index=False))
    if args.out:
        save_summary_csv(samples, output_dir=args.out)


def _run_boxplot(args) -> None:
    samples = _samples(args)
    for name, values in samples.items():
        box = boxplot(values)
        print(f"{name}:")
        for key, value in box.as_dict().items():
            print(f"  {key}: {value}")
    if args.plot:
        from drain.plotting import plot_boxplot

        path = plot_boxplot(samples, output_dir=args.plot)
        logging.info("Boxplot figure: %s", path)


def _run_regress(args) -> None:
    if args.csv:
        x = _read_column(args.csv, args.x)
        y = _read_column(args.csv, args.y)
    else:
        x, y = list(args.xs or []), list(args.ys or [])
    if not x:
        raise ValueError("No values given")
    fit = lin_reg(x, y, population=args.population)
    print(f"slope: {fit.slope}")
    print(f"intercept: {fit.intercept}")
    print(f"r: {fit.r}")
    print(f"r2: {r2(x, y, fit)}")
    print(f"p_value: {fit.p_value}")
    if args.plot:
        from drain.plotting import plot_regression

        path = plot_regression(x, y, fit=fit, output_dir=args.plot)
        logging.info("Regression figure: %s", path)


def _run_quadratic(args) -> None:
    roots = solve_quadratic(args.a, args.b, args.c)
    if not roots:
        print("no real roots")
    else:
        print(col_text(roots))


def _run_col(args) -> None:
    print(col_text(args.values))


def _add_sample_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("values", nargs="*", type=float, help="Numeric values.")
    parser.add_argument("--csv", default=None, help="Path to input CSV file.")
    parser.add_argument(
        "--column",
        action="append",
        default=None,
        help="CSV column to analyse (repeatable).",
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for the toolkit."""
    parser = argparse.ArgumentParser(
        description="Math and statistics helpers for quick numeric checks."
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    summary = sub.add_parser("summary", help="Descriptive statistics table.")
    _add_sample_arguments(summary)
    summary.add_argument(
        "--out", default=None, help="Also write summary.csv to this directory."
    )
    summary.set_defaults(func=_run_summary)

    box = sub.add_parser("boxplot", help="Quartiles, whiskers and outliers.")
    _add_sample_arguments(box)
    box.add_argument(
        "--plot",
        nargs="?",
        const=DEFAULT_OUTPUT_DIR,
        default=None,
        help=f"Save a figure (default directory: {DEFAULT_OUTPUT_DIR}).",
    )
    box.set_defaults(func=_run_boxplot)

    regress = sub.add_parser("regress", help="Least-squares straight line.")
    regress.add_argument("--csv", default=None, help="Path to input CSV file.")
    regress.add_argument("--x", default="x", help="CSV column for x.")
    regress.add_argument("--y", default="y", help="CSV column for y.")
    regress.add_argument("--xs", nargs="+", type=float, help="Inline x values.")
    regress.add_argument("--ys", nargs="+", type=float, help="Inline y values.")
    regress.add_argument(
        "--population",
        action="store_true",
        help="Use population (n) rather than sample (n - 1) correction.",
    )
    regress.add_argument(
        "--plot",
        nargs="?",
        const=DEFAULT_OUTPUT_DIR,
        default=None,
        help=f"Save a figure (default directory: {DEFAULT_OUTPUT_DIR}).",
    )
    regress.set_defaults(func=_run_regress)

    quad = sub.add_parser("quadratic", help="Real roots of a*x^2 + b*x + c.")
    quad.add_argument("a", type=float)
    quad.add_argument("b", type=float)
    quad.add_argument("c", type=float)
    quad.set_defaults(func=_run_quadratic)

    column = sub.add_parser("col", help="Print values one per line.")
    column.add_argument("values", nargs="*")
    column.set_defaults(func=_run_col)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        args.func(args)
    except (ValueError, OSError) as e:
        logging.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
