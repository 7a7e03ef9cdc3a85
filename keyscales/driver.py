"""
Print every scale in every key.

Usage:
    python -m keyscales.driver music.txt                  # CSV header + HTML lines
    python -m keyscales.driver music.txt --format csv     # CSV table
    python -m keyscales.driver music.txt --format pretty --no-header
"""
import argparse
import sys

from .errors import KeyScaleError
from .formatters import FORMATTERS, csv_header
from .keyed_scale import generate_keyed_scales
from .parser import (
    build_scale_table,
    build_scale_tones,
    parse_degree_records,
    read_scale_file,
)


def run(text: str, fmt: str = "html", header: bool = True, verbose: bool = False):
    """Yield output lines for a scale listing. All formulas are converted
    before the first line is produced, so bad input fails before any output."""
    formatter = FORMATTERS[fmt]
    records = parse_degree_records(text)
    scale_tones = build_scale_tones(build_scale_table(records))
    if verbose:
        _print_summary(records, scale_tones)
    if header:
        yield csv_header()
    for ks in generate_keyed_scales(scale_tones):
        yield formatter(ks)


def _print_summary(records, scale_tones, limit: int = 10) -> None:
    print(f"Parsed {len(records)} formula lines into {len(scale_tones)} scales.",
          file=sys.stderr)
    print(f"\n── Scales (first {limit}) ───────────────────────────────────────────────",
          file=sys.stderr)
    for name in list(scale_tones)[:limit]:
        tones = " ".join(f"{t:g}" for t in scale_tones[name])
        print(f"    {name:<30}{tones}", file=sys.stderr)
    print("────────────────────────────────────────────────────────────────────\n",
          file=sys.stderr)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Expand a tab-delimited scale listing into every key.")
    parser.add_argument("file", help="Path to the scale listing (name<TAB>degrees).")
    parser.add_argument("--format", choices=sorted(FORMATTERS), default="html",
                        help="Output format for each keyed scale (default: html).")
    parser.add_argument("--no-header", action="store_true",
                        help="Do not print the CSV header line first.")
    parser.add_argument("--verbose", action="store_true",
                        help="Print a parsing summary to stderr.")
    args = parser.parse_args(argv)

    if args.verbose:
        print(f"Reading {args.file}...", file=sys.stderr)

    try:
        text = read_scale_file(args.file)
    except (OSError, UnicodeDecodeError) as e:
        sys.exit(f"Error reading scale file: {e}")

    try:
        for line in run(text, args.format, header=not args.no_header,
                        verbose=args.verbose):
            print(line)
    except KeyScaleError as e:
        sys.exit(f"Error parsing scale file: {e}")


if __name__ == "__main__":
    main()
