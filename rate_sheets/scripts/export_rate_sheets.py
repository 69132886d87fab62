"""
Export Rate Sheets
==================

Builds one weight x zone sheet per (locale, shipping_speed) group of a
client's rates and writes them to a workbook (or a directory of CSVs).

Usage:
    python -m rate_sheets.scripts.export_rate_sheets
    python -m rate_sheets.scripts.export_rate_sheets --client-id 1240 --out rates.xlsx
    python -m rate_sheets.scripts.export_rate_sheets --format csv --out output/rates
    python -m rate_sheets.scripts.export_rate_sheets --dry-run
"""

import argparse
import sys
from pathlib import Path

from shared.database import close_connection
from rate_sheets.data import CLIENT_ID, MAX_WORKERS, ZERO_FILL, DEFAULT_FORMAT
from rate_sheets.export import FORMATS, export_sheets
from rate_sheets.pipeline import default_output_path, generate_rate_sheets
from rate_sheets.version import VERSION


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export a client's shipping rates as weight x zone sheets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m rate_sheets.scripts.export_rate_sheets
  python -m rate_sheets.scripts.export_rate_sheets --client-id 1240 --out rates.xlsx
  python -m rate_sheets.scripts.export_rate_sheets --format csv --out output/rates
  python -m rate_sheets.scripts.export_rate_sheets --sparse --dry-run
        """
    )

    parser.add_argument(
        "--client-id",
        type=int,
        default=CLIENT_ID,
        help=f"Client whose rates are exported (default: {CLIENT_ID})"
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Workbook path (xlsx) or output directory (csv) (default: output/)"
    )
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=FORMATS,
        default=DEFAULT_FORMAT,
        help=f"Output format (default: {DEFAULT_FORMAT})"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=MAX_WORKERS,
        help=f"Maximum concurrent group queries (default: {MAX_WORKERS})"
    )
    parser.add_argument(
        "--sparse",
        action="store_true",
        default=not ZERO_FILL,
        help="Don't pad rows with 0 for zones they have no rate for"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the sheets and print the summary without writing files"
    )

    return parser


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    out = args.out or default_output_path(args.fmt, args.client_id)

    print("=" * 60)
    print(f"RATE SHEET EXPORT - CLIENT {args.client_id} (v{VERSION})")
    print("=" * 60)

    try:
        sheets = generate_rate_sheets(
            client_id=args.client_id,
            max_workers=args.workers,
            zero_fill=not args.sparse,
        )

        print("\n" + "=" * 60)
        print("EXPORT SUMMARY")
        print("=" * 60)
        print(f"Sheets: {len(sheets):,}")
        print(f"Weight rows: {sum(len(s.data_rows) for s in sheets):,}")
        print(f"Format: {args.fmt}")

        if args.dry_run:
            print(f"\n[DRY RUN] Would write to: {out}")
            return

        print("\nStep 3: Exporting...")
        export_sheets(sheets, out, fmt=args.fmt)

        print("\n" + "=" * 60)
        print(f"Successfully exported {len(sheets):,} sheet(s) to {out}")
        print("=" * 60)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        raise
    finally:
        close_connection()


if __name__ == "__main__":
    main()
