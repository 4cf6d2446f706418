"""Command-line scanner for transaction files.

Reads transactions from a CSV or JSON file, runs batch detection, prints
the flagged transactions as a table, and optionally exports them as JSON.

Usage:
    fraud-scan --input transactions.csv --type csv --amount 1000 --window 5
"""

import argparse
import logging
import sys
from datetime import timedelta
from typing import List, Optional, TextIO

from pydantic import TypeAdapter

from app.detection.scheduler import detect_fraud
from app.errors import FraudDetectionError
from app.ingest.loaders import load_transactions
from app.models import DetectionConfig, FlaggedResult

logger = logging.getLogger(__name__)

TABLE_HEADER = ["ID", "Account", "Merchant", "Amount", "Timestamp", "Reason"]

_RESULT_LIST = TypeAdapter(List[FlaggedResult])


def build_parser() -> argparse.ArgumentParser:
    """Build the fraud-scan argument parser."""
    parser = argparse.ArgumentParser(
        prog="fraud-scan",
        description="Flag high-amount and rapid-succession transactions.",
    )
    parser.add_argument("--input", default="transactions.csv",
                        help="Path to input file (CSV or JSON)")
    parser.add_argument("--type", dest="file_type", default="csv",
                        choices=["csv", "json"], help="Input file type")
    parser.add_argument("--amount", type=float, default=1000.0,
                        help="High amount threshold")
    parser.add_argument("--window", type=int, default=5,
                        help="Time window in minutes for rapid transactions")
    parser.add_argument("--batch-size", type=int, default=100,
                        help="Transactions per concurrently scanned batch")
    parser.add_argument("--output", default=None,
                        help="Output file for flagged transactions")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def render_table(results: List[FlaggedResult]) -> str:
    """Format flagged results as a plain-text table."""
    rows = [
        [
            r.transaction.id,
            r.transaction.account_id,
            r.transaction.merchant,
            f"${r.transaction.amount:.2f}",
            r.transaction.timestamp.isoformat(),
            r.reason,
        ]
        for r in results
    ]
    widths = [
        max(len(row[col]) for row in [TABLE_HEADER] + rows)
        for col in range(len(TABLE_HEADER))
    ]

    def fmt(row: List[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()

    separator = "-+-".join("-" * width for width in widths)
    lines = [fmt(TABLE_HEADER), separator]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)


def display_results(results: List[FlaggedResult], out: Optional[TextIO] = None) -> None:
    """Print the flagged table, or a no-flags message, to `out` (stdout by default)."""
    out = out or sys.stdout
    if not results:
        print("No fraudulent transactions detected.", file=out)
        return
    print("Potentially Fraudulent Transactions:", file=out)
    print(render_table(results), file=out)


def export_results(results: List[FlaggedResult], path: str) -> None:
    """Write flagged results to a file as indented JSON."""
    with open(path, "wb") as f:
        f.write(_RESULT_LIST.dump_json(results, indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    """Run a scan from the command line and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = DetectionConfig(
        high_amount_threshold=args.amount,
        time_window=timedelta(minutes=args.window),
        batch_size=args.batch_size,
    )

    try:
        transactions = load_transactions(args.input, args.file_type)
        logger.info("Loaded %d transactions from %s", len(transactions), args.input)
        results = detect_fraud(transactions, config)
    except (OSError, ValueError, FraudDetectionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    display_results(results)

    if args.output:
        try:
            export_results(results, args.output)
        except OSError as exc:
            print(f"Error exporting results: {exc}", file=sys.stderr)
        else:
            print(f"\nResults exported to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
