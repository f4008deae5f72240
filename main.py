# main.py

"""Entry point for the pricehunt command-line search."""

import argparse
import asyncio
import logging
import sys

from pricehunt.config.logging_config import setup_logging
from pricehunt.config.settings import Settings

logger = logging.getLogger("pricehunt.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    valid_ids = ", ".join(s["id"] for s in Settings.AVAILABLE_SOURCES)

    parser = argparse.ArgumentParser(
        prog="pricehunt",
        description="Search marketplaces for products within a price range.",
        epilog=f"Available sources: {valid_ids}",
    )
    parser.add_argument("query", help="Product to search for.")
    parser.add_argument(
        "--min",
        type=float,
        default=0.0,
        dest="min_price",
        help="Minimum price, inclusive (default: 0).",
    )
    parser.add_argument(
        "--max",
        type=float,
        default=float("inf"),
        dest="max_price",
        help="Maximum price, inclusive (default: no limit).",
    )
    parser.add_argument(
        "-s",
        "--sources",
        default=None,
        help="Comma-separated source IDs (default: all).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    return parser


def main() -> None:
    """Parse arguments and run a headless search."""
    from pricehunt.cli.runner import cli_search

    log_file = setup_logging()
    logger.info("pricehunt starting, log file: %s", log_file)

    args = _build_parser().parse_args()
    try:
        exit_code = asyncio.run(
            cli_search(
                query=args.query,
                min_price=args.min_price,
                max_price=args.max_price,
                source_csv=args.sources,
                output_format=args.output_format,
            )
        )
    except Exception:
        logger.critical("Fatal error during search", exc_info=True)
        raise
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
