# main.py

"""Entry point for inspecting saved product pages with price_tracker."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("price_tracker.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    valid_ids = ", ".join(s["id"] for s in Settings.AVAILABLE_SOURCES)

    parser = argparse.ArgumentParser(
        prog="price_tracker",
        description=(
            "Extract price, currency and description from a saved "
            "product page and classify the change against its history."
        ),
        epilog=f"Available sources: {valid_ids}",
    )
    parser.add_argument(
        "page",
        help="Path to a saved product page (HTML).",
    )
    parser.add_argument(
        "--history",
        default=None,
        help="JSON file with the stored product or its price history.",
    )
    parser.add_argument(
        "-s",
        "--source",
        default=Settings.DEFAULT_SOURCE,
        help=f"Selector set to use (default: {Settings.DEFAULT_SOURCE}).",
    )
    parser.add_argument(
        "--url",
        default="",
        help="Product URL to record on the snapshot.",
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
    """Parse arguments and run the offline inspection."""
    log_file = setup_logging()
    logger.info("price_tracker starting, log file: %s", log_file)

    args = _build_parser().parse_args()

    from src.cli.runner import run_inspect

    exit_code = run_inspect(
        page_path=args.page,
        history_path=args.history,
        source=args.source,
        url=args.url,
        output_format=args.output_format,
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
