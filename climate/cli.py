"""
Command line interface for the climate observation summary.
Aggregates tab-delimited observation files per region and prints a report.
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from climate.processor import Processor
from climate.config import Settings
from climate.logger import config_logger
from climate.report import render_report


def get_args(argv=None):
    """
    Parse command line arguments for the climate summary.
        :return: Parsed arguments.
        :rtype: argparse.Namespace
    """
    parser = argparse.ArgumentParser(
        description="Summarize tab-delimited climate observation files per region"
    )
    parser.add_argument(
        "files",
        nargs="+",
        metavar="tdv_file",
        help="Tab-delimited observation file(s), processed in order",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--csv",
        metavar="PATH",
        help="Also write the per-region summary to a CSV file",
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main function to run the climate summary."""

    args = get_args(argv)

    load_dotenv(verbose=True, dotenv_path=".env")
    settings = Settings.from_env()
    config_logger(debug=args.debug or settings.debug)

    processor = Processor(paths=args.files, report_malformed=settings.report_malformed)

    try:
        store = processor.run()
    except MemoryError:
        logging.critical("Memory could not be allocated")
        return 1

    if len(store) == 0:
        return 0

    sys.stdout.write(render_report(store))

    if args.csv:
        store.to_dataframe().to_csv(args.csv, index=False)
        logging.info("Summary written to %s", args.csv)

    return 0


if __name__ == "__main__":
    sys.exit(main())
