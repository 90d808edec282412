"""
Climate observation summary.
Aggregates tab-delimited observation files per region and prints a report.
"""

import sys

from climate.cli import main


if __name__ == "__main__":
    sys.exit(main())
