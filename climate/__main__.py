"""Allows running the summary as ``python -m climate``."""

import sys

from climate.cli import main

sys.exit(main())
