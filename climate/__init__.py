"""Streaming per-region summaries of tab-delimited climate observations."""

from .processor import Processor
from .store import RegionStore

__all__ = [
    "cli",
    "config",
    "logger",
    "parser",
    "report",
    "schema",
    "summation",
    "units",
    "Processor",
    "RegionStore",
]
