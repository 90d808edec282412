"""
Module containing the schema definitions for the climate summary.
"""

from .observation import Observation
from .malformed_line import MalformedLine
from .region_accumulator import RegionAccumulator
from .source_summary import SourceSummary

__all__ = [
    "Observation",
    "MalformedLine",
    "RegionAccumulator",
    "SourceSummary",
]
