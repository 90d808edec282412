"""SourceSummary Schema"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SourceSummary:
    """
    Bookkeeping for one processed input source.

    Attributes:
        path (str): Path of the source, or None for in-memory lines.
        opened (bool): False if the source could not be opened.
        lines_read (int): Number of lines read from the source.
        records_ingested (int): Number of lines folded into the store.
        malformed_lines (int): Number of lines rejected by the parser.
    """

    path: Optional[str]
    opened: bool = True
    lines_read: int = 0
    records_ingested: int = 0
    malformed_lines: int = 0
