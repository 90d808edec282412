"""MalformedLine Schema"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MalformedLine:
    """
    A line that could not be decoded into an Observation.

    Attributes:
        reason (str): Why the line was rejected.
        line (str): The raw line, without its line terminator.
        line_number (int): 1-based position of the line in its source, if known.
        source (str): Path of the file the line came from, if known.
    """

    reason: str
    line: str
    line_number: Optional[int] = None
    source: Optional[str] = None
