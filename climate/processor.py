"""
Processor class for climate observation files.
"""

import logging
from typing import Iterable, List, Optional

from climate.parser import parse_line
from climate.schema import MalformedLine, SourceSummary
from climate.store import RegionStore


class Processor:
    """Feeds every input source, in order, into one shared RegionStore."""

    def __init__(
        self,
        paths: Iterable[str],
        report_malformed: bool = True,
        store: Optional[RegionStore] = None,
    ):
        self.paths = list(paths)
        self.report_malformed = report_malformed
        self.store = store if store is not None else RegionStore()
        self.sources: List[SourceSummary] = []

    def process_lines(
        self, lines: Iterable[str], source: Optional[str] = None
    ) -> SourceSummary:
        """
        Parse lines and fold the valid ones into the store.

        Args:
            lines (Iterable[str]): Raw lines of one source.
            source (str, optional): Path the lines came from, for diagnostics.

        Returns:
            SourceSummary: Counts for the processed lines.
        """
        summary = SourceSummary(path=source)

        for line_number, line in enumerate(lines, start=1):
            summary.lines_read += 1

            if not line.strip():
                continue

            result = parse_line(line, line_number=line_number, source=source)

            if isinstance(result, MalformedLine):
                summary.malformed_lines += 1
                if self.report_malformed:
                    logging.warning(
                        "Skipping malformed line %s:%d (%s)",
                        source or "<input>",
                        line_number,
                        result.reason,
                    )
                continue

            self.store.ingest(result)
            summary.records_ingested += 1

        return summary

    def process_file(self, path: str) -> SourceSummary:
        """
        Process one file. A file that cannot be opened is logged and skipped.

        Args:
            path (str): Path of a tab-delimited observation file.

        Returns:
            SourceSummary: Counts for the file; opened is False if it was skipped.
        """
        try:
            handle = open(path, "r", encoding="utf-8", errors="replace")
        except OSError as e:
            logging.error("%s does not exist or cannot be read: %s", path, e.strerror)
            return SourceSummary(path=path, opened=False)

        logging.info("Opening file: %s", path)
        with handle:
            return self.process_lines(handle, source=path)

    def run(self) -> RegionStore:
        """Process every source in argument order and return the store."""
        for path in self.paths:
            summary = self.process_file(path)
            self.sources.append(summary)

            if summary.opened:
                logging.info(
                    "Processed %s: %d records, %d malformed lines",
                    path,
                    summary.records_ingested,
                    summary.malformed_lines,
                )

        if len(self.store) == 0:
            logging.warning("No records found.")
        else:
            logging.info(
                "Done. %d records across %d regions.",
                self.store.total_records,
                len(self.store),
            )

        return self.store
