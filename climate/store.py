"""
Aggregation store holding one running accumulator per region.
"""

import logging
from typing import Dict, Iterator, List, Optional

import pandas as pd

from climate.schema import Observation, RegionAccumulator

SUMMARY_COLUMNS = [
    "region",
    "records",
    "avg_humidity",
    "avg_temperature",
    "max_temperature",
    "max_temperature_at",
    "min_temperature",
    "min_temperature_at",
    "lightning_strikes",
    "snow_records",
    "avg_cloud_cover",
]


class RegionStore:
    """
    Maps region codes to their accumulators.

    Regions are created lazily on their first observation and iterated in the
    order they were first seen. The store is shared by every source in a run
    and is only mutated through ingest().
    """

    def __init__(self):
        self._regions: Dict[str, RegionAccumulator] = {}

    def ingest(self, observation: Observation) -> RegionAccumulator:
        """
        Route an observation to its region, creating the region if needed.

        Args:
            observation (Observation): A decoded observation.

        Returns:
            RegionAccumulator: The accumulator the observation was folded into.
        """
        if not isinstance(observation, Observation):
            raise TypeError(
                f"Expected an Observation, got {type(observation).__name__}"
            )

        accumulator = self._regions.get(observation.region_code)

        if accumulator is None:
            accumulator = RegionAccumulator.from_observation(observation)
            self._regions[observation.region_code] = accumulator
            logging.debug("New region found: %s", observation.region_code)
        else:
            accumulator.update(observation)

        return accumulator

    def get(self, code: str) -> Optional[RegionAccumulator]:
        """Accumulator for a region code, or None if never seen."""
        return self._regions.get(code)

    @property
    def region_codes(self) -> List[str]:
        """Region codes in discovery order."""
        return list(self._regions)

    @property
    def total_records(self) -> int:
        """Number of observations ingested across all regions."""
        return sum(region.record_count for region in self._regions.values())

    def to_dataframe(self) -> pd.DataFrame:
        """
        Summarize every region as one DataFrame row, in discovery order.

        Returns:
            pd.DataFrame: Per-region counts, averages and extrema.
        """
        rows = [
            {
                "region": region.code,
                "records": region.record_count,
                "avg_humidity": region.avg_humidity,
                "avg_temperature": region.avg_temperature,
                "max_temperature": region.max_temperature,
                "max_temperature_at": region.max_temperature_at,
                "min_temperature": region.min_temperature,
                "min_temperature_at": region.min_temperature_at,
                "lightning_strikes": region.lightning_strikes,
                "snow_records": region.snow_records,
                "avg_cloud_cover": region.avg_cloud_cover,
            }
            for region in self
        ]
        return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)

    def __getitem__(self, code: str) -> RegionAccumulator:
        return self._regions[code]

    def __contains__(self, code: object) -> bool:
        return code in self._regions

    def __iter__(self) -> Iterator[RegionAccumulator]:
        return iter(self._regions.values())

    def __len__(self) -> int:
        return len(self._regions)
