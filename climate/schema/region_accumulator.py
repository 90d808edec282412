"""RegionAccumulator Schema"""

import datetime
from dataclasses import dataclass, field

from climate.summation import RunningSum
from .observation import Observation


@dataclass
class RegionAccumulator:
    """
    Running statistics for every observation seen for one region.

    Averages are never stored; they are derived from the sums on access.

    Attributes:
        code (str): Region code, fixed at creation.
        record_count (int): Number of observations folded in.
        sum_temperature (RunningSum): Sum of temperatures, Fahrenheit.
        sum_humidity (RunningSum): Sum of humidity readings.
        sum_cloud_cover (RunningSum): Sum of cloud cover readings.
        snow_records (int): Number of observations with snow cover.
        lightning_strikes (int): Number of observations with lightning.
        max_temperature (float): Highest temperature seen, Fahrenheit.
        max_temperature_at (datetime.datetime): When max_temperature was observed.
        min_temperature (float): Lowest temperature seen, Fahrenheit.
        min_temperature_at (datetime.datetime): When min_temperature was observed.
    """

    code: str
    max_temperature: float
    max_temperature_at: datetime.datetime
    min_temperature: float
    min_temperature_at: datetime.datetime
    record_count: int = 0
    sum_temperature: RunningSum = field(default_factory=RunningSum)
    sum_humidity: RunningSum = field(default_factory=RunningSum)
    sum_cloud_cover: RunningSum = field(default_factory=RunningSum)
    snow_records: int = 0
    lightning_strikes: int = 0

    @classmethod
    def from_observation(cls, observation: Observation) -> "RegionAccumulator":
        """
        Create an accumulator seeded with its first observation.

        Args:
            observation (Observation): First observation seen for the region.

        Returns:
            RegionAccumulator: Accumulator with record_count == 1.
        """
        accumulator = cls(
            code=observation.region_code,
            max_temperature=observation.temperature,
            max_temperature_at=observation.observed_at,
            min_temperature=observation.temperature,
            min_temperature_at=observation.observed_at,
        )
        accumulator._add_totals(observation)
        return accumulator

    def update(self, observation: Observation) -> None:
        """
        Fold one more observation into the running statistics.

        Extrema only move on a strictly greater (or smaller) temperature, so the
        first occurrence of a tied extreme keeps its timestamp.

        Args:
            observation (Observation): Observation for this region.
        """
        if observation.region_code != self.code:
            raise ValueError(
                f"Observation for {observation.region_code!r} "
                f"routed to accumulator {self.code!r}"
            )

        self._add_totals(observation)

        if observation.temperature > self.max_temperature:
            self.max_temperature = observation.temperature
            self.max_temperature_at = observation.observed_at
        if observation.temperature < self.min_temperature:
            self.min_temperature = observation.temperature
            self.min_temperature_at = observation.observed_at

    def _add_totals(self, observation: Observation) -> None:
        self.record_count += 1
        self.sum_temperature.add(observation.temperature)
        self.sum_humidity.add(observation.humidity)
        self.sum_cloud_cover.add(observation.cloud_cover)
        if observation.snow:
            self.snow_records += 1
        if observation.lightning:
            self.lightning_strikes += 1

    @property
    def avg_temperature(self) -> float:
        """Average temperature, Fahrenheit."""
        return self.sum_temperature.value / self.record_count

    @property
    def avg_humidity(self) -> float:
        """Average humidity, percent."""
        return self.sum_humidity.value / self.record_count

    @property
    def avg_cloud_cover(self) -> float:
        """Average cloud cover, percent."""
        return self.sum_cloud_cover.value / self.record_count
