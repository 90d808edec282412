"""Observation Schema"""

import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class Observation:
    """
    Represents a single climate observation decoded from one input line.

    Attributes:
        region_code (str): Region the observation belongs to (e.g. a state code).
        observed_at (datetime.datetime): Time of the observation, UTC, second precision.
        humidity (float): Relative humidity, 0 - 100%.
        snow (bool): True if snow cover was present.
        cloud_cover (float): Cloud cover, 0 - 100%.
        lightning (bool): True if a lightning strike was recorded.
        temperature (float): Surface temperature in Fahrenheit.
    """

    region_code: str
    observed_at: datetime.datetime
    humidity: float
    snow: bool
    cloud_cover: float
    lightning: bool
    temperature: float
