"""
Shared builders for the test cases.
"""

import datetime

from climate.schema import Observation


def make_line(
    code="TN",
    millis=1420000000000,
    geohash="9prcjqk3yc80",
    humidity="50.0",
    snow="0.0",
    cloud_cover="40.0",
    lightning="0.0",
    pressure="95644.0",
    kelvin="283.15",
):
    """Build one tab-delimited input line."""
    fields = [
        code,
        str(millis),
        geohash,
        humidity,
        snow,
        cloud_cover,
        lightning,
        pressure,
        kelvin,
    ]
    return "\t".join(fields) + "\n"


def make_observation(
    code="TN",
    seconds=1420000000,
    humidity=50.0,
    snow=False,
    cloud_cover=40.0,
    lightning=False,
    temperature=50.0,
):
    """Build an Observation directly, temperature already in Fahrenheit."""
    return Observation(
        region_code=code,
        observed_at=datetime.datetime.fromtimestamp(seconds, tz=datetime.timezone.utc),
        humidity=humidity,
        snow=snow,
        cloud_cover=cloud_cover,
        lightning=lightning,
        temperature=temperature,
    )
