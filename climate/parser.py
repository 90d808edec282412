"""
Decoding of tab-delimited climate observation lines.

Each line carries nine tab-separated fields::

    region code, timestamp (epoch ms), geohash, humidity, snow (0/1),
    cloud cover, lightning (0/1), pressure (Pa), surface temperature (K)

The geohash and pressure fields are checked for presence and skipped.
"""

import datetime
import math
from typing import Optional, Union

from climate.schema import Observation, MalformedLine
from climate.units import kelvin_to_fahrenheit

FIELD_DELIMITER = "\t"
FIELD_COUNT = 9


class _FieldError(ValueError):
    """A single field could not be decoded."""


def _parse_float(text: str, name: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise _FieldError(f"{name} is not a number: {text!r}") from None

    if not math.isfinite(value):
        raise _FieldError(f"{name} is not finite: {text!r}")

    return value


def _parse_flag(text: str, name: str) -> bool:
    # upstream files write flags as 0.0 / 1.0
    return int(_parse_float(text, name)) != 0


def _parse_timestamp(text: str) -> datetime.datetime:
    try:
        millis = int(text)
    except ValueError:
        raise _FieldError(f"timestamp is not an integer: {text!r}") from None

    seconds = abs(millis) // 1000
    if millis < 0:
        seconds = -seconds

    try:
        return datetime.datetime.fromtimestamp(seconds, tz=datetime.timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise _FieldError(f"timestamp out of range: {text!r}") from None


def parse_line(
    line: str, line_number: Optional[int] = None, source: Optional[str] = None
) -> Union[Observation, MalformedLine]:
    """
    Decode one input line into an Observation.

    Args:
        line (str): Raw line, with or without its line terminator.
        line_number (int, optional): Position of the line in its source.
        source (str, optional): Path of the file the line came from.

    Returns:
        Observation | MalformedLine: The decoded observation, or a
        MalformedLine describing why the line was rejected.
    """
    text = line.rstrip("\r\n")
    fields = text.split(FIELD_DELIMITER)

    def malformed(reason: str) -> MalformedLine:
        return MalformedLine(
            reason=reason, line=text, line_number=line_number, source=source
        )

    if len(fields) != FIELD_COUNT:
        return malformed(f"expected {FIELD_COUNT} fields, found {len(fields)}")

    (
        region_code,
        timestamp,
        geolocation,
        humidity,
        snow,
        cloud_cover,
        lightning,
        pressure,
        temperature,
    ) = fields

    region_code = region_code.strip()
    if not region_code:
        return malformed("region code is empty")

    if not geolocation.strip():
        return malformed("geolocation is empty")

    try:
        observed_at = _parse_timestamp(timestamp)
        _parse_float(pressure, "pressure")

        return Observation(
            region_code=region_code,
            observed_at=observed_at,
            humidity=_parse_float(humidity, "humidity"),
            snow=_parse_flag(snow, "snow"),
            cloud_cover=_parse_float(cloud_cover, "cloud cover"),
            lightning=_parse_flag(lightning, "lightning"),
            temperature=kelvin_to_fahrenheit(_parse_float(temperature, "temperature")),
        )
    except _FieldError as e:
        return malformed(str(e))
