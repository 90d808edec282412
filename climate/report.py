"""
Plain-text rendering of the per-region summary.
"""

import datetime
from typing import Optional

from climate.store import RegionStore


def format_timestamp(
    moment: datetime.datetime, tz: Optional[datetime.tzinfo] = None
) -> str:
    """
    Render a timestamp as e.g. ``Mon Aug  3 11:00:00 2015``.

    Args:
        moment (datetime.datetime): A timezone-aware timestamp.
        tz (datetime.tzinfo, optional): Zone to render in. Defaults to the
            local zone of the process.

    Returns:
        str: The ctime-style representation. A timestamp the zone cannot
        represent is rendered in its own zone.
    """
    try:
        return moment.astimezone(tz).ctime()
    except OverflowError:
        return moment.ctime()


def render_report(store: RegionStore, tz: Optional[datetime.tzinfo] = None) -> str:
    """
    Render the summary of every region in the store, in discovery order.

    Args:
        store (RegionStore): The populated store. It is not modified.
        tz (datetime.tzinfo, optional): Zone for the extrema timestamps.

    Returns:
        str: The report, one newline-terminated line per entry.
    """
    lines = ["States found: " + " ".join(store.region_codes)]

    for region in store:
        lines.extend(
            [
                f"-- State: {region.code} --",
                f"Number of Records: {region.record_count}",
                f"Average Humidity: {region.avg_humidity:0.1f}%",
                f"Average Temperature: {region.avg_temperature:0.1f}F",
                f"Max Temperature: {region.max_temperature:0.1f}F",
                "Max Temperature on: "
                + format_timestamp(region.max_temperature_at, tz),
                f"Min Temperature: {region.min_temperature:0.1f}F",
                "Min Temperature on: "
                + format_timestamp(region.min_temperature_at, tz),
                f"Lightning Strikes: {region.lightning_strikes}",
                f"Records with Snow Cover: {region.snow_records}",
                f"Average Cloud Cover: {region.avg_cloud_cover:0.1f}%",
            ]
        )

    return "\n".join(lines) + "\n"
