"""
Unit conversions for surface temperature readings.
"""

KELVIN_SCALE = 1.8
FAHRENHEIT_OFFSET = 459.67


def kelvin_to_fahrenheit(kelvin: float) -> float:
    """
    Convert a temperature from Kelvin to Fahrenheit.

    Args:
        kelvin (float): Temperature in Kelvin.

    Returns:
        float: Temperature in Fahrenheit, unrounded.
    """
    return kelvin * KELVIN_SCALE - FAHRENHEIT_OFFSET


def fahrenheit_to_kelvin(fahrenheit: float) -> float:
    """Inverse of kelvin_to_fahrenheit."""
    return (fahrenheit + FAHRENHEIT_OFFSET) / KELVIN_SCALE
