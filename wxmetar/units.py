"""
Unit conversions used when decoding temperature and altimeter groups.
"""

from __future__ import annotations

import math

from .errors import UnitConversionError

# Altimeter setting conversion, hectopascals per inch of mercury as used for
# the paired inHg/hPa readouts. Deliberately the rounded 33.86 rather than
# 33.8639, so A3049 reads 1032 hPa and Q1013 reads 29.92 inHg.
ALTIMETER_HPA_PER_INHG = 33.86


def round_half_up(value: float) -> int:
    """
    Rounds to the nearest integer with ties going towards positive infinity,
    so 24.5 -> 25 and -0.5 -> 0. This differs from the builtin round(), which
    rounds ties to the nearest even number.
    """
    return int(math.floor(value + 0.5))


def temperature_from_code(coded: str) -> int:
    """
    Decodes a two digit METAR temperature where a leading 'M' indicates a
    negative value, ie 'M04' -> -4 and '12' -> 12.
    """
    if coded.startswith("M"):
        return -int(coded[1:])
    return int(coded)


def celsius_to_fahrenheit(temp_c: float) -> int:
    """Celsius to whole degrees fahrenheit, ie -4 -> 25."""
    return round_half_up(convert_temperature(temp_c, "C", "F"))


def inhg_to_hpa(pressure_inhg: float) -> int:
    """Altimeter setting in inches of mercury to whole hectopascals."""
    return round_half_up(convert_pressure(pressure_inhg, "INHG", "HPA"))


def hpa_to_inhg(pressure_hpa: float) -> float:
    """Altimeter setting in hectopascals to inches of mercury."""
    return convert_pressure(pressure_hpa, "HPA", "INHG")


def convert_temperature(temperature: float, current_unit: str, to_unit: str) -> float:
    """
    Converts a temperature between 'C' (celsius) and 'F' (fahrenheit). The
    result is not rounded.

    Raises:
    * UnitConversionError -- Either unit is not 'C' or 'F'.
    """
    valid_units = ("C", "F")
    conv_from = current_unit.upper().strip()
    conv_to = to_unit.upper().strip()
    if conv_from not in valid_units:
        raise UnitConversionError(f"Invalid current unit specified: '{conv_from}'")
    if conv_to not in valid_units:
        raise UnitConversionError(f"Invalid convert to unit specified: '{conv_to}'")
    if conv_from == conv_to:
        return temperature
    if conv_from == "F":
        return (temperature - 32) / 1.8
    return temperature * 1.8 + 32


def convert_pressure(pressure: float, current_unit: str, to_unit: str) -> float:
    """
    Converts an altimeter setting between 'INHG' and 'HPA' (case insensitive).
    The result is not rounded.

    Raises:
    * UnitConversionError -- Either unit is not 'INHG' or 'HPA'.
    """
    valid_units = ("INHG", "HPA")
    conv_from = current_unit.upper().strip()
    conv_to = to_unit.upper().strip()
    if conv_from not in valid_units:
        raise UnitConversionError(f"Invalid current unit specified: '{conv_from}'")
    if conv_to not in valid_units:
        raise UnitConversionError(f"Invalid convert to unit specified: '{conv_to}'")
    if conv_from == conv_to:
        return pressure
    if conv_from == "INHG":
        return pressure * ALTIMETER_HPA_PER_INHG
    return pressure / ALTIMETER_HPA_PER_INHG
