"""
Optional extra decoding for a handful of common US remark groups. This is not
a full remarks grammar, anything not recognized is ignored.
"""

from __future__ import annotations

import re

from .metar import DecodedField
from .units import celsius_to_fahrenheit

_STATION_TYPES = {
    "AO1": "Automated station without a precipitation discriminator",
    "AO2": "Automated station with a precipitation discriminator",
}

_RE_SLP = re.compile(r"^SLP(\d{3}|NO)$")
_RE_PRECISE_TEMP = re.compile(r"^T([01])(\d{3})(?:([01])(\d{3}))?$")


def _sea_level_pressure(slp_only: str) -> str:
    if slp_only == "NO":
        return "Not available"
    # Only tens, units and tenths are sent; 960.0 to 1059.9 hPa
    if slp_only[0] in ("0", "1", "2", "3", "4", "5"):
        slp_hpa = float(f"10{slp_only[0:2]}.{slp_only[2]}")
    else:
        slp_hpa = float(f"9{slp_only[0:2]}.{slp_only[2]}")
    return f"{slp_hpa:.1f} hPa"


def _precise_temperature(sign: str, tenths: str) -> str:
    temp_c = int(tenths) / 10
    if sign == "1":
        temp_c *= -1
    return f"{temp_c:.1f}°C ({celsius_to_fahrenheit(temp_c)}°F)"


def decode_remarks(metar_remarks: str) -> list[DecodedField]:
    """
    Decodes the station type, sea level pressure and hourly temperature groups
    found in US remarks. Accepts either the remarks text alone or the full
    'RMK ...' section.

    >>> [f.value for f in decode_remarks("AO2 SLP324")]
    ['Automated station with a precipitation discriminator', '1032.4 hPa']
    """
    fields: list[DecodedField] = []
    for remark in metar_remarks.upper().split():
        if remark in _STATION_TYPES:
            fields.append(DecodedField("Station Type", _STATION_TYPES[remark], remark))
            continue
        match = _RE_SLP.match(remark)
        if match:
            value = _sea_level_pressure(match.group(1))
            fields.append(DecodedField("Sea Level Pressure", value, remark))
            continue
        match = _RE_PRECISE_TEMP.match(remark)
        if match:
            temp_sign, temp, dew_sign, dew = match.groups()
            value = _precise_temperature(temp_sign, temp)
            fields.append(DecodedField("Precise Temperature", value, remark))
            if dew is not None:
                value = _precise_temperature(dew_sign, dew)
                fields.append(DecodedField("Precise Dewpoint", value, remark))
    return fields
