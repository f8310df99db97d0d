"""
Static code tables used when decoding METAR/SPECI groups. All tables are
read-only mappings of "metar code": "description".
"""

from types import MappingProxyType
from typing import Mapping

# Intensity or proximity, only ever the leading part of a weather group
INTENSITY_CODES: Mapping[str, str] = MappingProxyType(
    {
        "-": "Light",
        "+": "Heavy",
        "VC": "In the vicinity",
    }
)

DESCRIPTOR_CODES: Mapping[str, str] = MappingProxyType(
    {
        "MI": "Shallow",
        "PR": "Partial",
        "BC": "Patches",
        "DR": "Low drifting",
        "BL": "Blowing",
        "SH": "Showers",
        "TS": "Thunderstorm",
        "FZ": "Freezing",
    }
)

# Precipitation, obscuration and other phenomena
PHENOMENA_CODES: Mapping[str, str] = MappingProxyType(
    {
        "RA": "Rain",
        "DZ": "Drizzle",
        "SN": "Snow",
        "SG": "Snow grains",
        "IC": "Ice crystals",
        "PL": "Ice pellets",
        "GR": "Hail",
        "GS": "Small hail",
        "UP": "Unknown precipitation",
        "FG": "Fog",
        "BR": "Mist",
        "HZ": "Haze",
        "SA": "Sand",
        "DU": "Dust",
        "FU": "Smoke",
        "VA": "Volcanic ash",
        "PY": "Spray",
        "SQ": "Squall",
        "PO": "Dust/sand whirls",
        "DS": "Duststorm",
        "SS": "Sandstorm",
        "FC": "Funnel cloud/tornado",
    }
)

WEATHER_CODES: Mapping[str, str] = MappingProxyType(
    {**INTENSITY_CODES, **DESCRIPTOR_CODES, **PHENOMENA_CODES}
)

CLOUD_COVER_CODES: Mapping[str, str] = MappingProxyType(
    {
        "SKC": "Sky clear",
        "CLR": "Clear",
        "FEW": "Few (1-2 oktas)",
        "SCT": "Scattered (3-4 oktas)",
        "BKN": "Broken (5-7 oktas)",
        "OVC": "Overcast (8 oktas)",
        "VV": "Vertical visibility",
    }
)

CLOUD_TYPE_CODES: Mapping[str, str] = MappingProxyType(
    {
        "CB": "Cumulonimbus",
        "TCU": "Towering cumulus",
    }
)

# Sky condition groups that stand alone without a height
CLOUD_STATUS_CODES: Mapping[str, str] = MappingProxyType(
    {
        "NCD": "No clouds detected",
        "NSC": "No significant clouds",
    }
)

REPORT_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "METAR": "Routine report",
        "SPECI": "Special (unscheduled) report",
    }
)

REPORT_MODIFIERS: Mapping[str, str] = MappingProxyType(
    {
        "AUTO": "Fully automated report",
        "COR": "Corrected report",
    }
)

WIND_UNITS: Mapping[str, str] = MappingProxyType(
    {
        "KT": "knots",
        "MPS": "m/s",
    }
)


def describe_weather(code: str) -> str:
    """
    Decodes a single present weather group into a space separated description,
    ie '+TSRA' -> 'Heavy Thunderstorm Rain'. The intensity (or proximity) comes
    first, followed by every recognized two letter group in order. Unknown
    groups are left out; if nothing at all is recognized the code itself is
    returned.
    """
    parts: list[str] = []
    i = 0
    if code[:1] in ("-", "+"):
        parts.append(INTENSITY_CODES[code[0]])
        i = 1
    if code[i : i + 2] == "VC":
        parts.append(INTENSITY_CODES["VC"])
        i += 2
    while i < len(code):
        pair = code[i : i + 2]
        if pair in WEATHER_CODES:
            parts.append(WEATHER_CODES[pair])
        i += 2
    if len(parts) < 1:
        return code
    return " ".join(parts)
