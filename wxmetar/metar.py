"""
Decoding of METAR/SPECI reports into a flat list of human readable fields.

The body of a report is positional, so groups are consumed strictly left to
right. Each group decoder gets one chance, in report order, to claim the token
at the cursor; optional groups that are not present are skipped. Anything left
over once the remarks (or the last group decoder) has been reached is dropped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass

from . import codes
from .common import quotify, thousands, tokenize_report
from .errors import EmptyReportError, UnparseableReportError
from .units import (
    celsius_to_fahrenheit,
    hpa_to_inhg,
    inhg_to_hpa,
    temperature_from_code,
)

logger = logging.getLogger(__name__)

EXAMPLE_METAR = "METAR KJFK 121856Z 31009KT 10SM FEW250 M04/M17 A3049 RMK AO2 SLP324"

_RE_STATION = re.compile(r"^[A-Z]{4}$")
_RE_DATE_TIME = re.compile(r"^(\d{2})(\d{2})(\d{2})Z$")
_RE_WIND = re.compile(r"^(\d{3})(\d{2,3})(?:G(\d{2,3}))?(KT|MPS)$")
_RE_WIND_VRB = re.compile(r"^VRB(\d{2,3})(KT|MPS)$")
_RE_WIND_VARIABILITY = re.compile(r"^(\d{3})V(\d{3})$")
_RE_VIS_METERS = re.compile(r"^\d{4}$")
_RE_VIS_MILES = re.compile(r"^(M)?(\d+|\d/\d+)SM$")
_RE_VIS_WHOLE = re.compile(r"^\d{1,2}$")
_RE_VIS_FRACTION = re.compile(r"^(\d/\d+)SM$")
_RE_WEATHER = re.compile(
    r"^(-|\+|VC)?"
    f"({'|'.join(codes.DESCRIPTOR_CODES)})?"
    f"({'|'.join(codes.PHENOMENA_CODES)})+$"
)
_RE_CLOUD = re.compile(r"^(SKC|CLR|FEW|SCT|BKN|OVC|VV)(\d{3})(CB|TCU)?$")
_RE_TEMP_DEW = re.compile(r"^(M?\d{2})/(M?\d{2})$")
_RE_ALTIMETER = re.compile(r"^A(\d{4})$")
_RE_QNH = re.compile(r"^Q(\d{4})$")


@dataclass(frozen=True)
class DecodedField:
    """
    One decoded piece of a report.

    Attributes:
    * label (str) -- Category of the field, ie 'Wind' or 'Clouds'.
    * value (str) -- Human readable decoded text.
    * raw (str) -- The coded group(s) the field was decoded from.
    """

    label: str
    value: str
    raw: str

    def __str__(self) -> str:
        return f"{self.label}: {self.value}"

    def to_dict(self) -> dict[str, str]:
        """Plain dictionary form, suitable for JSON output."""
        return asdict(self)


class MetarDecoder:
    """
    Sequential decoder for a single METAR/SPECI string. A new instance is
    needed for every report, decoding happens once in the constructor and the
    results are available in `fields`.
    """

    def __init__(self, metar_observation: str) -> None:
        """
        Decodes the given observation string.

        Parameters:
        * metar_observation (str) -- Full METAR/SPECI observation string
        """
        self.tokens = tokenize_report(metar_observation)
        self.fields: list[DecodedField] = []
        self._index = 0
        # These must be sequential
        self._decode_report_type()
        self._decode_station()
        self._decode_date_time()
        self._decode_report_mod()
        self._decode_wind()
        self._decode_wind_variability()
        if self._decode_visibility():
            self._merge_fractional_visibility()
        self._decode_present_weather()
        self._decode_sky_condition()
        self._decode_temp_dew()
        self._decode_altimeter()
        self._decode_remarks()
        if self._index < len(self.tokens):
            logger.debug(
                "Ignoring %d undecoded group(s) starting at '%s'",
                len(self.tokens) - self._index,
                self.tokens[self._index],
            )

    def __repr__(self) -> str:
        sb = f"{self.__class__.__name__}(\n"
        sb = f"{sb}    tokens={quotify(self.tokens)},\n"
        sb = f"{sb}    decoded_groups={quotify(self._index)},\n"
        sb = f"{sb}    fields={quotify(self.fields)},\n"
        return f"{sb})"

    def __str__(self) -> str:
        return "\n".join(str(field) for field in self.fields)

    def _peek(self, offset: int = 0) -> str | None:
        index = self._index + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def _take(self, label: str, value: str) -> None:
        """Emits a field for the token at the cursor and advances past it."""
        self.fields.append(DecodedField(label, value, self.tokens[self._index]))
        self._index += 1

    def _decode_report_type(self) -> None:
        group = self._peek()
        if group in codes.REPORT_TYPES:
            self._take("Report Type", codes.REPORT_TYPES[group])

    def _decode_station(self) -> None:
        group = self._peek()
        if group is not None and _RE_STATION.match(group):
            self._take("Station", f"ICAO: {group}")

    def _decode_date_time(self) -> None:
        group = self._peek()
        if group is None:
            return
        match = _RE_DATE_TIME.match(group)
        if match:
            day, hour, minute = match.groups()
            self._take("Observation Time", f"Day {day}, {hour}:{minute} UTC")

    def _decode_report_mod(self) -> None:
        group = self._peek()
        if group in codes.REPORT_MODIFIERS:
            self._take("Modifier", codes.REPORT_MODIFIERS[group])

    def _decode_wind(self) -> None:
        group = self._peek()
        if group is None:
            return
        # Calm would also satisfy the fixed direction pattern, so check it first
        if group == "00000KT":
            self._take("Wind", "Calm")
            return
        match = _RE_WIND.match(group)
        if match:
            direction, speed, gust, unit_code = match.groups()
            unit = codes.WIND_UNITS[unit_code]
            sb = f"From {direction}° at {int(speed)} {unit}"
            if gust is not None:
                sb = f"{sb}, gusting to {int(gust)} {unit}"
            self._take("Wind", sb)
            return
        match = _RE_WIND_VRB.match(group)
        if match:
            speed, unit_code = match.groups()
            unit = codes.WIND_UNITS[unit_code]
            self._take("Wind", f"Variable at {int(speed)} {unit}")

    def _decode_wind_variability(self) -> None:
        group = self._peek()
        if group is None:
            return
        match = _RE_WIND_VARIABILITY.match(group)
        if match:
            v1, v2 = match.groups()
            self._take("Wind Variability", f"Varying between {v1}° and {v2}°")

    def _decode_visibility(self) -> bool:
        """Returns True if a visibility group was consumed."""
        group = self._peek()
        if group is None:
            return False
        if group == "CAVOK":
            self._take(
                "Visibility",
                "Ceiling and visibility OK (>10 km, no significant weather)",
            )
            return True
        if _RE_VIS_METERS.match(group):
            if group == "9999":
                self._take("Visibility", "10 km or more")
            else:
                self._take("Visibility", f"{int(group)} meters")
            return True
        if group == "P6SM":
            self._take("Visibility", "More than 6 statute miles")
            return True
        match = _RE_VIS_MILES.match(group)
        if match:
            less_than, distance = match.groups()
            if less_than:
                self._take("Visibility", f"Less than {distance} statute miles")
            else:
                self._take("Visibility", f"{distance} statute miles")
            return True
        # Whole part of a split fractional visibility, ie '1 1/2SM'
        following = self._peek(1)
        if (
            _RE_VIS_WHOLE.match(group)
            and following is not None
            and _RE_VIS_FRACTION.match(following)
        ):
            self._take("Visibility", f"{group} statute miles")
            return True
        return False

    def _merge_fractional_visibility(self) -> None:
        """
        Folds a trailing fraction group into the visibility field that was just
        decoded, replacing it. The previous group is kept as written, ie
        '1 1/2SM' -> '1 1/2 statute miles'.
        """
        group = self._peek()
        if group is None:
            return
        match = _RE_VIS_FRACTION.match(group)
        if not match:
            return
        previous = self.fields[-1]
        self.fields[-1] = DecodedField(
            "Visibility",
            f"{previous.raw} {match.group(1)} statute miles",
            f"{previous.raw} {group}",
        )
        self._index += 1

    def _decode_present_weather(self) -> None:
        while True:
            group = self._peek()
            if group is None or not _RE_WEATHER.match(group):
                return
            self._take("Weather", codes.describe_weather(group))

    def _decode_sky_condition(self) -> None:
        while True:
            group = self._peek()
            if group is None:
                return
            if group in codes.CLOUD_STATUS_CODES:
                self._take("Clouds", codes.CLOUD_STATUS_CODES[group])
                continue
            if group in ("SKC", "CLR"):
                self._take("Clouds", codes.CLOUD_COVER_CODES[group])
                continue
            match = _RE_CLOUD.match(group)
            if not match:
                return
            cover_code, height, cloud_type = match.groups()
            cover = codes.CLOUD_COVER_CODES.get(cover_code, cover_code)
            sb = f"{cover} at {thousands(int(height) * 100)} ft"
            if cloud_type is not None:
                sb = f"{sb} ({codes.CLOUD_TYPE_CODES[cloud_type]})"
            self._take("Clouds", sb)

    def _decode_temp_dew(self) -> None:
        group = self._peek()
        if group is None:
            return
        match = _RE_TEMP_DEW.match(group)
        if not match:
            return
        for label, coded in zip(("Temperature", "Dewpoint"), match.groups()):
            temp_c = temperature_from_code(coded)
            temp_f = celsius_to_fahrenheit(temp_c)
            value = f"{temp_c}°C ({temp_f}°F)"
            self.fields.append(DecodedField(label, value, coded))
        self._index += 1

    def _decode_altimeter(self) -> None:
        group = self._peek()
        if group is None:
            return
        match = _RE_ALTIMETER.match(group)
        if match:
            altimeter_inhg = int(match.group(1)) / 100
            altimeter_hpa = inhg_to_hpa(altimeter_inhg)
            self._take(
                "Altimeter", f"{altimeter_inhg:.2f} inHg ({altimeter_hpa} hPa)"
            )
            return
        match = _RE_QNH.match(group)
        if match:
            qnh_hpa = int(match.group(1))
            qnh_inhg = hpa_to_inhg(qnh_hpa)
            self._take("Altimeter (QNH)", f"{qnh_hpa} hPa ({qnh_inhg:.2f} inHg)")

    def _decode_remarks(self) -> None:
        if self._peek() != "RMK":
            return
        remarks = self.tokens[self._index + 1 :]
        if len(remarks) > 0:
            self.fields.append(
                DecodedField(
                    "Remarks",
                    " ".join(remarks),
                    " ".join(self.tokens[self._index :]),
                )
            )
        # Remarks always run to the end of the report
        self._index = len(self.tokens)


def decode_metar(metar: str) -> list[DecodedField]:
    """
    Decodes a raw METAR/SPECI string into an ordered list of fields. Never
    raises for malformed input, an empty list means nothing was recognized.

    >>> [f.value for f in decode_metar("KJFK 121856Z 00000KT")]
    ['ICAO: KJFK', 'Day 12, 18:56 UTC', 'Calm']
    """
    return MetarDecoder(metar).fields


def decode_report(metar: str) -> list[DecodedField]:
    """
    Same as decode_metar() but for user entered text, where an empty input or
    an empty result should be reported back to the user.

    Raises:
    * EmptyReportError -- The string is empty or only whitespace.
    * UnparseableReportError -- No fields could be decoded.
    """
    if len(metar.strip()) == 0:
        raise EmptyReportError("Please enter a METAR string.")
    fields = decode_metar(metar)
    if len(fields) < 1:
        raise UnparseableReportError(
            "Could not parse the METAR string. Please check the format."
        )
    return fields
