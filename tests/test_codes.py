"""
Tests for the code tables and weather group descriptions.
"""

import pytest

from wxmetar import codes
from wxmetar.common import thousands, tokenize_report


class TestTables:
    """Code tables are disjoint and read-only."""

    def test_weather_slots_disjoint(self):
        intensity = set(codes.INTENSITY_CODES)
        descriptors = set(codes.DESCRIPTOR_CODES)
        phenomena = set(codes.PHENOMENA_CODES)
        assert intensity.isdisjoint(descriptors)
        assert intensity.isdisjoint(phenomena)
        assert descriptors.isdisjoint(phenomena)
        assert len(codes.WEATHER_CODES) == 33

    def test_read_only(self):
        with pytest.raises(TypeError):
            codes.CLOUD_COVER_CODES["XXX"] = "Nope"  # type: ignore[index]

    def test_cloud_cover(self):
        assert codes.CLOUD_COVER_CODES["OVC"] == "Overcast (8 oktas)"
        assert codes.CLOUD_TYPE_CODES["TCU"] == "Towering cumulus"


class TestDescribeWeather:
    """Weather group descriptions."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("RA", "Rain"),
            ("-DZ", "Light Drizzle"),
            ("+SHSN", "Heavy Showers Snow"),
            ("VCTSRA", "In the vicinity Thunderstorm Rain"),
            ("BLSNFG", "Blowing Snow Fog"),
            ("+FC", "Heavy Funnel cloud/tornado"),
        ],
    )
    def test_known(self, code, expected):
        assert codes.describe_weather(code) == expected

    def test_unknown_pairs_are_skipped(self):
        assert codes.describe_weather("RAXX") == "Rain"

    def test_nothing_known_falls_back_to_code(self):
        assert codes.describe_weather("XXYY") == "XXYY"


class TestCommon:
    """Tokenizer and formatting helpers."""

    def test_tokenize(self):
        assert tokenize_report(" metar  kjfk\n121856z\t") == ["METAR", "KJFK", "121856Z"]

    @pytest.mark.parametrize("report", ["", " ", "\n\t "])
    def test_tokenize_empty(self, report):
        assert tokenize_report(report) == []

    def test_thousands(self):
        assert thousands(25000) == "25,000"
        assert thousands(800) == "800"
