"""
Tests for the rich table rendering and the wxmetar command.
"""

import io
import json
from unittest import mock

import pytest
from rich.console import Console

from wxmetar import console
from wxmetar.errors import MetarFetchError
from wxmetar.metar import DecodedField


@pytest.fixture(autouse=True)
def wide_terminal(monkeypatch):
    monkeypatch.setenv("COLUMNS", "200")


class TestRenderFields:
    """Table output."""

    def test_columns_and_rows(self):
        buffer = io.StringIO()
        out = Console(file=buffer, width=200)
        fields = [
            DecodedField("Wind", "Calm", "00000KT"),
            DecodedField("Visibility", "10 km or more", "9999"),
        ]
        console.render_fields(fields, console=out, title="Test Report")
        text = buffer.getvalue()
        for expected in ("Test Report", "Label", "Raw", "Value", "00000KT", "Calm"):
            assert expected in text
        assert "10 km or more" in text


class TestMain:
    """Command line entry point."""

    def test_decode_arguments(self, capsys):
        assert console.main(["KJFK", "121856Z", "00000KT"]) == 0
        out = capsys.readouterr().out
        assert "ICAO: KJFK" in out
        assert "Day 12, 18:56 UTC" in out
        assert "Calm" in out

    def test_example(self, capsys):
        assert console.main(["--example"]) == 0
        out = capsys.readouterr().out
        assert "Routine report" in out
        assert "30.49 inHg (1032 hPa)" in out

    def test_example_with_remarks(self, capsys):
        assert console.main(["--example", "--remarks"]) == 0
        out = capsys.readouterr().out
        assert "1032.4 hPa" in out

    def test_json(self, capsys):
        assert console.main(["--json", "kjfk", "00000kt"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload == [
            {"label": "Station", "value": "ICAO: KJFK", "raw": "KJFK"},
            {"label": "Wind", "value": "Calm", "raw": "00000KT"},
        ]

    def test_empty_input(self, capsys):
        assert console.main([]) == 1
        assert "Please enter a METAR string." in capsys.readouterr().out

    def test_unparseable(self, capsys):
        assert console.main(["XYZ123FOO"]) == 1
        assert "Could not parse" in capsys.readouterr().out

    def test_station(self, capsys):
        with mock.patch.object(
            console, "fetch_metar", return_value="KBOS 011254Z 36010KT"
        ) as fetch_metar:
            assert console.main(["--station", "kbos", "--timeout", "3"]) == 0
        fetch_metar.assert_called_once_with("kbos", timeout=3.0)
        assert "From 360° at 10 knots" in capsys.readouterr().out

    def test_station_fetch_error(self, capsys):
        with mock.patch.object(
            console, "fetch_metar", side_effect=MetarFetchError("offline")
        ):
            assert console.main(["--station", "KBOS"]) == 1
        assert "offline" in capsys.readouterr().out
