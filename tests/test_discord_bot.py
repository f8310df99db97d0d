"""
Tests for the Discord bot commands and embed building.
"""

import asyncio
from unittest import mock

import pytest

discord = pytest.importorskip("discord")

import discord_bot  # noqa: E402
from wxmetar.errors import MetarFetchError  # noqa: E402
from wxmetar.metar import decode_metar  # noqa: E402


class TestReportEmbed:
    """Embed contents for a decoded report."""

    def test_fields_and_header(self, example_metar):
        fields = decode_metar(example_metar)
        embed = discord_bot._create_report_embed(
            example_metar, fields, {"site": "New York/JF Kennedy Intl"}
        )
        assert embed.title == "KJFK (New York/JF Kennedy Intl)"
        assert embed.description == f"```{example_metar}```"
        assert [f.name for f in embed.fields][:2] == ["__Report Type__", "__Station__"]
        assert embed.fields[3].value == "`31009KT` From 310° at 9 knots"
        # -4°C is in the blue band
        assert embed.colour == discord.Colour.from_rgb(0, 0, 255)

    def test_without_station(self):
        fields = decode_metar("00000KT 9999")
        embed = discord_bot._create_report_embed("00000KT 9999", fields, None)
        assert embed.title == "METAR"
        assert embed.colour == discord.Colour.from_rgb(90, 90, 90)

    def test_station_lookup_failure(self):
        with mock.patch.object(
            discord_bot, "fetch_station_info", side_effect=MetarFetchError("offline")
        ):
            assert asyncio.run(discord_bot._lookup_station("KBOS")) is None
        assert asyncio.run(discord_bot._lookup_station(None)) is None

    @pytest.mark.parametrize(
        "temp_c,rgb",
        [
            (-11, (0, 0, 139)),
            (-10, (0, 0, 255)),
            (5, (173, 216, 230)),
            (19, (0, 255, 0)),
            (25, (255, 255, 0)),
            (39, (255, 165, 0)),
            (40, (255, 0, 0)),
        ],
    )
    def test_temperature_colour(self, temp_c, rgb):
        assert discord_bot._color_from_temp(temp_c) == discord.Colour.from_rgb(*rgb)


class TestCommands:
    """Command callbacks with the network mocked out."""

    def test_metar_fetches_and_replies(self):
        ctx = mock.AsyncMock()
        with mock.patch.object(
            discord_bot, "fetch_metar", return_value="KBOS 011254Z 36010KT 12/M03"
        ) as fetch_metar, mock.patch.object(
            discord_bot, "fetch_station_info", return_value={"site": "Boston"}
        ):
            asyncio.run(discord_bot.metar.callback(ctx, "kbos"))
        fetch_metar.assert_called_once_with("kbos")
        embed = ctx.send.call_args.kwargs["embed"]
        assert embed.title == "KBOS (Boston)"
        assert embed.fields[2].value == "`36010KT` From 360° at 10 knots"

    def test_metar_fetch_error(self):
        ctx = mock.AsyncMock()
        with mock.patch.object(
            discord_bot, "fetch_metar", side_effect=MetarFetchError("offline")
        ):
            asyncio.run(discord_bot.metar.callback(ctx, "KBOS"))
        ctx.send.assert_awaited_once_with("Cannot load station data. offline")

    def test_metar_parse_unparseable(self):
        ctx = mock.AsyncMock()
        asyncio.run(discord_bot.metar_parse.callback(ctx, metar_str="XYZ123FOO"))
        ctx.send.assert_awaited_once_with(
            "Cannot parse data. "
            "Could not parse the METAR string. Please check the format."
        )
