"""
Discord bot for decoding METARs in chat.

Commands:
* !metar <ICAO> -- fetch the latest report for a station and decode it
* !metar_parse <report> -- decode the given report text

The bot token is read from the WXMETAR_DISCORD_TOKEN environment variable.

https://message.style/app/editor
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

import discord
from discord.ext import commands

from wxmetar.errors import MetarFetchError, WxMetarError
from wxmetar.fetch import fetch_metar, fetch_station_info
from wxmetar.metar import DecodedField, decode_report
from wxmetar.units import temperature_from_code

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "WXMETAR_DISCORD_TOKEN"


def _temperature_c(fields: list[DecodedField]) -> int | None:
    for field in fields:
        if field.label == "Temperature":
            return temperature_from_code(field.raw)
    return None


def _station_id(fields: list[DecodedField]) -> str | None:
    for field in fields:
        if field.label == "Station":
            return field.raw
    return None


# Upper bound (exclusive, °C) and embed colour, coldest first
_TEMPERATURE_BANDS = (
    (-10, (0, 0, 139)),
    (0, (0, 0, 255)),
    (10, (173, 216, 230)),
    (20, (0, 255, 0)),
    (30, (255, 255, 0)),
    (40, (255, 165, 0)),
)


def _color_from_temp(temp_c: float | None) -> discord.Colour:
    if temp_c is None:
        return discord.Colour.from_rgb(90, 90, 90)
    for upper_c, rgb in _TEMPERATURE_BANDS:
        if temp_c < upper_c:
            return discord.Colour.from_rgb(*rgb)
    return discord.Colour.from_rgb(255, 0, 0)


def _create_report_embed(
    report: str, fields: list[DecodedField], info: dict[str, Any] | None
) -> discord.Embed:

    station_id = _station_id(fields)
    station_name = None if info is None else info.get("site")
    if station_id is None:
        header = "METAR"
    elif station_name is not None:
        header = f"{station_id} ({station_name})"
    else:
        header = station_id

    embed = discord.Embed(
        title=header,
        colour=_color_from_temp(_temperature_c(fields)),
        description=f"```{' '.join(report.upper().split())}```",
    )
    # One line per decoded field, the raw group is shown as inline code
    for field in fields:
        embed.add_field(
            name=f"__{field.label}__",
            value=f"`{field.raw}` {field.value}",
            inline=False,
        )
    return embed


async def _lookup_station(station_id: str | None) -> dict[str, Any] | None:
    if station_id is None:
        return None
    try:
        return await asyncio.to_thread(fetch_station_info, station_id)
    except MetarFetchError as ex:
        logger.info("No station info for %s: %s", station_id, ex)
        return None


intents = discord.Intents.default()
intents.message_content = True

bot = commands.Bot(command_prefix="!", intents=intents)


@bot.event
async def on_ready() -> None:
    """When the bot first is launched"""
    logger.info("Logged in as %s", bot.user)


@bot.command(name="metar")  # type: ignore
async def metar(ctx: commands.Context, station_id: str) -> None:
    """METAR command"""

    try:
        raw_metar = await asyncio.to_thread(fetch_metar, station_id)
        fields = decode_report(raw_metar)
    except WxMetarError as ex:
        await ctx.send(f"Cannot load station data. {ex}")
        return

    info = await _lookup_station(_station_id(fields))
    await ctx.send(embed=_create_report_embed(raw_metar, fields, info))


@bot.command(name="metar_parse")  # type: ignore
async def metar_parse(ctx: commands.Context, *, metar_str: str = "") -> None:
    """METAR parse command"""

    try:
        fields = decode_report(metar_str)
    except WxMetarError as ex:
        await ctx.send(f"Cannot parse data. {ex}")
        return

    info = await _lookup_station(_station_id(fields))
    await ctx.send(embed=_create_report_embed(metar_str, fields, info))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    bot.run(token=os.environ.get(TOKEN_ENV_VAR, ""))
