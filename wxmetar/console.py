"""
Terminal front end: decodes a report given on the command line (or fetched
from aviationweather.gov) and prints the fields as a rich table.
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.table import Table

from .errors import WxMetarError
from .fetch import DEFAULT_TIMEOUT, fetch_metar
from .metar import EXAMPLE_METAR, DecodedField, decode_report
from .remarks import decode_remarks

logger = logging.getLogger(__name__)


def render_fields(
    fields: Iterable[DecodedField],
    console: Console | None = None,
    title: str = "Decoded METAR",
    caption: str | None = None,
) -> None:
    """Prints decoded fields as a three column table (label, raw, value)."""
    if console is None:
        console = Console()
    table = Table(title=title, caption=caption, show_header=True)
    table.add_column("Label", style="bold", no_wrap=True)
    table.add_column("Raw", style="cyan", max_width=30)
    table.add_column("Value")
    for field in fields:
        table.add_row(field.label, field.raw, field.value)
    console.print(table)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wxmetar",
        description="Decode a METAR/SPECI report into human readable fields.",
    )
    parser.add_argument("report", nargs="*", help="raw report text")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-e", "--example", action="store_true", help="decode a sample report"
    )
    source.add_argument(
        "-s", "--station", help="fetch and decode the latest report for an ICAO id"
    )
    parser.add_argument(
        "-r",
        "--remarks",
        action="store_true",
        help="also decode common remark groups (AO2, SLP, T groups)",
    )
    parser.add_argument("--json", action="store_true", help="print JSON instead")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"network timeout in seconds (default {DEFAULT_TIMEOUT})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the wxmetar command, returns the process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console = Console()
    try:
        if args.example:
            report = EXAMPLE_METAR
        elif args.station:
            report = fetch_metar(args.station, timeout=args.timeout)
        else:
            report = " ".join(args.report)
        logger.debug("Decoding report '%s'", report)
        fields = decode_report(report)
    except WxMetarError as ex:
        console.print(f"[red]{ex}[/red]")
        return 1

    extra: list[DecodedField] = []
    if args.remarks:
        for field in fields:
            if field.label == "Remarks":
                extra = decode_remarks(field.value)

    if args.json:
        payload = [field.to_dict() for field in fields + extra]
        console.print_json(json.dumps(payload, ensure_ascii=False))
        return 0
    render_fields(fields, console=console, caption=" ".join(report.split()))
    if len(extra) > 0:
        render_fields(extra, console=console, title="Remarks")
    return 0
