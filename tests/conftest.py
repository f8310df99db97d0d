import pytest

from wxmetar.metar import EXAMPLE_METAR


@pytest.fixture
def example_metar() -> str:
    """The sample report used by the console --example flag."""
    return EXAMPLE_METAR


@pytest.fixture
def icao_metar() -> str:
    """An international style report with metric visibility and QNH."""
    return (
        "METAR EGLL 201650Z AUTO 24012G25KT 210V280 9999 -SHRA BKN025CB 12/07 Q1013"
    )
