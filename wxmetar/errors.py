"""
Exception types raised by the wxmetar package. The decoder itself never
raises, these are for callers that need to turn an empty or unusable result
into a user facing message.
"""


class WxMetarError(Exception):
    """Base exception for everything raised by this package."""


class EmptyReportError(WxMetarError):
    """No report text was given to decode."""


class UnparseableReportError(WxMetarError):
    """The report was decoded but no fields could be recognized."""


class MetarFetchError(WxMetarError):
    """Retrieving a report or station info from a remote service failed."""


class UnitConversionError(WxMetarError):
    """Exception for unit conversion related errors."""
