"""pycoerce - Coerce instants between epoch millis, text and date-time values."""

from __future__ import annotations

try:
    from pycoerce._version import __version__
except ModuleNotFoundError:  # source checkout without a build
    __version__ = "0.0.0.dev0"

from pycoerce._coerce import (
    Coercible,
    extend,
    to_date,
    to_date_time,
    to_long,
    to_string,
    to_timestamp,
)
from pycoerce._errors import (
    CoercionError,
    InstantOutOfRangeError,
    InvalidPatternError,
    ParseError,
    UnsupportedTypeError,
)
from pycoerce._instants import from_date, from_long
from pycoerce._parser import from_string
from pycoerce.format import Formatter, formatters, get_formatter
from pycoerce.timestamp import Timestamp

__all__ = [
    "from_date",
    "from_long",
    "from_string",
    "to_date",
    "to_date_time",
    "to_long",
    "to_string",
    "to_timestamp",
    "extend",
    "Coercible",
    "Formatter",
    "Timestamp",
    "formatters",
    "get_formatter",
    "CoercionError",
    "InstantOutOfRangeError",
    "InvalidPatternError",
    "ParseError",
    "UnsupportedTypeError",
]
