"""Formatter registry for parsing and rendering instants.

Formatters are kept in a stable, documented order (``FORMATTER_ORDER``):
extended ISO-8601 date-times and calendar dates first, then ``mysql`` and
``rfc822``, ordinal and week dates, compact ISO layouts, and finally
time-only layouts. ``from_string`` tries them in this order, so a string
that more than one formatter accepts resolves to the earliest one.
"""

from __future__ import annotations

import enum
import logging
from datetime import datetime

import pendulum

from pycoerce._constants import DEFAULT_FORMATTER
from pycoerce.format._base import Formatter, ParseResult
from pycoerce.format.common import COMMON_PATTERNS
from pycoerce.format.iso import BASIC_PATTERNS, EXTENDED_PATTERNS, TIME_PATTERNS

__all__ = [
    "DEFAULT_FORMATTER",
    "FORMATTER_ORDER",
    "Formatter",
    "FormatterName",
    "ParseResult",
    "formatter",
    "formatters",
    "get_formatter",
    "parse",
    "register_formatter",
    "unparse",
]

logger = logging.getLogger(__name__)

_CALENDAR_NAMES = (
    "date_time",
    "date_time_no_ms",
    "date_hour_minute_second_ms",
    "date_hour_minute_second_fraction",
    "date_hour_minute_second",
    "date_hour_minute",
    "date_hour",
    "date",
    "year_month_day",
    "year_month",
    "year",
)

_PATTERNS: dict[str, str] = {
    **{name: EXTENDED_PATTERNS[name] for name in _CALENDAR_NAMES},
    **COMMON_PATTERNS,
    **{n: p for n, p in EXTENDED_PATTERNS.items() if n not in _CALENDAR_NAMES},
    **BASIC_PATTERNS,
    **TIME_PATTERNS,
}

FORMATTER_ORDER: tuple[str, ...] = tuple(_PATTERNS)
"""Built-in formatter names in the order ``from_string`` tries them."""

FormatterName = enum.StrEnum(
    "FormatterName", {name.upper(): name for name in FORMATTER_ORDER}
)
"""Names of the built-in formatters."""

formatters: dict[str, Formatter] = {
    name: Formatter(name, pattern) for name, pattern in _PATTERNS.items()
}
"""All registered formatters, in parse order."""


def get_formatter(name: str) -> Formatter:
    """Get a registered formatter by name.

    Args:
        name: Formatter name (e.g., "date_time", "basic_date", "rfc822").

    Returns:
        The registered Formatter.

    Raises:
        ValueError: If the formatter name is unknown.
    """
    fmt = formatters.get(name)
    if fmt is None:
        raise ValueError(
            f"unknown formatter: {name!r}. "
            f"Available: {', '.join(sorted(formatters))}"
        )
    return fmt


def formatter(pattern: str, *, name: str = "custom") -> Formatter:
    """Build an unregistered formatter from a Joda-style pattern."""
    return Formatter(name, pattern)


def register_formatter(name: str, pattern: str) -> Formatter:
    """Register a formatter under ``name``.

    A new name is tried after every existing formatter; re-registering an
    existing name replaces it in place.
    """
    fmt = Formatter(name, pattern)
    formatters[name] = fmt
    logger.debug("registered formatter %s with pattern %r", name, pattern)
    return fmt


def _lookup(fmt: Formatter | str) -> Formatter:
    if isinstance(fmt, Formatter):
        return fmt
    return get_formatter(fmt)


def parse(fmt: Formatter | str, text: str) -> pendulum.DateTime:
    """Parse ``text`` with a formatter or formatter name.

    Raises:
        ParseError: If the text does not match.
        ValueError: If the formatter name is unknown.
    """
    return _lookup(fmt).parse(text)


def unparse(fmt: Formatter | str, dt: datetime) -> str:
    """Render ``dt`` in UTC with a formatter or formatter name."""
    return _lookup(fmt).format(dt)
