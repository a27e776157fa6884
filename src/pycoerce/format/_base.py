"""Formatter: parses text into, and renders text from, a UTC DateTime."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

import pendulum

from pycoerce._constants import DEFAULT_PIVOT_YEAR
from pycoerce._errors import ERR_MSG_PARSE_FAILED, ParseError
from pycoerce.format._fields import Element, FieldValues
from pycoerce.format._grammar import compile_pattern

_WEEK_FIELDS = ("weekyear", "week", "weekday")


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a single formatter attempt: a value or a failure reason."""

    value: pendulum.DateTime | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.value is not None

    @classmethod
    def success(cls, value: pendulum.DateTime) -> ParseResult:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> ParseResult:
        return cls(error=error)


def _resolve_date(fields: FieldValues) -> date:
    if any(name in fields for name in _WEEK_FIELDS):
        return date.fromisocalendar(
            fields.get("weekyear", 1970),
            fields.get("week", 1),
            fields.get("weekday", 1),
        )
    year = fields.get("year", 1970)
    if "day_of_year" in fields:
        resolved = date(year, 1, 1) + timedelta(days=fields["day_of_year"] - 1)
        if resolved.year != year or fields["day_of_year"] < 1:
            raise ValueError(f"day of year {fields['day_of_year']} out of range for {year}")
        return resolved
    return date(year, fields.get("month", 1), fields.get("day", 1))


def _resolve(fields: FieldValues) -> pendulum.DateTime:
    """Build a UTC DateTime from parsed fields, defaulting to 1970-01-01T00:00."""
    day = _resolve_date(fields)
    zone = timezone(timedelta(minutes=fields.get("offset", 0)))
    local = datetime(
        day.year,
        day.month,
        day.day,
        fields.get("hour", 0),
        fields.get("minute", 0),
        fields.get("second", 0),
        fields.get("microsecond", 0),
        tzinfo=zone,
    )
    return pendulum.instance(local.astimezone(timezone.utc), tz=pendulum.UTC)


class Formatter:
    """A named date-time format compiled from a Joda-style pattern.

    Formatting always renders in UTC; naive datetimes are read as UTC.
    Parsing converts any parsed offset to UTC.
    """

    def __init__(
        self,
        name: str,
        pattern: str,
        *,
        pivot_year: int = DEFAULT_PIVOT_YEAR,
    ) -> None:
        self._name = name
        self._pattern = pattern
        self._elements: list[Element] = compile_pattern(pattern, pivot_year=pivot_year)
        parts = []
        for i, element in enumerate(self._elements):
            following = self._elements[i + 1] if i + 1 < len(self._elements) else None
            fixed = element.numeric and following is not None and following.numeric
            parts.append(element.regex(f"f{i}", fixed))
        self._regex = re.compile("".join(parts), re.ASCII)

    @property
    def name(self) -> str:
        return self._name

    @property
    def pattern(self) -> str:
        return self._pattern

    def try_parse(self, text: str) -> ParseResult:
        """Parse ``text``, reporting failure in the result instead of raising."""
        if not isinstance(text, str):
            return ParseResult.failure(f"expected str, got {type(text).__name__}")
        match = self._regex.fullmatch(text)
        if match is None:
            return ParseResult.failure(f"text does not match pattern {self._pattern!r}")
        fields: FieldValues = {}
        for group, value in match.groupdict().items():
            self._elements[int(group[1:])].store(fields, value)
        try:
            return ParseResult.success(_resolve(fields))
        except (ValueError, OverflowError) as e:
            return ParseResult.failure(str(e))

    def parse(self, text: str) -> pendulum.DateTime:
        """Parse ``text`` into a UTC DateTime.

        Raises:
            ParseError: If the text does not match this format.
        """
        result = self.try_parse(text)
        if not result.ok:
            raise ParseError(
                ERR_MSG_PARSE_FAILED,
                f"{text!r} is not a valid {self._name}: {result.error}",
            )
        return result.value

    def format(self, dt: datetime) -> str:
        """Render ``dt`` in UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        else:
            dt = dt.astimezone(timezone.utc)
        return "".join(element.render(dt) for element in self._elements)

    def __repr__(self) -> str:
        return f"Formatter({self._name!r}, {self._pattern!r})"
