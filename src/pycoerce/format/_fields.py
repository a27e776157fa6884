"""Pattern elements: how each field is matched, stored and rendered."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime

from pycoerce._constants import MAX_FRACTION_DIGITS, MAX_YEAR_DIGITS

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

FieldValues = dict[str, int]
"""Parsed field values keyed by field name (``year``, ``month``, ...)."""


class Element(ABC):
    """One piece of a compiled pattern."""

    numeric = False

    @abstractmethod
    def regex(self, group: str, fixed: bool) -> str:
        """Regex fragment matching this element.

        ``fixed`` is set when the next element is numeric too, in which case
        numeric elements must match exactly their letter count of digits.
        Otherwise the letter count is the minimum number of digits.
        """

    @abstractmethod
    def render(self, dt: datetime) -> str: ...

    def store(self, fields: FieldValues, text: str) -> None:
        pass


class Literal(Element):
    def __init__(self, text: str) -> None:
        self.text = text

    def regex(self, group: str, fixed: bool) -> str:
        return re.escape(self.text)

    def render(self, dt: datetime) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Literal({self.text!r})"


# letter -> (field name, natural width, getter)
_NUMBER_FIELDS: dict[str, tuple[str, int, Callable[[datetime], int]]] = {
    "y": ("year", MAX_YEAR_DIGITS, lambda dt: dt.year),
    "x": ("weekyear", MAX_YEAR_DIGITS, lambda dt: dt.isocalendar()[0]),
    "M": ("month", 2, lambda dt: dt.month),
    "d": ("day", 2, lambda dt: dt.day),
    "D": ("day_of_year", 3, lambda dt: dt.timetuple().tm_yday),
    "w": ("week", 2, lambda dt: dt.isocalendar()[1]),
    "e": ("weekday", 1, lambda dt: dt.isocalendar()[2]),
    "H": ("hour", 2, lambda dt: dt.hour),
    "m": ("minute", 2, lambda dt: dt.minute),
    "s": ("second", 2, lambda dt: dt.second),
}

_YEAR_LETTERS = {"y", "x"}


class Number(Element):
    """A numeric calendar or clock field."""

    numeric = True

    def __init__(self, letter: str, count: int, *, pivot_year: int) -> None:
        self.letter = letter
        self.count = count
        self.name, self._width, self._getter = _NUMBER_FIELDS[letter]
        self._pivot_year = pivot_year

    @property
    def two_digit_year(self) -> bool:
        return self.letter in _YEAR_LETTERS and self.count == 2

    def regex(self, group: str, fixed: bool) -> str:
        if fixed or self.two_digit_year:
            body = rf"\d{{{self.count}}}"
        elif self.letter in _YEAR_LETTERS:
            body = rf"[+-]?\d{{{self.count},{max(self.count, self._width)}}}"
        else:
            body = rf"\d{{{self.count},{max(self.count, self._width)}}}"
        return f"(?P<{group}>{body})"

    def store(self, fields: FieldValues, text: str) -> None:
        value = int(text)
        if self.two_digit_year:
            low = self._pivot_year - 50
            value = low + (value - low) % 100
        fields[self.name] = value

    def render(self, dt: datetime) -> str:
        value = self._getter(dt)
        if self.two_digit_year:
            return f"{value % 100:02d}"
        return f"{value:0{self.count}d}"

    def __repr__(self) -> str:
        return f"Number({self.letter * self.count!r})"


class Fraction(Element):
    """Fraction of second; rendered to ``count`` digits, parsed up to nanos."""

    numeric = True

    def __init__(self, count: int) -> None:
        self.count = count

    def regex(self, group: str, fixed: bool) -> str:
        if fixed:
            return rf"(?P<{group}>\d{{{self.count}}})"
        return rf"(?P<{group}>\d{{1,{max(self.count, MAX_FRACTION_DIGITS)}}})"

    def store(self, fields: FieldValues, text: str) -> None:
        fields["microsecond"] = int(text[:6].ljust(6, "0"))

    def render(self, dt: datetime) -> str:
        return f"{dt.microsecond:06d}".ljust(self.count, "0")[: self.count]

    def __repr__(self) -> str:
        return f"Fraction({'S' * self.count!r})"


def _names_regex(names: tuple[str, ...]) -> str:
    # Full names first so "May" does not cut "March" short
    alternatives = sorted(set(names) | {n[:3] for n in names}, key=len, reverse=True)
    return "(?i:" + "|".join(alternatives) + ")"


class MonthName(Element):
    """``MMM`` short or ``MMMM`` full English month name."""

    def __init__(self, count: int) -> None:
        self.count = count

    def regex(self, group: str, fixed: bool) -> str:
        return f"(?P<{group}>{_names_regex(MONTH_NAMES)})"

    def store(self, fields: FieldValues, text: str) -> None:
        prefix = text[:3].lower()
        for index, name in enumerate(MONTH_NAMES, start=1):
            if name[:3].lower() == prefix:
                fields["month"] = index
                return

    def render(self, dt: datetime) -> str:
        name = MONTH_NAMES[dt.month - 1]
        return name if self.count >= 4 else name[:3]


class WeekdayName(Element):
    """``EEE`` short or ``EEEE`` full English weekday name.

    Parsed names are matched but carry no value; the date comes from the
    other fields.
    """

    def __init__(self, count: int) -> None:
        self.count = count

    def regex(self, group: str, fixed: bool) -> str:
        return f"(?P<{group}>{_names_regex(WEEKDAY_NAMES)})"

    def render(self, dt: datetime) -> str:
        name = WEEKDAY_NAMES[dt.weekday()]
        return name if self.count >= 4 else name[:3]


class Offset(Element):
    """UTC offset. ``Z`` renders ``+HHMM``; ``ZZ`` renders ``+HH:MM`` or ``Z``."""

    def __init__(self, count: int) -> None:
        self.count = count

    def regex(self, group: str, fixed: bool) -> str:
        return rf"(?P<{group}>[Zz]|[+-]\d{{2}}(?::?\d{{2}})?)"

    def store(self, fields: FieldValues, text: str) -> None:
        if text in ("Z", "z"):
            fields["offset"] = 0
            return
        sign = -1 if text[0] == "-" else 1
        digits = text[1:].replace(":", "")
        minutes = int(digits[:2]) * 60 + int(digits[2:] or 0)
        fields["offset"] = sign * minutes

    def render(self, dt: datetime) -> str:
        offset = dt.utcoffset()
        total = int(offset.total_seconds()) // 60 if offset is not None else 0
        if total == 0 and self.count >= 2:
            return "Z"
        sign = "-" if total < 0 else "+"
        hours, minutes = divmod(abs(total), 60)
        if self.count >= 2:
            return f"{sign}{hours:02d}:{minutes:02d}"
        return f"{sign}{hours:02d}{minutes:02d}"
