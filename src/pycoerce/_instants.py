"""Construction of instants from epoch milliseconds and back."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

import pendulum

from pycoerce._constants import EPOCH, MAX_EPOCH_MILLIS, MIN_EPOCH_MILLIS
from pycoerce._errors import (
    ERR_MSG_OUT_OF_RANGE,
    ERR_MSG_UNSUPPORTED_TYPE,
    InstantOutOfRangeError,
    UnsupportedTypeError,
)


def check_millis(millis: int) -> int:
    """Validate an epoch value and return it unchanged."""
    if isinstance(millis, bool) or not isinstance(millis, int):
        raise UnsupportedTypeError(
            ERR_MSG_UNSUPPORTED_TYPE,
            f"epoch millis must be int, got {type(millis).__name__}",
        )
    if not MIN_EPOCH_MILLIS <= millis <= MAX_EPOCH_MILLIS:
        raise InstantOutOfRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"{millis} is outside the signed 64-bit range",
        )
    return millis


def utc_datetime(millis: int) -> datetime:
    """Return an aware stdlib datetime in UTC for ``millis``."""
    check_millis(millis)
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise InstantOutOfRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"{millis} ms after the epoch is outside the supported calendar",
            wrapped=e,
        ) from e


def millis_of(value: date) -> int:
    """Milliseconds after the epoch for a date or datetime.

    Naive datetimes and plain dates are read as UTC.
    """
    if isinstance(value, datetime):
        try:
            seconds = calendar.timegm(value.utctimetuple())
        except OverflowError as e:
            raise InstantOutOfRangeError(
                ERR_MSG_OUT_OF_RANGE,
                f"{value!r} falls outside the supported calendar in UTC",
                wrapped=e,
            ) from e
        return seconds * 1000 + value.microsecond // 1000
    return calendar.timegm(value.timetuple()) * 1000


def from_long(millis: int) -> pendulum.DateTime:
    """Returns a DateTime in the UTC time zone for the given number of
    milliseconds after the Unix epoch.

    ``from_long(893462400000)`` is 1998-04-25T00:00:00.000Z.
    """
    return pendulum.instance(utc_datetime(millis), tz=pendulum.UTC)


def from_date(value: date) -> pendulum.DateTime:
    """Returns a DateTime in the UTC time zone for a stdlib date or datetime."""
    if not isinstance(value, date):
        raise UnsupportedTypeError(
            ERR_MSG_UNSUPPORTED_TYPE,
            f"from_date expects a date or datetime, got {type(value).__name__}",
        )
    return from_long(millis_of(value))
