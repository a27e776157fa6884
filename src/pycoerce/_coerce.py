"""Coercion of instants between representations, dispatched on type.

Each operation is a ``functools.singledispatch`` function, so the
implementation is chosen by the runtime type of the argument and new types
can be added with :func:`extend`. ``None`` is a supported type whose
conversions always return ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, timedelta
from functools import singledispatch
from types import NoneType
from typing import Any, Protocol, runtime_checkable

import pendulum

from pycoerce._constants import DEFAULT_FORMATTER
from pycoerce._errors import (
    ERR_MSG_OUT_OF_RANGE,
    ERR_MSG_UNSUPPORTED_TYPE,
    InstantOutOfRangeError,
    UnsupportedTypeError,
)
from pycoerce._instants import check_millis, from_long, millis_of, utc_datetime
from pycoerce._parser import from_string
from pycoerce.format import Formatter
from pycoerce.format.iso import EXTENDED_PATTERNS
from pycoerce.timestamp import Timestamp

logger = logging.getLogger(__name__)

Conversion = Callable[[Any], Any]

# Private copy; re-registering "date_time" in the registry does not change to_string
_ISO_DATE_TIME = Formatter(DEFAULT_FORMATTER, EXTENDED_PATTERNS[DEFAULT_FORMATTER])


@runtime_checkable
class Coercible(Protocol):
    """Values that know how to convert themselves.

    Objects of an unregistered type that provide all five methods are
    delegated to instead of being rejected.
    """

    def to_long(self) -> int | None: ...

    def to_date(self) -> date | None: ...

    def to_date_time(self) -> pendulum.DateTime | None: ...

    def to_string(self) -> str | None: ...

    def to_timestamp(self) -> Timestamp | None: ...


def _delegate(obj: Any, operation: str) -> Any:
    if isinstance(obj, Coercible):
        return getattr(obj, operation)()
    raise UnsupportedTypeError(
        ERR_MSG_UNSUPPORTED_TYPE,
        f"no {operation} implementation for type {type(obj).__name__}",
    )


@singledispatch
def to_long(obj: Any) -> int | None:
    """Convert ``obj`` to the number of milliseconds after the Unix epoch."""
    return _delegate(obj, "to_long")


@singledispatch
def to_date(obj: Any) -> date | None:
    """Convert ``obj`` to a stdlib datetime in UTC."""
    return _delegate(obj, "to_date")


@singledispatch
def to_date_time(obj: Any) -> pendulum.DateTime | None:
    """Convert ``obj`` to a pendulum DateTime in UTC."""
    return _delegate(obj, "to_date_time")


@singledispatch
def to_string(obj: Any) -> str | None:
    """Return an ISO-8601 representation of ``obj`` in UTC, using the
    ``date_time`` format (``1998-04-25T00:00:00.000Z``)."""
    return _delegate(obj, "to_string")


@singledispatch
def to_timestamp(obj: Any) -> Timestamp | None:
    """Convert ``obj`` to a Timestamp."""
    return _delegate(obj, "to_timestamp")


_OPERATIONS = {
    "to_long": to_long,
    "to_date": to_date,
    "to_date_time": to_date_time,
    "to_string": to_string,
    "to_timestamp": to_timestamp,
}


def _through(operation: Conversion, to_dt: Conversion) -> Conversion:
    return lambda obj: operation(to_dt(obj))


def extend(
    cls: type,
    *,
    to_date_time: Conversion,
    to_long: Conversion | None = None,
    to_date: Conversion | None = None,
    to_string: Conversion | None = None,
    to_timestamp: Conversion | None = None,
) -> None:
    """Register coercions for ``cls``.

    Only ``to_date_time`` is required. Any other operation left out is
    computed by converting to a DateTime first and applying the operation to
    that, so ``to_date_time`` must not itself return a ``cls`` instance.

    Args:
        cls: The type to register.
        to_date_time: Converts an instance to a UTC DateTime (or None).
        to_long: Optional direct conversion to epoch milliseconds.
        to_date: Optional direct conversion to a stdlib datetime.
        to_string: Optional direct conversion to an ISO-8601 string.
        to_timestamp: Optional direct conversion to a Timestamp.
    """
    given = {
        "to_long": to_long,
        "to_date": to_date,
        "to_date_time": to_date_time,
        "to_string": to_string,
        "to_timestamp": to_timestamp,
    }
    for name, dispatcher in _OPERATIONS.items():
        impl = given[name] or _through(dispatcher, to_date_time)
        dispatcher.register(cls, impl)
    logger.debug("registered coercions for %s", cls.__qualname__)


def _absent(_: Any) -> None:
    return None


def _reject(operation: str) -> Conversion:
    def reject(obj: Any) -> Any:
        raise UnsupportedTypeError(
            ERR_MSG_UNSUPPORTED_TYPE,
            f"no {operation} implementation for type {type(obj).__name__}",
        )

    return reject


def _pin_utc(dt: pendulum.DateTime) -> pendulum.DateTime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=pendulum.UTC)
    if dt.utcoffset() == timedelta(0) and dt.timezone_name == "UTC":
        return dt
    try:
        return dt.in_timezone(pendulum.UTC)
    except (OverflowError, ValueError) as e:
        raise InstantOutOfRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"{dt!r} falls outside the supported calendar in UTC",
            wrapped=e,
        ) from e


def _format_date_time(dt: pendulum.DateTime) -> str:
    return _ISO_DATE_TIME.format(_pin_utc(dt))


extend(
    NoneType,
    to_long=_absent,
    to_date=_absent,
    to_date_time=_absent,
    to_string=_absent,
    to_timestamp=_absent,
)

# bool is an int subclass but never an epoch value
extend(
    bool,
    to_long=_reject("to_long"),
    to_date=_reject("to_date"),
    to_date_time=_reject("to_date_time"),
    to_string=_reject("to_string"),
    to_timestamp=_reject("to_timestamp"),
)

extend(
    int,
    to_long=check_millis,
    to_date=utc_datetime,
    to_date_time=from_long,
    to_timestamp=Timestamp,
)

extend(
    pendulum.DateTime,
    to_long=millis_of,
    to_date=lambda dt: utc_datetime(millis_of(dt)),
    to_date_time=_pin_utc,
    to_string=_format_date_time,
    to_timestamp=lambda dt: Timestamp(millis_of(dt)),
)

# datetime.datetime is a date subclass; both carry their own millis
extend(
    date,
    to_long=millis_of,
    to_date=lambda value: value,
    to_date_time=lambda value: from_long(millis_of(value)),
)

extend(
    Timestamp,
    to_long=lambda ts: ts.millis,
    to_date_time=lambda ts: from_long(ts.millis),
    to_timestamp=lambda ts: ts,
)

extend(str, to_date_time=from_string)
