"""Coercion tests - one class per source type, plus cross-type checks."""

from datetime import date, datetime, timedelta, timezone

import pendulum
import pytest

from pycoerce import (
    InstantOutOfRangeError,
    Timestamp,
    UnsupportedTypeError,
    from_date,
    from_long,
    to_date,
    to_date_time,
    to_long,
    to_string,
    to_timestamp,
)
from pycoerce.format import register_formatter

MILLIS = 893462400000
ISO = "1998-04-25T00:00:00.000Z"
UTC_DATE = datetime(1998, 4, 25, tzinfo=timezone.utc)

ALL_OPERATIONS = [
    pytest.param(to_long, id="to_long"),
    pytest.param(to_date, id="to_date"),
    pytest.param(to_date_time, id="to_date_time"),
    pytest.param(to_string, id="to_string"),
    pytest.param(to_timestamp, id="to_timestamp"),
]

SAME_INSTANT = [
    pytest.param(MILLIS, id="int"),
    pytest.param(Timestamp(MILLIS), id="timestamp"),
    pytest.param(UTC_DATE, id="aware-datetime"),
    pytest.param(datetime(1998, 4, 25), id="naive-datetime"),
    pytest.param(date(1998, 4, 25), id="date"),
    pytest.param(pendulum.datetime(1998, 4, 25, tz="UTC"), id="pendulum"),
    pytest.param(pendulum.datetime(1998, 4, 25, 2, tz="Europe/Paris"), id="pendulum-paris"),
    pytest.param(ISO, id="iso-string"),
    pytest.param("1998-04-25", id="date-string"),
]


class TestAbsent:
    @pytest.mark.parametrize("op", ALL_OPERATIONS)
    def test_none_propagates(self, op):
        assert op(None) is None


class TestEpochValue:
    def test_to_long_is_identity(self):
        assert to_long(MILLIS) == MILLIS

    def test_to_date_time(self, instant):
        result = to_date_time(MILLIS)
        assert result == instant
        assert isinstance(result, pendulum.DateTime)
        assert result.timezone_name == "UTC"

    def test_to_date(self):
        result = to_date(MILLIS)
        assert result == UTC_DATE
        assert type(result) is datetime

    def test_to_timestamp(self):
        assert to_timestamp(MILLIS) == Timestamp(MILLIS)

    def test_to_string(self):
        assert to_string(MILLIS) == ISO

    def test_negative(self):
        assert to_string(-1) == "1969-12-31T23:59:59.999Z"
        assert to_long(to_date_time(-1)) == -1

    def test_millisecond_precision(self):
        assert to_string(MILLIS + 123) == "1998-04-25T00:00:00.123Z"

    def test_outside_int64(self):
        with pytest.raises(InstantOutOfRangeError):
            to_long(2**63)

    def test_outside_calendar(self):
        with pytest.raises(InstantOutOfRangeError):
            to_date_time(2**62)

    def test_past_year_9999(self):
        with pytest.raises(InstantOutOfRangeError):
            to_date(10**15)

    @pytest.mark.parametrize("op", ALL_OPERATIONS)
    def test_bool_rejected(self, op):
        with pytest.raises(UnsupportedTypeError):
            op(True)


class TestCanonicalDateTime:
    def test_to_long(self, instant):
        assert to_long(instant) == MILLIS

    def test_to_date_time_is_identity(self, instant):
        assert to_date_time(instant) is instant

    def test_to_date_time_pins_utc(self):
        paris = pendulum.datetime(1998, 4, 25, 2, tz="Europe/Paris")
        result = to_date_time(paris)
        assert result.timezone_name == "UTC"
        assert result.hour == 0

    def test_to_date(self, instant):
        result = to_date(instant)
        assert result == UTC_DATE
        assert not isinstance(result, pendulum.DateTime)

    def test_to_timestamp(self, instant):
        assert to_timestamp(instant) == Timestamp(MILLIS)

    def test_to_string(self, precise_instant):
        assert to_string(precise_instant) == "1998-04-25T13:45:30.123Z"

    @pytest.mark.parametrize("op", [to_long, to_date_time, to_string, to_timestamp])
    def test_year_one_east_of_utc_out_of_range(self, op):
        value = pendulum.datetime(1, 1, 1, tz=pendulum.fixed_timezone(3600))
        with pytest.raises(InstantOutOfRangeError):
            op(value)

    def test_to_string_ignores_registry_override(self, restore_formatters, instant):
        register_formatter("date_time", "dd/MM/yyyy")
        assert to_string(instant) == ISO
        assert to_string(MILLIS) == ISO


class TestCalendarDate:
    def test_to_date_is_identity(self):
        value = datetime(1998, 4, 25, 13, 45)
        assert to_date(value) is value

    def test_plain_date_identity(self):
        value = date(1998, 4, 25)
        assert to_date(value) is value

    def test_naive_read_as_utc(self):
        assert to_long(datetime(1998, 4, 25)) == MILLIS

    def test_aware_offset(self):
        tokyo = timezone(timedelta(hours=9))
        assert to_long(datetime(1998, 4, 25, 9, tzinfo=tokyo)) == MILLIS

    def test_to_date_time(self, instant):
        assert to_date_time(UTC_DATE) == instant

    def test_sub_millisecond_truncated(self):
        value = datetime(1998, 4, 25, 0, 0, 0, 999, tzinfo=timezone.utc)
        assert to_long(value) == MILLIS
        assert to_date_time(value).microsecond == 0

    def test_to_string(self):
        assert to_string(date(1998, 4, 25)) == ISO

    def test_from_date(self, instant):
        assert from_date(UTC_DATE) == instant

    def test_from_date_rejects_other_types(self):
        with pytest.raises(UnsupportedTypeError):
            from_date(MILLIS)

    @pytest.mark.parametrize("op", [to_long, to_date_time, to_string, to_timestamp])
    def test_year_one_east_of_utc_out_of_range(self, op):
        value = datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=1)))
        with pytest.raises(InstantOutOfRangeError) as excinfo:
            op(value)
        assert isinstance(excinfo.value.wrapped, OverflowError)

    def test_year_9999_west_of_utc_out_of_range(self):
        value = datetime(9999, 12, 31, 23, tzinfo=timezone(timedelta(hours=-2)))
        with pytest.raises(InstantOutOfRangeError):
            to_long(value)


class TestTimestamp:
    def test_to_timestamp_is_identity(self):
        ts = Timestamp(MILLIS)
        assert to_timestamp(ts) is ts

    def test_to_long(self):
        assert to_long(Timestamp(MILLIS)) == MILLIS

    def test_to_date_time(self, instant):
        assert to_date_time(Timestamp(MILLIS)) == instant

    def test_to_date(self):
        assert to_date(Timestamp(MILLIS)) == UTC_DATE

    def test_str(self):
        assert str(Timestamp(MILLIS + 7)) == "1998-04-25 00:00:00.007"

    def test_rejects_non_int(self):
        with pytest.raises(UnsupportedTypeError):
            Timestamp(1.5)

    def test_rejects_out_of_range(self):
        with pytest.raises(InstantOutOfRangeError):
            Timestamp(-(2**63) - 1)


class TestText:
    def test_to_date_time(self, instant):
        assert to_date_time(ISO) == instant

    def test_to_long(self):
        assert to_long(ISO) == MILLIS

    def test_to_string_normalises(self):
        assert to_string("1998-04-25T02:00:00+02:00") == ISO

    def test_to_timestamp(self):
        assert to_timestamp("1998-04-25") == Timestamp(MILLIS)

    @pytest.mark.parametrize("op", ALL_OPERATIONS)
    def test_unparseable_is_absent(self, op):
        assert op("not-a-date") is None


class TestUnsupportedTypes:
    @pytest.mark.parametrize("value", [1.5, object(), [MILLIS], b"1998"])
    @pytest.mark.parametrize("op", ALL_OPERATIONS)
    def test_raises(self, op, value):
        with pytest.raises(UnsupportedTypeError):
            op(value)

    def test_internal_message_names_type(self):
        with pytest.raises(UnsupportedTypeError) as excinfo:
            to_long(1.5)
        assert str(excinfo.value) == "unsupported type"
        assert "float" in excinfo.value.internal()


class TestCrossType:
    @pytest.mark.parametrize("value", SAME_INSTANT)
    def test_to_long(self, value):
        assert to_long(value) == MILLIS

    @pytest.mark.parametrize("value", SAME_INSTANT)
    def test_to_string(self, value):
        assert to_string(value) == ISO

    @pytest.mark.parametrize("value", SAME_INSTANT)
    def test_to_timestamp(self, value):
        assert to_timestamp(value) == Timestamp(MILLIS)


class TestRoundTrip:
    @pytest.mark.parametrize("millis", [0, MILLIS, MILLIS + 999, -86_400_001, 253402300799999])
    def test_long_through_date_time(self, millis):
        dt = from_long(millis)
        assert to_date_time(from_long(to_long(dt))) == dt

    def test_string_through_date_time(self, precise_instant):
        assert to_date_time(to_string(precise_instant)) == precise_instant
