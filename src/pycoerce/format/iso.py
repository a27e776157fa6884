"""ISO-8601 formatter patterns (the Joda ``ISODateTimeFormat`` set)."""

from __future__ import annotations

# Extended layouts
EXTENDED_PATTERNS: dict[str, str] = {
    "date_time": "yyyy-MM-dd'T'HH:mm:ss.SSSZZ",
    "date_time_no_ms": "yyyy-MM-dd'T'HH:mm:ssZZ",
    "date_hour_minute_second_ms": "yyyy-MM-dd'T'HH:mm:ss.SSS",
    "date_hour_minute_second_fraction": "yyyy-MM-dd'T'HH:mm:ss.SSS",
    "date_hour_minute_second": "yyyy-MM-dd'T'HH:mm:ss",
    "date_hour_minute": "yyyy-MM-dd'T'HH:mm",
    "date_hour": "yyyy-MM-dd'T'HH",
    "date": "yyyy-MM-dd",
    "year_month_day": "yyyy-MM-dd",
    "year_month": "yyyy-MM",
    "year": "yyyy",
    "ordinal_date_time": "yyyy-DDD'T'HH:mm:ss.SSSZZ",
    "ordinal_date_time_no_ms": "yyyy-DDD'T'HH:mm:ssZZ",
    "ordinal_date": "yyyy-DDD",
    "week_date_time": "xxxx-'W'ww-e'T'HH:mm:ss.SSSZZ",
    "week_date_time_no_ms": "xxxx-'W'ww-e'T'HH:mm:ssZZ",
    "week_date": "xxxx-'W'ww-e",
    "weekyear_week_day": "xxxx-'W'ww-e",
    "weekyear_week": "xxxx-'W'ww",
    "weekyear": "xxxx",
}

# Compact layouts without separators
BASIC_PATTERNS: dict[str, str] = {
    "basic_date_time": "yyyyMMdd'T'HHmmss.SSSZ",
    "basic_date_time_no_ms": "yyyyMMdd'T'HHmmssZ",
    "basic_date": "yyyyMMdd",
    "basic_ordinal_date_time": "yyyyDDD'T'HHmmss.SSSZ",
    "basic_ordinal_date_time_no_ms": "yyyyDDD'T'HHmmssZ",
    "basic_ordinal_date": "yyyyDDD",
    "basic_week_date_time": "xxxx'W'wwe'T'HHmmss.SSSZ",
    "basic_week_date_time_no_ms": "xxxx'W'wwe'T'HHmmssZ",
    "basic_week_date": "xxxx'W'wwe",
}

# Time-only layouts; the date part defaults to 1970-01-01
TIME_PATTERNS: dict[str, str] = {
    "time": "HH:mm:ss.SSSZZ",
    "time_no_ms": "HH:mm:ssZZ",
    "t_time": "'T'HH:mm:ss.SSSZZ",
    "t_time_no_ms": "'T'HH:mm:ssZZ",
    "hour_minute_second_ms": "HH:mm:ss.SSS",
    "hour_minute_second_fraction": "HH:mm:ss.SSS",
    "hour_minute_second": "HH:mm:ss",
    "hour_minute": "HH:mm",
    "hour": "HH",
    "basic_time": "HHmmss.SSSZ",
    "basic_time_no_ms": "HHmmssZ",
    "basic_t_time": "'T'HHmmss.SSSZ",
    "basic_t_time_no_ms": "'T'HHmmssZ",
}
