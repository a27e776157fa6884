"""Range limits and defaults for instant coercion."""

from datetime import datetime, timezone

MIN_EPOCH_MILLIS = -(2**63)
"""Smallest epoch value accepted (signed 64-bit)."""

MAX_EPOCH_MILLIS = 2**63 - 1
"""Largest epoch value accepted (signed 64-bit)."""

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
"""The Unix epoch as an aware stdlib datetime."""

DEFAULT_FORMATTER = "date_time"
"""Formatter used by ``to_string``."""

DEFAULT_PIVOT_YEAR = 2000
"""Two-digit years parse into ``pivot - 50 .. pivot + 49``."""

MAX_FRACTION_DIGITS = 9
"""Longest fraction-of-second accepted when parsing."""

MAX_YEAR_DIGITS = 9
"""Longest year accepted when parsing."""
