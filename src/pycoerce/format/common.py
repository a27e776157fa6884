"""Non-ISO formatter patterns in common use."""

from __future__ import annotations

COMMON_PATTERNS: dict[str, str] = {
    "rfc822": "EEE, dd MMM yyyy HH:mm:ss Z",
    "mysql": "yyyy-MM-dd HH:mm:ss",
}
