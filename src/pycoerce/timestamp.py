"""Persistence-oriented instant wrapper."""

from __future__ import annotations

from dataclasses import dataclass

from pycoerce._instants import check_millis, utc_datetime


@dataclass(frozen=True)
class Timestamp:
    """An instant as stored by a database driver: epoch milliseconds."""

    millis: int

    def __post_init__(self) -> None:
        check_millis(self.millis)

    def __str__(self) -> str:
        dt = utc_datetime(self.millis)
        return (
            f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
            f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{dt.microsecond // 1000:03d}"
        )
