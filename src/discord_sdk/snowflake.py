"""Snowflake ID helpers.

Discord IDs are 64-bit integers: a millisecond timestamp relative to the
Discord epoch in the top 42 bits, then internal worker and process IDs and a
per-process increment.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import NamedTuple

DISCORD_EPOCH = 1420070400000  # 2015-01-01T00:00:00Z, in ms

_EPOCH_DT = datetime(2015, 1, 1, tzinfo=timezone.utc)
_TIMESTAMP_SHIFT = 22
_ONE_MS = timedelta(milliseconds=1)


class SnowflakeParts(NamedTuple):
    timestamp: int  # unix ms
    worker_id: int
    process_id: int
    increment: int


def parse_snowflake(snowflake: int | str) -> SnowflakeParts:
    """Split an ID into its components. Accepts the API's string form too."""
    value = int(snowflake)
    if value < 0:
        raise ValueError(f"Snowflake must be non-negative, got {value}")
    return SnowflakeParts(
        timestamp=(value >> _TIMESTAMP_SHIFT) + DISCORD_EPOCH,
        worker_id=(value & 0x3E0000) >> 17,
        process_id=(value & 0x1F000) >> 12,
        increment=value & 0xFFF,
    )


def snowflake_time(snowflake: int | str) -> datetime:
    """Creation time of an ID as an aware UTC datetime."""
    ms = parse_snowflake(snowflake).timestamp - DISCORD_EPOCH
    return _EPOCH_DT + ms * _ONE_MS


def time_snowflake(dt: datetime, *, high: bool = False) -> int:
    """Smallest (or with ``high``, largest) ID created at ``dt``.

    Useful as a ``before``/``after`` bound when listing messages. Naive
    datetimes are taken as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    ms = (dt - _EPOCH_DT) // _ONE_MS
    if ms < 0:
        raise ValueError(f"{dt.isoformat()} is before the Discord epoch")
    return (ms << _TIMESTAMP_SHIFT) + ((1 << _TIMESTAMP_SHIFT) - 1 if high else 0)
