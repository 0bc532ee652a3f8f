"""Timestamps — ISO-8601 rendering shared by success and error responses."""

from datetime import datetime, timezone


def format_iso_timestamp(moment: datetime) -> str:
    """UTC, millisecond precision, Z suffix: 2026-10-19T08:30:00.123Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return format_iso_timestamp(datetime.now(timezone.utc))
