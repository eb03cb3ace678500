"""Relative age formatting."""

from datetime import datetime, timezone

_UNITS = (
    ("year", 365),
    ("week", 7),
    ("day", 1),
)


def elapsed_days(created_at: datetime, now: datetime | None = None) -> int:
    """Whole days elapsed since ``created_at``, rounded down, never negative."""
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    return max((now - created_at).days, 0)


def humanize_days(days: int) -> str:
    """
    Render a day count as years, weeks and days.

    >>> humanize_days(17)
    '2 weeks 3 days'
    >>> humanize_days(0)
    'today'
    """
    if days <= 0:
        return "today"

    parts = []
    remaining = days
    for unit, size in _UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count} {unit}" if count == 1 else f"{count} {unit}s")
    return " ".join(parts)


def format_age(created_at: datetime, now: datetime | None = None) -> str:
    """Human-friendly age of something created at ``created_at``."""
    return humanize_days(elapsed_days(created_at, now))
