"""Pure formatting functions for display output."""

from datetime import datetime


def format_relative_time(dt: datetime, now: datetime | None = None) -> str:
    """Format datetime relative to now.

    Args:
        dt: Datetime to format.
        now: Reference time (defaults to the current time in dt's timezone).

    Returns:
        Formatted time string (e.g., "in 2h", "3d ago", "just now").
    """
    if now is None:
        now = datetime.now(dt.tzinfo)

    time_diff = dt - now
    future = time_diff.total_seconds() >= 0
    seconds = abs(int(time_diff.total_seconds()))

    if seconds < 60:
        return "just now"
    elif seconds < 3600:
        amount = f"{seconds // 60}m"
    elif seconds < 86400:
        amount = f"{seconds // 3600}h"
    elif seconds < 7 * 86400:
        amount = f"{seconds // 86400}d"
    elif seconds < 30 * 86400:
        amount = f"{seconds // (7 * 86400)}w"
    elif seconds < 365 * 86400:
        amount = f"{seconds // (30 * 86400)}mo"
    else:
        amount = f"{seconds // (365 * 86400)}y"

    return f"in {amount}" if future else f"{amount} ago"


def format_datetime(dt: datetime | None, include_relative: bool = True) -> str:
    """Format datetime with optional relative time.

    Returns:
        Formatted datetime string, or "N/A" if dt is None.
    """
    if dt is None:
        return "N/A"

    date_str = dt.strftime("%Y-%m-%d %H:%M")
    if include_relative:
        return f"{date_str} ({format_relative_time(dt)})"
    return date_str


def format_identifier(identifier: str | None) -> str:
    """Shorten an event identifier to its event part's first group."""
    if not identifier:
        return "-"
    return identifier.rsplit(":", 1)[-1].split("-", 1)[0]
