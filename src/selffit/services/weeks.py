"""Calendar week boundaries."""

from datetime import date, datetime, time, timedelta


def _as_datetime(anchor: date | datetime) -> datetime:
    if isinstance(anchor, datetime):
        return anchor
    return datetime.combine(anchor, time.min)


def sunday_based_weekday(day: date | datetime) -> int:
    """Weekday numbered from Sunday (0) to Saturday (6)."""
    return (day.weekday() + 1) % 7


def week_bounds(
    anchor: date | datetime, week_start_day: int = 1
) -> tuple[datetime, datetime]:
    """Get the inclusive (start, end) of the week containing ``anchor``.

    Args:
        anchor: Any moment within the week
        week_start_day: First day of the week, 0 (Sunday) to 6 (Saturday)

    Returns:
        Midnight of the first day, and the last microsecond of the
        seventh day
    """
    if week_start_day not in range(7):
        raise ValueError("Week start day must be between 0 (Sunday) and 6")

    anchor_dt = _as_datetime(anchor)
    offset = (sunday_based_weekday(anchor_dt) - week_start_day) % 7
    start = datetime.combine(anchor_dt.date() - timedelta(days=offset), time.min)
    start = start.replace(tzinfo=anchor_dt.tzinfo)
    end = start + timedelta(days=7) - timedelta(microseconds=1)
    return start, end


def in_week(moment: datetime, bounds: tuple[datetime, datetime]) -> bool:
    """Whether ``moment`` lies within inclusive week bounds."""
    start, end = bounds
    return start <= moment <= end
