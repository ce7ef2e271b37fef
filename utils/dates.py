"""Calendar-day helpers for stored exercise dates.

Stored dates are UTC moments. The calendar day of a moment, and the way it
is rendered, is computed at a single fixed UTC offset.
"""

from datetime import date, datetime, time, timedelta, timezone

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def display_zone(offset_hours: int) -> timezone:
    return timezone(timedelta(hours=offset_hours))


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC, as the driver returns them."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def day_of(moment: datetime, offset_hours: int = 0) -> date:
    """Calendar day of ``moment`` with the time of day stripped."""
    return as_utc(moment).astimezone(display_zone(offset_hours)).date()


def start_of_day(day: date, offset_hours: int = 0) -> datetime:
    """Midnight of ``day`` at the display offset, as a UTC moment."""
    midnight = datetime.combine(day, time(), tzinfo=display_zone(offset_hours))
    return midnight.astimezone(timezone.utc)


def render_date(moment: datetime, offset_hours: int = 0) -> str:
    """Render a moment as ``Mon Jan 01 2024``."""
    day = day_of(moment, offset_hours)
    return (
        f"{_DAY_NAMES[day.weekday()]} {_MONTH_NAMES[day.month - 1]} "
        f"{day.day:02d} {day.year:04d}"
    )
