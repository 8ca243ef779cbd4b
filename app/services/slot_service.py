from datetime import date

WEEKEND_START_HOUR = 7
WEEKEND_END_HOUR = 18  # inclusive
WEEKDAY_START_HOUR = 15
WEEKDAY_END_HOUR = 21  # inclusive


def is_weekend(d: date) -> bool:
    # Monday is 0, Saturday 5, Sunday 6
    return d.weekday() >= 5


def slots_for(d: date) -> list[str]:
    """Offerable HH:MM start times for the given date, in order.

    Weekends run 07:00-18:00, weekdays 15:00-21:00, one slot per hour.
    The date is taken as-is; no time zone conversion happens here.
    """
    if is_weekend(d):
        start, end = WEEKEND_START_HOUR, WEEKEND_END_HOUR
    else:
        start, end = WEEKDAY_START_HOUR, WEEKDAY_END_HOUR
    return [f"{hour:02d}:00" for hour in range(start, end + 1)]


def reconcile_time(d: date, time: str | None) -> str | None:
    """Re-check a selected time after the date changed.

    Returns the time when the new date still offers it, otherwise None so the
    caller has to pick again.
    """
    if time and time in slots_for(d):
        return time
    return None
