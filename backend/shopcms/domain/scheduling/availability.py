from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List

SLOT_STEP = timedelta(minutes=30)


def day_of_week(value: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return (value.weekday() + 1) % 7


def _parse(hhmm: str) -> datetime:
    return datetime.strptime(hhmm, "%H:%M")


def display_time(hhmm: str) -> str:
    return _parse(hhmm).strftime("%I:%M %p")


def weekly_schedule(slots: Iterable) -> Dict[str, List[Dict[str, str]]]:
    """
    Active slots grouped by day name, in the order given (callers sort by
    day_of_week, start_time).
    """
    schedule: Dict[str, List[Dict[str, str]]] = {}
    for slot in slots:
        schedule.setdefault(slot.day_name, []).append({
            "start": display_time(slot.start_time),
            "end": display_time(slot.end_time),
        })
    return schedule


def time_slots(slots: Iterable) -> List[str]:
    """Bookable 30-minute start times across the given slots."""
    times: List[str] = []
    for slot in slots:
        start = _parse(slot.start_time)
        end = _parse(slot.end_time)
        while start < end:
            times.append(start.strftime("%I:%M %p"))
            start += SLOT_STEP
    return times
