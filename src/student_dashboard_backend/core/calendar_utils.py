'''
Date helpers and list operations over academic-calendar events.
Everything here is pure: "today" and the current year are always passed in.
'''
from datetime import date, timedelta
from typing import Iterable, Optional, Union

from ..common.logger import log
from ..models.calendar import AcademicCalendarData, CalendarEvent


def parse_calendar_date(value: Union[str, date, None]) -> Optional[date]:
    """
    Parses a 'YYYY-MM-DD' string. Returns None for anything malformed so that
    callers can treat the event as non-matching instead of failing.
    """
    if value is None:
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except (TypeError, ValueError):
        log.debug(f"Ignoring malformed calendar date: {value!r}")
        return None


def event_start(event: CalendarEvent) -> Optional[date]:
    return parse_calendar_date(event.date)


def event_end(event: CalendarEvent) -> Optional[date]:
    """The last day of the event ('end_date' if present, else 'date')."""
    if event.end_date:
        return parse_calendar_date(event.end_date)
    return parse_calendar_date(event.date)


def event_occurs_on(event: CalendarEvent, target: date) -> bool:
    """True if target lies within [date, end_date or date]. Malformed dates never match."""
    start = event_start(event)
    end = event_end(event)
    if start is None or end is None:
        return False
    return start <= target <= end


def event_key(event: CalendarEvent) -> str:
    """Stable key used to store reminder preferences for an event."""
    return f"{event.date}-{event.description}"


def days_until(value: Union[str, date], today: date) -> Optional[int]:
    target = parse_calendar_date(value)
    if target is None:
        return None
    return (target - today).days


def _sort_key(event: CalendarEvent) -> date:
    return event_start(event) or date.max


def merge_events(*event_lists: Iterable[CalendarEvent]) -> list[CalendarEvent]:
    """Concatenates event lists and sorts them by start date (malformed dates last)."""
    merged = [event for events in event_lists for event in events]
    return sorted(merged, key=_sort_key)


# --- Year adjustment for the preloaded calendar ---

def _shift_year(value: date, year: int) -> date:
    try:
        return value.replace(year=year)
    except ValueError:
        # 29 Feb in a non-leap target year
        return value.replace(year=year, day=28)


def _shift_date_string(value: Optional[str], base_year: int, current_year: int) -> Optional[str]:
    parsed = parse_calendar_date(value)
    if parsed is None:
        return value
    offset = parsed.year - base_year
    return _shift_year(parsed, current_year + offset).isoformat()


def adjust_calendar_dates_to_current_year(
    data: AcademicCalendarData, current_year: int
) -> AcademicCalendarData:
    """
    Moves a calendar authored for some past academic year onto the current
    one. Every date keeps its year offset relative to the semester start, so
    an event that was in the following calendar year stays there.
    """
    base = parse_calendar_date(data.semester_start_date)
    if base is None:
        log.warning("Preloaded calendar has no valid semester start date; leaving dates unchanged.")
        return data
    base_year = base.year

    adjusted_events = []
    for event in data.events:
        update = {"date": _shift_date_string(event.date, base_year, current_year)}
        if event.end_date:
            update["end_date"] = _shift_date_string(event.end_date, base_year, current_year)
        adjusted_events.append(event.model_copy(update=update))

    return data.model_copy(update={
        "semester_start_date": _shift_date_string(data.semester_start_date, base_year, current_year),
        "semester_end_date": _shift_date_string(data.semester_end_date, base_year, current_year),
        "events": adjusted_events,
    })


# --- Widgets ---

def filter_upcoming_events(
    events: Iterable[CalendarEvent], today: date, window_days: int
) -> list[tuple[CalendarEvent, bool]]:
    """
    Events that are ongoing (started before today, not yet ended) or that
    start within the next window_days. Returns (event, is_ongoing) pairs,
    soonest start first.
    """
    horizon = today + timedelta(days=window_days)
    selected = []
    for event in events:
        start, end = event_start(event), event_end(event)
        if start is None or end is None:
            continue
        is_ongoing = start < today <= end
        if is_ongoing or today <= start <= horizon:
            selected.append((event, is_ongoing))
    selected.sort(key=lambda pair: _sort_key(pair[0]))
    return selected


def filter_reminder_events(
    events: Iterable[CalendarEvent], reminder_keys: Iterable[str], today: date, limit: int
) -> list[CalendarEvent]:
    """The soonest events the user asked to be reminded of that have not fully passed."""
    keys = set(reminder_keys)
    matching = []
    for event in events:
        if event_key(event) not in keys:
            continue
        start, end = event_start(event), event_end(event)
        if start is not None and end is not None and end >= today:
            matching.append(event)
    matching.sort(key=_sort_key)
    return matching[:limit]


def prune_reminder_keys(
    reminder_keys: Iterable[str], events: Iterable[CalendarEvent], today: date
) -> list[str]:
    """Drops reminder keys whose event no longer exists or has already ended."""
    end_by_key = {event_key(event): event_end(event) for event in events}
    kept = []
    for key in reminder_keys:
        end = end_by_key.get(key)
        if end is not None and end >= today:
            kept.append(key)
    return kept
