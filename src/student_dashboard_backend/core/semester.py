'''
Semester boundary detection.

Semesters are never stored: they are re-derived from the calendar by pairing
every "Start of Semester" event with the earliest "End-Semester Exams" event
that ends strictly after it.
'''
from datetime import date, timedelta
from typing import Iterable, Optional

from ..common.logger import log
from ..models.calendar import CalendarEvent, CalendarEventType
from ..models.schedule import SemesterInterval, SemesterProgress
from .calendar_utils import event_end, event_start
from .keyword_rules import MONSOON_KEYWORDS, WINTER_KEYWORDS, contains_any
from .progress import calculate_progress, get_week_number

MONSOON = "Monsoon"
WINTER = "Winter"


def classify_semester(description: str, start: date) -> str:
    """
    Season of a semester: an explicit keyword in the start event wins,
    otherwise July-December is Monsoon and January-June is Winter.
    """
    if contains_any(description, MONSOON_KEYWORDS):
        return MONSOON
    if contains_any(description, WINTER_KEYWORDS):
        return WINTER
    return MONSOON if start.month >= 7 else WINTER


def academic_year_label(season: str, start: date) -> str:
    """
    'YYYY-YY'. A Winter semester that starts in January-June belongs to the
    academic year that began the previous calendar year.
    """
    first_year = start.year
    if season == WINTER and start.month <= 6:
        first_year -= 1
    return f"{first_year}-{(first_year + 1) % 100:02d}"


def _sorted_boundaries(events: Iterable[CalendarEvent]):
    starts, ends = [], []
    for event in events:
        if event.type == CalendarEventType.START_OF_SEMESTER:
            start = event_start(event)
            if start is not None:
                starts.append((start, event))
        elif event.type == CalendarEventType.END_SEM_EXAMS:
            end = event_end(event)
            if end is not None:
                ends.append(end)
    starts.sort(key=lambda pair: pair[0])
    ends.sort()
    return starts, ends


def detect_semesters(events: Optional[Iterable[CalendarEvent]], today: date) -> list[SemesterInterval]:
    """All complete semesters in the calendar, ordered by start date."""
    if not events:
        return []
    starts, ends = _sorted_boundaries(events)

    semesters = []
    for start, start_event in starts:
        end = next((candidate for candidate in ends if candidate > start), None)
        if end is None:
            log.debug(f"Dropping semester start {start} without a later end-semester event.")
            continue
        season = classify_semester(start_event.description, start)
        semesters.append(SemesterInterval(
            name=f"{season} Semester {academic_year_label(season, start)}",
            start_date=start,
            end_date=end,
            is_active=start <= today <= end,
        ))
    return semesters


def get_semester_info(events: Optional[Iterable[CalendarEvent]], today: date) -> Optional[SemesterInterval]:
    """
    The semester the dashboard should describe: the active one, else the
    next to start, else the most recent one. None if there are no semesters.
    """
    semesters = detect_semesters(events, today)
    if not semesters:
        return None

    active = next((s for s in semesters if s.is_active), None)
    if active:
        return active

    upcoming = next((s for s in semesters if s.start_date > today), None)
    if upcoming:
        return upcoming

    return semesters[-1]


def find_calendar_semester_window(
    events: Iterable[CalendarEvent], today: date, lookahead_days: int
) -> Optional[tuple[date, date]]:
    """
    The window the calendar page points at: the semester in progress, or one
    starting within lookahead_days. Unlike get_semester_info it does not fall
    back to distant or past semesters.
    """
    semesters = detect_semesters(list(events), today)
    for semester in semesters:
        if semester.is_active:
            return semester.start_date, semester.end_date

    horizon = today + timedelta(days=lookahead_days)
    for semester in semesters:
        if today < semester.start_date <= horizon:
            return semester.start_date, semester.end_date
    return None


def academic_year_bounds(events: Iterable[CalendarEvent]) -> tuple[Optional[date], Optional[date]]:
    """First semester start and last end-semester date found in the calendar."""
    starts, ends = _sorted_boundaries(events)
    first_start = starts[0][0] if starts else None
    last_end = ends[-1] if ends else None
    return first_start, last_end


def resolve_semester_progress(
    events: Optional[Iterable[CalendarEvent]],
    today: date,
    default_window: tuple[tuple[int, int], tuple[int, int]],
    configured_name: Optional[str] = None,
    configured_start: Optional[date] = None,
    configured_end: Optional[date] = None,
) -> SemesterProgress:
    """
    Semester progress for 'today' using the fallback chain
    detected semester -> configured window -> default window for this year.

    default_window is ((start_month, start_day), (end_month, end_day)).
    An admin-configured name always replaces the derived one.
    """
    (start_month, start_day), (end_month, end_day) = default_window
    default_start = date(today.year, start_month, start_day)
    default_end = date(today.year, end_month, end_day)

    detected = get_semester_info(events, today)
    name = None
    if detected:
        start, end, name = detected.start_date, detected.end_date, detected.name
    elif configured_start and configured_end:
        start, end = configured_start, configured_end
    else:
        start, end = default_start, default_end

    if configured_name:
        name = configured_name

    if start > end:
        log.warning(f"Semester window {start} - {end} is inverted; using the default window.")
        return SemesterProgress(
            semester_name=None,
            start_date=default_start,
            end_date=default_end,
            progress=0.0,
            week_number=1,
            is_detected=False,
        )

    return SemesterProgress(
        semester_name=name,
        start_date=start,
        end_date=end,
        progress=calculate_progress(start, end, today),
        week_number=get_week_number(start, today),
        is_detected=detected is not None,
    )
