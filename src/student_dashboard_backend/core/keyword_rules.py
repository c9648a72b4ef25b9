'''
Keyword tables used to classify academic-calendar events.

All matching is case-insensitive substring matching against the event
description. Tables are ordered; the first matching row wins wherever a
table is used to pick a single outcome.
'''
from typing import Callable, Iterable

from ..models.calendar import CalendarEvent, CalendarEventType

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

EXAM_TYPES = frozenset({CalendarEventType.MID_SEM_EXAMS, CalendarEventType.END_SEM_EXAMS})
SUSPENDING_TYPES = EXAM_TYPES | {CalendarEventType.HOLIDAY}

# --- Audience markers ---

UG_MARKERS = (
    "b. tech",
    "b.tech",
    "btech",
    "b tech",
    "ug students",
    "undergraduate",
    "1st year ug",
    "2nd year",
    "3rd year",
    "4th year",
    "final year ug",
    "int. m. tech",
    "dual degree",
    "bs-ms",
)

# Markers that, on their own, take a mixed-audience notice out of the
# PG-only bucket.
EXCLUSION_OVERRIDE_MARKERS = UG_MARKERS + ("all students",)

PG_ONLY_MARKERS = (
    "pg students",
    "ph. d",
    "ph.d",
    "phd",
    "m. tech",
    "m.tech",
    "m. sc",
    "m.sc",
    "mba",
    "executive",
    "part-time",
    "research",
    "supervisor",
    "project guide",
    "thesis",
    "dissertation",
)

# --- Scheduling markers ---

SCHEDULE_CHANGE_MARKERS = (
    "timetable",
    "working as per",
    "working as",
    "afternoon working",
    "morning working",
)

TIMETABLE_OVERRIDE_MARKERS = (
    "timetable",
    "schedule change",
    "class schedule",
    "working as per",
    "working as",
    "afternoon working",
    "morning working",
)

# 'Other' events carrying these are timetable notices, never special events.
NOT_SPECIAL_MARKERS = ("timetable", "working as")

# Ordered passes; within a pass, weekdays are scanned Monday to Sunday.
DAY_OVERRIDE_PATTERNS = (
    ("{day} timetable", "{day} schedule"),
    ("working as per {day}", "as per {day}"),
)

HOLIDAY_MARKERS = (
    "semester break",
    "mid semester break",
    "winter break",
    "summer break",
    "vacation",
    "no class",
)

SEMESTER_START_MARKERS = ("semester start", "commencement of")
SEMESTER_END_MARKERS = ("semester end",)

# --- General institution markers ---

GENERAL_INSTITUTION_MARKERS = (
    "all students",
    "semester classes",
    "semester start",
    "semester end",
    "convocation",
    "foundation day",
    "srijan",
    "concetto",
    "parakram",
    "basant",
    "sports meet",
    "orientation",
    "registration",
    "fee payment",
    "pre-registration",
)

# Used when deciding whether an 'Other' event is a festive "special event"
# banner. Semester start/end notices are boundaries, not banners.
SPECIAL_EVENT_MARKERS = tuple(
    marker for marker in GENERAL_INSTITUTION_MARKERS
    if marker not in SEMESTER_START_MARKERS + SEMESTER_END_MARKERS
) + (
    "cultural",
    "fest",
    "techno-management",
    "semester feedback",
    "feedback",
)

# --- Semester season keywords ---

MONSOON_KEYWORDS = ("monsoon",)
WINTER_KEYWORDS = ("winter", "spring")


def contains_any(text: str, markers: Iterable[str]) -> bool:
    """True if any marker occurs in text (case-insensitive)."""
    lowered = (text or "").lower()
    return any(marker in lowered for marker in markers)


def description_has(markers: Iterable[str]) -> Callable[[CalendarEvent], bool]:
    """Builds an event predicate that matches the description against markers."""
    markers = tuple(markers)
    return lambda event: contains_any(event.description, markers)


def type_in(types: Iterable[CalendarEventType]) -> Callable[[CalendarEvent], bool]:
    types = frozenset(types)
    return lambda event: event.type in types


# --- Emoji table for calendar widgets ---

_HOLIDAY_EMOJI = (
    (("diwali", "deepavali"), "🪔"),
    (("holi",), "🎨"),
    (("christmas",), "🎄"),
    (("new year",), "🎊"),
    (("independence", "republic"), "🇮🇳"),
    (("dussehra", "durga"), "🙏"),
    (("eid",), "🌙"),
    (("gandhi",), "🕊️"),
)

_DESCRIPTION_EMOJI = (
    (("exam", "test"), "📝"),
    (("registration", "enroll"), "📋"),
    (("vacation", "break"), "🏖️"),
    (("convocation", "graduation"), "🎓"),
    (("orientation",), "🧭"),
    (("sports", "athletics"), "🏆"),
    (("cultural", "fest"), "🎭"),
    (("technical", "hackathon"), "💻"),
    (("workshop", "seminar"), "📚"),
    (("deadline", "submission"), "⏰"),
    (("meeting",), "👥"),
    (("timetable", "schedule"), "📅"),
)


def event_emoji(event: CalendarEvent) -> str:
    """Picks a display emoji: event type first, then description keywords."""
    if event.type in EXAM_TYPES:
        return "📝"
    if event.type == CalendarEventType.START_OF_SEMESTER:
        return "🎓"
    if event.type == CalendarEventType.HOLIDAY:
        for markers, emoji in _HOLIDAY_EMOJI:
            if contains_any(event.description, markers):
                return emoji
        return "🎉"
    for markers, emoji in _DESCRIPTION_EMOJI:
        if contains_any(event.description, markers):
            return emoji
    return "📌"
