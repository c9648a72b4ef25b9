'''
Daily schedule resolution.

Given the academic calendar, the generic weekly timetable and a target date,
decides which slots apply that day, whether classes are suspended and which
banner to show. Branches are tried in a fixed order and the first one that
matches produces the descriptor:

    exam > holiday > semester boundary > timetable override > other notices > default

Special (festive / institution-wide) notices never decide a branch; their
banner is merged in front of whatever message the chosen branch produces.
'''
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.logger import log
from ..models.calendar import CalendarEvent, CalendarEventType
from ..models.schedule import ScheduleBranch, ScheduleDescriptor
from ..models.timetable import TimetableSlot
from .calendar_utils import event_occurs_on
from .keyword_rules import (
    DAY_OVERRIDE_PATTERNS,
    EXAM_TYPES,
    HOLIDAY_MARKERS,
    SEMESTER_END_MARKERS,
    SEMESTER_START_MARKERS,
    TIMETABLE_OVERRIDE_MARKERS,
    WEEKDAYS,
    contains_any,
)
from .relevance import is_other_academic_event, is_relevant, is_special_event

EXAM_TITLE = "Exam Period"
HOLIDAY_TITLE = "It's a Holiday!"
SEMESTER_EVENT_TITLE = "Semester Event"


def weekday_name(value: date) -> str:
    return WEEKDAYS[value.weekday()]


def _day_title(is_today: bool, label: Optional[str] = None) -> str:
    if label is None:
        return "Today's Schedule" if is_today else "Schedule"
    return f"Today - {label}" if is_today else label


# --- Event selection ---

def select_events_for_date(events: Iterable[CalendarEvent], target: date) -> list[CalendarEvent]:
    """Events covering the target date that are relevant to UG students, in input order."""
    return [event for event in events if event_occurs_on(event, target) and is_relevant(event)]


def build_special_event_message(special_events: Sequence[CalendarEvent]) -> Optional[str]:
    if not special_events:
        return None
    if len(special_events) == 1:
        return f"🎉 Special Event: {special_events[0].description}"
    lines = "\n".join(f"• {event.description}" for event in special_events)
    return f"🎉 Special Events:\n{lines}"


def merge_info_messages(special_message: Optional[str], branch_message: Optional[str]) -> Optional[str]:
    """
    Combines the special-event banner with a branch's own message.
    The special-event banner always comes first.
    """
    parts = [message for message in (special_message, branch_message) if message]
    return "\n".join(parts) if parts else None


# --- Timetable slot selection ---

def _slots_for_day(timetable: Sequence[TimetableSlot], day: str) -> list[TimetableSlot]:
    wanted = day.lower()
    return [slot for slot in timetable if (slot.day or "").strip().lower() == wanted]


def _sorted(slots: Iterable[TimetableSlot]) -> tuple[TimetableSlot, ...]:
    return tuple(sorted(slots, key=lambda slot: slot.start_time))


def personal_tasks(timetable: Sequence[TimetableSlot], day: str) -> tuple[TimetableSlot, ...]:
    """Custom tasks of the day; the only entries that survive a suspension."""
    return _sorted(slot for slot in _slots_for_day(timetable, day) if slot.is_custom_task)


def class_slots(timetable: Sequence[TimetableSlot], day: str) -> tuple[TimetableSlot, ...]:
    """
    Slots shown on a normal teaching day. When the timetable mixes regular
    classes and custom tasks only the regular classes are shown; a timetable
    made of a single kind is shown as is.
    """
    day_slots = _slots_for_day(timetable, day)
    has_custom = any(slot.is_custom_task for slot in timetable)
    has_regular = any(not slot.is_custom_task for slot in timetable)
    if has_custom and has_regular:
        day_slots = [slot for slot in day_slots if not slot.is_custom_task]
    return _sorted(day_slots)


# --- Timetable overrides ---

def resolve_effective_day(description: str, actual_day: str) -> tuple[str, str]:
    """
    Works out whose timetable a timetable-change notice asks us to follow.
    Returns (effective_day, info_message). Notices that don't name a weekday
    keep the actual day and echo the notice itself.
    """
    lowered = description.lower()
    for patterns in DAY_OVERRIDE_PATTERNS:
        for day in WEEKDAYS:
            if any(pattern.format(day=day.lower()) in lowered for pattern in patterns):
                return day, f"📅 This day follows {day}'s schedule as per the academic calendar."
    return actual_day, f"📅 {description}"


# --- Branch predicates ---

def _is_holiday_event(event: CalendarEvent) -> bool:
    return event.type == CalendarEventType.HOLIDAY or contains_any(event.description, HOLIDAY_MARKERS)


def _is_semester_start(event: CalendarEvent) -> bool:
    return event.type == CalendarEventType.START_OF_SEMESTER or contains_any(
        event.description, SEMESTER_START_MARKERS
    )


def _is_semester_boundary(event: CalendarEvent) -> bool:
    return _is_semester_start(event) or contains_any(event.description, SEMESTER_END_MARKERS)


def _first(events: Iterable[CalendarEvent], predicate) -> Optional[CalendarEvent]:
    return next((event for event in events if predicate(event)), None)


# --- Resolver ---

def resolve_daily_schedule(
    events: Optional[Iterable[CalendarEvent]],
    timetable: Optional[Iterable[TimetableSlot]],
    target_date: date,
    today: Optional[date] = None,
) -> ScheduleDescriptor:
    """
    Resolves the schedule for target_date. Total: every input maps to exactly
    one descriptor and nothing is raised. Missing calendar data gives the
    default descriptor with no classes.
    """
    is_today = today is not None and target_date == today
    weekday = weekday_name(target_date)

    if events is None:
        log.debug(f"No calendar data for {target_date}; returning the empty default schedule.")
        return ScheduleDescriptor(title=_day_title(is_today), branch=ScheduleBranch.DEFAULT, effective_day=weekday)

    slots = list(timetable or [])
    todays_events = select_events_for_date(events, target_date)

    special_events = [event for event in todays_events if is_special_event(event)]
    special_message = build_special_event_message(special_events)

    exam_event = _first(todays_events, lambda event: event.type in EXAM_TYPES)
    if exam_event:
        return ScheduleDescriptor(
            title=EXAM_TITLE,
            classes=personal_tasks(slots, weekday),
            is_holiday=True,
            is_exam=True,
            holiday_description=exam_event.description,
            info_message=special_message,
            branch=ScheduleBranch.EXAM,
            effective_day=weekday,
        )

    holiday_event = _first(todays_events, _is_holiday_event)
    if holiday_event:
        return ScheduleDescriptor(
            title=HOLIDAY_TITLE,
            classes=personal_tasks(slots, weekday),
            is_holiday=True,
            holiday_description=holiday_event.description,
            info_message=special_message,
            branch=ScheduleBranch.HOLIDAY,
            effective_day=weekday,
        )

    semester_event = _first(todays_events, _is_semester_boundary)
    if semester_event:
        if _is_semester_start(semester_event):
            # Classes begin; nothing is suspended
            return ScheduleDescriptor(
                title=_day_title(is_today),
                classes=class_slots(slots, weekday),
                info_message=merge_info_messages(special_message, f"📚 {semester_event.description}"),
                branch=ScheduleBranch.SEMESTER_BOUNDARY,
                effective_day=weekday,
            )
        return ScheduleDescriptor(
            title=SEMESTER_EVENT_TITLE,
            classes=personal_tasks(slots, weekday),
            is_holiday=True,
            holiday_description=f"{semester_event.description} - Check with your department for schedule changes.",
            info_message=special_message,
            branch=ScheduleBranch.SEMESTER_BOUNDARY,
            effective_day=weekday,
        )

    timetable_event = _first(
        todays_events, lambda event: contains_any(event.description, TIMETABLE_OVERRIDE_MARKERS)
    )
    if timetable_event:
        effective_day, override_message = resolve_effective_day(timetable_event.description, weekday)
        log.debug(f"{target_date} ({weekday}) follows the {effective_day} timetable.")
        return ScheduleDescriptor(
            title=_day_title(is_today),
            classes=class_slots(slots, effective_day),
            info_message=merge_info_messages(special_message, override_message),
            branch=ScheduleBranch.TIMETABLE_OVERRIDE,
            effective_day=effective_day,
        )

    other_events = [event for event in todays_events if is_other_academic_event(event)]
    if other_events:
        descriptions = ", ".join(event.description for event in other_events)
        return ScheduleDescriptor(
            title=_day_title(is_today, "Special Day" if special_events else "Academic Day"),
            classes=class_slots(slots, weekday),
            info_message=merge_info_messages(special_message, f"📋 Academic Event: {descriptions}"),
            branch=ScheduleBranch.OTHER,
            effective_day=weekday,
        )

    return ScheduleDescriptor(
        title=_day_title(is_today, "Special Day" if special_events else None),
        classes=class_slots(slots, weekday),
        info_message=special_message,
        branch=ScheduleBranch.DEFAULT,
        effective_day=weekday,
    )
