'''
Decides whether a calendar event applies to undergraduate students.

Relevance is an ordered table of (predicate, reason) rows; the first row
whose predicate matches decides the outcome. An explicit undergraduate
mention is checked first so it always beats the PG/PhD-only exclusion.
'''
from enum import Enum
from typing import Callable

from ..models.calendar import CalendarEvent, CalendarEventType
from .keyword_rules import (
    EXCLUSION_OVERRIDE_MARKERS,
    GENERAL_INSTITUTION_MARKERS,
    NOT_SPECIAL_MARKERS,
    PG_ONLY_MARKERS,
    SCHEDULE_CHANGE_MARKERS,
    SPECIAL_EVENT_MARKERS,
    SUSPENDING_TYPES,
    UG_MARKERS,
    contains_any,
    description_has,
    type_in,
)


class RelevanceReason(str, Enum):
    UG_AUDIENCE = "ug_audience"
    PG_ONLY = "pg_only"
    SUSPENDING_TYPE = "suspending_type"
    SCHEDULE_CHANGE = "schedule_change"
    GENERAL_INSTITUTION = "general_institution"
    DEFAULT = "default"

    @property
    def included(self) -> bool:
        return self is not RelevanceReason.PG_ONLY


RELEVANCE_RULES: tuple[tuple[Callable[[CalendarEvent], bool], RelevanceReason], ...] = (
    (description_has(UG_MARKERS), RelevanceReason.UG_AUDIENCE),
    (description_has(PG_ONLY_MARKERS), RelevanceReason.PG_ONLY),
    (type_in(SUSPENDING_TYPES), RelevanceReason.SUSPENDING_TYPE),
    (description_has(SCHEDULE_CHANGE_MARKERS), RelevanceReason.SCHEDULE_CHANGE),
    (description_has(GENERAL_INSTITUTION_MARKERS), RelevanceReason.GENERAL_INSTITUTION),
)


def classify_relevance(event: CalendarEvent) -> RelevanceReason:
    """Returns the reason of the first matching rule, DEFAULT if none match."""
    for predicate, reason in RELEVANCE_RULES:
        if predicate(event):
            return reason
    return RelevanceReason.DEFAULT


def is_relevant(event: CalendarEvent) -> bool:
    return classify_relevance(event).included


def is_pg_only(description: str) -> bool:
    """PG/PhD/executive-only notice that does not also address UG students."""
    return contains_any(description, PG_ONLY_MARKERS) and not contains_any(
        description, EXCLUSION_OVERRIDE_MARKERS
    )


def _is_plain_notice(event: CalendarEvent) -> bool:
    # 'Other' events that are neither timetable notices nor PG/PhD-only
    return (
        event.type == CalendarEventType.OTHER
        and not contains_any(event.description, NOT_SPECIAL_MARKERS)
        and not is_pg_only(event.description)
    )


def is_special_event(event: CalendarEvent) -> bool:
    """
    A festive / institution-wide notice shown as a banner on top of
    whatever the day's schedule is (including holidays and exam days).
    """
    if not _is_plain_notice(event):
        return False
    return contains_any(event.description, UG_MARKERS) or contains_any(
        event.description, SPECIAL_EVENT_MARKERS
    )


def is_other_academic_event(event: CalendarEvent) -> bool:
    """Any remaining plain notice that did not qualify as a special event."""
    return _is_plain_notice(event) and not is_special_event(event)
