'''
Colour assignment for timetable cards.
'''
from typing import Iterable

from ..models.timetable import TimetableSlot

# Ordered so that neighbouring colours are easy to tell apart
COURSE_COLORS = (
    "purple",
    "emerald",
    "rose",
    "cyan",
    "amber",
    "indigo",
    "orange",
    "sky",
    "fuchsia",
    "lime",
    "red",
    "blue",
    "yellow",
    "violet",
    "green",
    "pink",
)

CUSTOM_TASK_COLOR = "teal"


class CourseColorRegistry:
    """
    Hands out colours to course codes in first-seen order.

    The registry is owned by the caller. Seeding a fresh registry with the
    same timetable always reproduces the same colours.
    """
    def __init__(self, palette: Iterable[str] = COURSE_COLORS):
        self.palette = tuple(palette)
        if not self.palette:
            raise ValueError("palette must contain at least one colour")
        self._assigned: dict[str, int] = {}

    def color_for(self, course_code: str, is_custom_task: bool = False) -> str:
        if is_custom_task:
            return CUSTOM_TASK_COLOR
        if course_code not in self._assigned:
            self._assigned[course_code] = len(self._assigned) % len(self.palette)
        return self.palette[self._assigned[course_code]]

    def seed(self, timetable: Iterable[TimetableSlot]) -> "CourseColorRegistry":
        """Registers every regular course of the timetable in order."""
        for slot in timetable:
            self.color_for(slot.course_code, slot.is_custom_task)
        return self

    def colors_for(self, slots: Iterable[TimetableSlot]) -> dict[str, str]:
        """Colour per slot_id."""
        return {slot.slot_id: self.color_for(slot.course_code, slot.is_custom_task) for slot in slots}
