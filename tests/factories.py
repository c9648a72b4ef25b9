import factory
from factory.faker import Faker

from src.student_dashboard_backend.models.calendar import CalendarEvent, CalendarEventType
from src.student_dashboard_backend.models.timetable import TimetableSlot


class CalendarEventFactory(factory.Factory):
    """System (institute-wide) calendar events; pass user_id for a user event."""
    class Meta:
        model = CalendarEvent

    date = "2025-09-10"
    end_date = None
    description = factory.Sequence(lambda n: f"Academic notice {n}")
    type = CalendarEventType.OTHER


class TimetableSlotFactory(factory.Factory):
    class Meta:
        model = TimetableSlot

    slot_id = factory.Sequence(lambda n: f"slot-{n}")
    day = "Monday"
    start_time = "09:00"
    end_time = "10:00"
    course_code = factory.Sequence(lambda n: f"CS{100 + n}")
    course_name = factory.LazyAttribute(lambda slot: f"Course {slot.course_code}")
    instructor = Faker("name")
    location = "LHC-101"
    is_custom_task = False


class CustomTaskFactory(TimetableSlotFactory):
    course_code = ""
    course_name = "Personal task"
    instructor = ""
    is_custom_task = True
