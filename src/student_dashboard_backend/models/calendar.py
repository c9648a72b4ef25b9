'''
Academic Calendar API Models
'''
import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CalendarEventType(str, Enum):
    START_OF_SEMESTER = "Start of Semester"
    MID_SEM_EXAMS = "Mid-Semester Exams"
    END_SEM_EXAMS = "End-Semester Exams"
    HOLIDAY = "Holiday"
    OTHER = "Other"


class CalendarEvent(BaseModel):
    """
    A single academic-calendar entry as seen by the schedule engine.

    Dates are kept as 'YYYY-MM-DD' strings: the engine parses them itself and
    treats anything unparsable as a non-matching event instead of failing.
    Events without a user_id are system (preloaded / admin) events.
    """
    date: str
    end_date: Optional[str] = None
    description: str
    type: CalendarEventType
    id: Optional[str] = None
    user_id: Optional[str] = None
    remind_me: Optional[bool] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def is_user_event(self) -> bool:
        return self.user_id is not None


class CalendarEventBase(BaseModel):
    """
    Shared validation for events written through the API.
    Unlike CalendarEvent, dates here must be real dates.
    """
    date: datetime.date
    end_date: Optional[datetime.date] = None
    description: str = Field(..., min_length=1, max_length=500)
    type: CalendarEventType = CalendarEventType.OTHER
    remind_me: bool = False

    @model_validator(mode="after")
    def check_date_range(self):
        if self.end_date is not None and self.end_date < self.date:
            raise ValueError("end_date cannot be before date.")
        return self


class CalendarEventCreate(CalendarEventBase):
    """
    Payload for POST /calendar/events.
    'user_id' is excluded and will be added by the service.
    """
    pass


class CalendarEventUpdate(BaseModel):
    """
    Payload for PATCH /calendar/events/{id}. All fields are optional.
    """
    date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    type: Optional[CalendarEventType] = None
    remind_me: Optional[bool] = None

    @model_validator(mode="after")
    def check_date_range(self):
        # One-sided updates are checked against the stored row by the service
        if self.date is not None and self.end_date is not None and self.end_date < self.date:
            raise ValueError("end_date cannot be before date.")
        return self


class AcademicCalendarData(BaseModel):
    """
    The merged calendar a user sees: system events plus their own events,
    together with the semester window the calendar currently points at.
    """
    semester_start_date: str
    semester_end_date: str
    semester_name: Optional[str] = None
    academic_year_start_date: Optional[str] = None
    academic_year_end_date: Optional[str] = None
    events: list[CalendarEvent] = []


class CalendarConfigRead(BaseModel):
    """Admin-configured, institute-wide calendar."""
    semester_name: Optional[str] = None
    semester_start_date: Optional[str] = None
    semester_end_date: Optional[str] = None
    events: list[CalendarEvent] = []

    model_config = ConfigDict(from_attributes=True)


class CalendarConfigUpdate(BaseModel):
    semester_name: Optional[str] = None
    semester_start_date: Optional[datetime.date] = None
    semester_end_date: Optional[datetime.date] = None
    events: Optional[list[CalendarEventBase]] = None

    @model_validator(mode="after")
    def check_semester_window(self):
        if (
            self.semester_start_date is not None
            and self.semester_end_date is not None
            and self.semester_end_date < self.semester_start_date
        ):
            raise ValueError("semester_end_date cannot be before semester_start_date.")
        return self


class UpcomingEvent(BaseModel):
    """An event decorated for the upcoming-events / reminders widgets."""
    event: CalendarEvent
    event_key: str
    emoji: str
    days_until: int
    is_ongoing: bool


class ReminderToggle(BaseModel):
    event_key: str = Field(..., min_length=1)


class ReminderPreferencesRead(BaseModel):
    user_id: str
    event_keys: list[str]
