'''
Daily schedule and semester progress API Models
'''
import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .timetable import TimetableSlot


class ScheduleBranch(str, Enum):
    """The precedence branch that produced a ScheduleDescriptor."""
    EXAM = "exam"
    HOLIDAY = "holiday"
    SEMESTER_BOUNDARY = "semester_boundary"
    TIMETABLE_OVERRIDE = "timetable_override"
    OTHER = "other"
    DEFAULT = "default"


class ScheduleDescriptor(BaseModel):
    """
    Resolver output for one (date, events, timetable) triple.
    Built fresh per query and never mutated afterwards.
    """
    title: str
    classes: tuple[TimetableSlot, ...] = ()
    is_holiday: bool = False
    is_exam: bool = False
    holiday_description: Optional[str] = None
    info_message: Optional[str] = None
    branch: ScheduleBranch = ScheduleBranch.DEFAULT
    effective_day: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class SemesterInterval(BaseModel):
    """A derived [start, end] academic term. Never persisted."""
    name: str
    start_date: datetime.date
    end_date: datetime.date
    is_active: bool = False

    model_config = ConfigDict(frozen=True)


class SemesterProgress(BaseModel):
    """What the progress widget shows for 'today'."""
    semester_name: Optional[str] = None
    start_date: datetime.date
    end_date: datetime.date
    progress: float = Field(..., ge=0, le=100)
    week_number: int = Field(..., ge=1)
    is_detected: bool = False


class DailySchedule(BaseModel):
    """API response for GET /dashboard/schedule."""
    date: datetime.date
    schedule: ScheduleDescriptor
    class_colors: dict[str, str] = {}
