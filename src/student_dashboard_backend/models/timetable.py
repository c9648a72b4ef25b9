'''
Timetable API Models
'''
from typing import Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

class Weekday(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

class TimetableSlot(BaseModel):
    """
    A single entry of the generic weekly timetable.
    Regular slots are suspended on holidays and exam days;
    custom tasks (personal entries) survive the suspension.
    """
    day: str = Field(..., description="Weekday name, e.g. 'Monday'")
    start_time: str = Field(..., description="'HH:MM', compared lexicographically")
    end_time: str
    course_code: str = ""
    course_name: str = ""
    instructor: str = ""
    location: str = ""
    is_custom_task: bool = False
    slot_id: str

    model_config = ConfigDict(from_attributes=True, frozen=True)

class TimetableSlotCreate(BaseModel):
    """
    Payload for a slot when (re)uploading the weekly timetable or adding a
    custom task. 'slot_id' is assigned by the service.
    """
    day: Weekday
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)
    course_code: str = Field("", max_length=50)
    course_name: str = Field("", max_length=255)
    instructor: str = Field("", max_length=255)
    location: str = Field("", max_length=255)
    is_custom_task: bool = False

class CustomTaskCreate(BaseModel):
    """Payload for POST /timetable/tasks; always stored as a custom task."""
    day: Weekday
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)
    course_name: str = Field(..., min_length=1, max_length=255)
    location: Optional[str] = ""
