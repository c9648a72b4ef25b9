'''
Preloaded academic calendar.

Used whenever the admin has not configured a calendar. The dates are for
the 2025-26 academic year and are shifted onto the current year at read
time (see core.calendar_utils.adjust_calendar_dates_to_current_year).
'''
from ..models.calendar import AcademicCalendarData, CalendarEvent, CalendarEventType

_T = CalendarEventType

_EVENTS = [
    ("2025-07-21", "2025-07-25", "Registration and fee payment for all students", _T.OTHER),
    ("2025-07-25", None, "Orientation programme for 1st year UG students", _T.OTHER),
    ("2025-07-28", None, "Commencement of Monsoon Semester classes", _T.START_OF_SEMESTER),
    ("2025-08-15", None, "Independence Day", _T.HOLIDAY),
    ("2025-08-27", None, "Ganesh Chaturthi", _T.HOLIDAY),
    ("2025-09-13", None, "Saturday working as per Wednesday timetable", _T.OTHER),
    ("2025-09-22", "2025-09-27", "Mid-Semester Examinations", _T.MID_SEM_EXAMS),
    ("2025-10-01", "2025-10-05", "Mid semester break", _T.OTHER),
    ("2025-10-02", None, "Gandhi Jayanti", _T.HOLIDAY),
    ("2025-10-20", None, "Diwali", _T.HOLIDAY),
    ("2025-11-01", None, "Last date for submission of Ph. D thesis", _T.OTHER),
    ("2025-11-07", "2025-11-09", "Inter-IIT sports meet", _T.OTHER),
    ("2025-11-15", None, "Semester feedback for all students", _T.OTHER),
    ("2025-11-22", None, "Last day of classes", _T.OTHER),
    ("2025-11-24", "2025-12-03", "End-Semester Examinations", _T.END_SEM_EXAMS),
    ("2025-12-04", "2025-12-31", "Winter break", _T.OTHER),
    ("2025-12-25", None, "Christmas", _T.HOLIDAY),
    ("2026-01-01", "2026-01-02", "Pre-registration and fee payment for Winter Semester", _T.OTHER),
    ("2026-01-05", None, "Commencement of Winter Semester classes", _T.START_OF_SEMESTER),
    ("2026-01-26", None, "Republic Day", _T.HOLIDAY),
    ("2026-02-14", "2026-02-16", "Srijan cultural fest", _T.OTHER),
    ("2026-03-04", None, "Holi", _T.HOLIDAY),
    ("2026-03-09", "2026-03-14", "Mid-Semester Examinations", _T.MID_SEM_EXAMS),
    ("2026-03-21", None, "Eid-ul-Fitr", _T.HOLIDAY),
    ("2026-04-18", None, "Saturday: Friday timetable to be followed", _T.OTHER),
    ("2026-04-27", "2026-05-06", "End-Semester Examinations", _T.END_SEM_EXAMS),
    ("2026-05-07", "2026-07-24", "Summer break", _T.OTHER),
]

PRELOADED_CALENDAR_DATA = AcademicCalendarData(
    semester_start_date="2025-07-28",
    semester_end_date="2025-12-03",
    events=[
        CalendarEvent(date=start, end_date=end, description=description, type=event_type)
        for start, end, description, event_type in _EVENTS
    ],
)
