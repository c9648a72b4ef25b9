'''
Dashboard Service
'''
from datetime import date
from typing import Annotated

from fastapi import Depends

from ..models import schedule as schedule_models
from ..common.config import settings
from ..common.logger import log
from ..core.calendar_utils import parse_calendar_date
from ..core.course_colors import CourseColorRegistry
from ..core.daily_schedule import resolve_daily_schedule
from ..core.semester import resolve_semester_progress
from .calendar_service import CalendarService
from .timetable_service import TimetableService


class DashboardService:
    """
    Feeds the calendar and the timetable of a student into the schedule
    engine. Nothing is cached: every call recomputes from current data.
    """
    def __init__(
        self,
        calendar_service: Annotated[CalendarService, Depends(CalendarService)],
        timetable_service: Annotated[TimetableService, Depends(TimetableService)]
    ):
        self.calendar_service = calendar_service
        self.timetable_service = timetable_service

    async def get_schedule_for_date(
        self, user_id: str, target_date: date, today: date
    ) -> schedule_models.DailySchedule:
        """
        Resolves the schedule card for target_date and attaches a colour to
        every slot. Colours come from a registry seeded with the full weekly
        timetable, so a course keeps its colour on every day.
        """
        log.info(f"User {user_id} requesting schedule for {target_date}.")
        calendar_data = await self.calendar_service.get_calendar_data(user_id, today)
        timetable = await self.timetable_service.get_timetable(user_id)

        descriptor = resolve_daily_schedule(calendar_data.events, timetable, target_date, today=today)
        log.info(f"Schedule for {target_date} resolved via '{descriptor.branch.value}' branch.")

        registry = CourseColorRegistry().seed(timetable)
        return schedule_models.DailySchedule(
            date=target_date,
            schedule=descriptor,
            class_colors=registry.colors_for(descriptor.classes),
        )

    async def get_semester_progress(self, user_id: str, today: date) -> schedule_models.SemesterProgress:
        """Progress through the detected (or configured, or default) semester."""
        log.info(f"User {user_id} requesting semester progress for {today}.")
        calendar_data = await self.calendar_service.get_calendar_data(user_id, today)
        return resolve_semester_progress(
            calendar_data.events,
            today,
            default_window=(
                (settings.SEMESTER_DEFAULT_START_MONTH, settings.SEMESTER_DEFAULT_START_DAY),
                (settings.SEMESTER_DEFAULT_END_MONTH, settings.SEMESTER_DEFAULT_END_DAY),
            ),
            configured_name=calendar_data.semester_name,
            configured_start=parse_calendar_date(calendar_data.semester_start_date),
            configured_end=parse_calendar_date(calendar_data.semester_end_date),
        )
