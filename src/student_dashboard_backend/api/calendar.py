'''
API endpoints for the academic calendar, user events and reminders.
'''
from datetime import date
from typing import Annotated, Any, List
from uuid import UUID
from fastapi import APIRouter, Depends, status, Response

from ..models import calendar as calendar_models
from ..common.clock import get_today
from ..services.security import verify_token_and_get_user_id, verify_admin_user_id
from ..services.calendar_service import CalendarService

class CalendarAPI:
    """
    A class to encapsulate the calendar endpoints.
    """
    def __init__(self):
        self.router = APIRouter(
            prefix="/calendar",
            tags=["Calendar"]
        )
        self._register_routes()

    def _register_routes(self):
        """Registers all the API routes for this class."""
        self.router.add_api_route(
                "/",
                self.get_calendar,
                methods=["GET"],
                response_model=calendar_models.AcademicCalendarData)

        self.router.add_api_route(
                "/upcoming",
                self.list_upcoming_events,
                methods=["GET"],
                response_model=List[calendar_models.UpcomingEvent])

        self.router.add_api_route(
                "/reminders",
                self.list_reminder_events,
                methods=["GET"],
                response_model=List[calendar_models.UpcomingEvent])

        self.router.add_api_route(
                "/events",
                self.create_event,
                methods=["POST"],
                status_code=status.HTTP_201_CREATED,
                response_model=calendar_models.CalendarEvent)

        self.router.add_api_route(
                "/events/{event_id}",
                self.update_event,
                methods=["PATCH"],
                response_model=calendar_models.CalendarEvent)

        self.router.add_api_route(
                "/events/{event_id}",
                self.delete_event,
                methods=["DELETE"],
                status_code=status.HTTP_204_NO_CONTENT)

        self.router.add_api_route(
                "/reminders/toggle",
                self.toggle_reminder,
                methods=["POST"],
                response_model=calendar_models.ReminderPreferencesRead)

        self.router.add_api_route(
                "/reminders/cleanup",
                self.cleanup_reminders,
                methods=["POST"],
                response_model=calendar_models.ReminderPreferencesRead)

        self.router.add_api_route(
                "/config",
                self.get_config,
                methods=["GET"],
                response_model=calendar_models.CalendarConfigRead)

        self.router.add_api_route(
                "/config",
                self.update_config,
                methods=["PUT"],
                response_model=calendar_models.CalendarConfigRead)

    async def get_calendar(
        self,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        today: Annotated[date, Depends(get_today)],
        calendar_service: Annotated[CalendarService, Depends(CalendarService)]
    ) -> Any:
        """
        Retrieves the merged academic calendar (institute + own events).
        """
        return await calendar_service.get_calendar_data(user_id, today)

    async def list_upcoming_events(
        self,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        today: Annotated[date, Depends(get_today)],
        calendar_service: Annotated[CalendarService, Depends(CalendarService)]
    ) -> List[Any]:
        return await calendar_service.get_upcoming_events(user_id, today)

    async def list_reminder_events(
        self,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        today: Annotated[date, Depends(get_today)],
        calendar_service: Annotated[CalendarService, Depends(CalendarService)]
    ) -> List[Any]:
        return await calendar_service.get_reminder_events(user_id, today)

    async def create_event(
        self,
        event_data: calendar_models.CalendarEventCreate,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        calendar_service: Annotated[CalendarService, Depends(CalendarService)]
    ) -> Any:
        """
        Adds a personal event to the caller's calendar.
        """
        return await calendar_service.add_user_event(user_id, event_data)

    async def update_event(
        self,
        event_id: UUID,
        event_data: calendar_models.CalendarEventUpdate,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        calendar_service: Annotated[CalendarService, Depends(CalendarService)]
    ) -> Any:
        """
        Updates one of the caller's own events. Institute events are read-only.
        """
        return await calendar_service.update_user_event(user_id, event_id, event_data)

    async def delete_event(
        self,
        event_id: UUID,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        calendar_service: Annotated[CalendarService, Depends(CalendarService)]
    ):
        await calendar_service.delete_user_event(user_id, event_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    async def toggle_reminder(
        self,
        toggle_data: calendar_models.ReminderToggle,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        calendar_service: Annotated[CalendarService, Depends(CalendarService)]
    ) -> Any:
        keys = await calendar_service.toggle_reminder_preference(user_id, toggle_data.event_key)
        return calendar_models.ReminderPreferencesRead(user_id=user_id, event_keys=keys)

    async def cleanup_reminders(
        self,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        today: Annotated[date, Depends(get_today)],
        calendar_service: Annotated[CalendarService, Depends(CalendarService)]
    ) -> Any:
        """
        Removes reminders for events that are over.
        """
        keys = await calendar_service.cleanup_past_reminders(user_id, today)
        return calendar_models.ReminderPreferencesRead(user_id=user_id, event_keys=keys)

    async def get_config(
        self,
        admin_id: Annotated[str, Depends(verify_admin_user_id)],
        calendar_service: Annotated[CalendarService, Depends(CalendarService)]
    ) -> Any:
        return await calendar_service.get_calendar_config()

    async def update_config(
        self,
        config_data: calendar_models.CalendarConfigUpdate,
        admin_id: Annotated[str, Depends(verify_admin_user_id)],
        calendar_service: Annotated[CalendarService, Depends(CalendarService)]
    ) -> Any:
        """
        Replaces the institute-wide calendar. Restricted to calendar administrators.
        """
        return await calendar_service.update_calendar_config(config_data)

# Instantiate the class and export its router
calendar_api = CalendarAPI()
router = calendar_api.router
