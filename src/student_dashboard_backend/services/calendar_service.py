'''
Calendar Service
'''
from datetime import date
from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.engine import get_db_session
from ..database import models as db_models
from ..models import calendar as calendar_models
from ..common.config import settings
from ..common.exceptions import CalendarEventNotFoundError, ReadOnlyEventError
from ..common.logger import log
from ..core import calendar_utils
from ..core.keyword_rules import event_emoji
from ..core.semester import academic_year_bounds, find_calendar_semester_window
from ..data.academic_calendar import PRELOADED_CALENDAR_DATA

CONFIG_ROW_ID = 1


class CalendarService:
    """
    Source of the academic calendar a student sees.

    Merges the institute-wide calendar (admin-configured, else the preloaded
    one moved onto the current year) with the student's own events, and owns
    the write operations on those user events and on reminder preferences.
    """
    def __init__(
        self,
        db: Annotated[AsyncSession, Depends(get_db_session)]
    ):
        self.db = db

    # --- Formatting Helpers ---

    @staticmethod
    def _format_user_event(event_orm: db_models.UserEvents) -> calendar_models.CalendarEvent:
        return calendar_models.CalendarEvent(
            id=str(event_orm.id),
            user_id=event_orm.user_id,
            date=event_orm.date,
            end_date=event_orm.end_date,
            description=event_orm.description,
            type=event_orm.type,
            remind_me=event_orm.remind_me,
        )

    @staticmethod
    def _serialize_system_event(event: calendar_models.CalendarEventBase) -> dict:
        serialized = {
            "date": event.date.isoformat(),
            "description": event.description,
            "type": event.type.value,
        }
        if event.end_date is not None:
            serialized["end_date"] = event.end_date.isoformat()
        return serialized

    def _format_config(self, config_orm: Optional[db_models.CalendarConfig]) -> calendar_models.CalendarConfigRead:
        if config_orm is None:
            return calendar_models.CalendarConfigRead()
        return calendar_models.CalendarConfigRead(
            semester_name=config_orm.semester_name,
            semester_start_date=config_orm.semester_start_date,
            semester_end_date=config_orm.semester_end_date,
            events=[calendar_models.CalendarEvent(**event) for event in (config_orm.events or [])],
        )

    # --- Internal Fetchers ---

    async def _get_config_row(self) -> Optional[db_models.CalendarConfig]:
        return await self.db.get(db_models.CalendarConfig, CONFIG_ROW_ID)

    async def _get_user_event_internal(self, event_id: UUID, user_id: str) -> db_models.UserEvents:
        """
        Fetches a user event the caller is allowed to modify.
        Raises CalendarEventNotFoundError or ReadOnlyEventError.
        """
        event_orm = await self.db.get(db_models.UserEvents, event_id)
        if event_orm is None:
            raise CalendarEventNotFoundError(f"Calendar event {event_id} not found.")
        if event_orm.user_id != user_id:
            raise ReadOnlyEventError(f"User {user_id} does not own calendar event {event_id}.")
        return event_orm

    async def _get_writable_event(self, event_id: UUID, user_id: str) -> db_models.UserEvents:
        """Same as _get_user_event_internal, with errors mapped to HTTP responses."""
        try:
            return await self._get_user_event_internal(event_id, user_id)
        except CalendarEventNotFoundError:
            log.warning(f"User {user_id} tried to modify non-existing event {event_id}.")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Calendar event not found.")
        except ReadOnlyEventError:
            log.warning(f"SECURITY: User {user_id} tried to modify event {event_id} they do not own.")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only modify calendar events you created."
            )

    # --- Calendar Reads ---

    async def get_user_events(self, user_id: str) -> list[calendar_models.CalendarEvent]:
        stmt = select(db_models.UserEvents).filter(
            db_models.UserEvents.user_id == user_id
        ).order_by(db_models.UserEvents.date, db_models.UserEvents.created_at)
        result = await self.db.execute(stmt)
        return [self._format_user_event(event) for event in result.scalars().all()]

    async def get_base_calendar(self, today: date) -> calendar_models.AcademicCalendarData:
        """
        The institute-wide calendar: the admin-configured one if it has any
        events, else the preloaded calendar moved onto the current year.
        Admin-configured dates are used exactly as entered.
        """
        config_orm = await self._get_config_row()
        semester_name = config_orm.semester_name if config_orm else None

        if config_orm and config_orm.events:
            log.info("Using admin-configured academic calendar.")
            return calendar_models.AcademicCalendarData(
                semester_start_date=config_orm.semester_start_date or PRELOADED_CALENDAR_DATA.semester_start_date,
                semester_end_date=config_orm.semester_end_date or PRELOADED_CALENDAR_DATA.semester_end_date,
                semester_name=semester_name,
                events=[calendar_models.CalendarEvent(**event) for event in config_orm.events],
            )

        log.info("No admin-configured calendar found; falling back to the preloaded calendar.")
        adjusted = calendar_utils.adjust_calendar_dates_to_current_year(PRELOADED_CALENDAR_DATA, today.year)
        return adjusted.model_copy(update={"semester_name": semester_name})

    async def get_calendar_data(self, user_id: str, today: date) -> calendar_models.AcademicCalendarData:
        """
        The merged calendar for one student, sorted by date, pointing at the
        semester in progress (or about to start) when the events define one.
        """
        log.info(f"User {user_id} requesting calendar data for {today}.")
        try:
            base = await self.get_base_calendar(today)
            user_events = await self.get_user_events(user_id)
            merged = calendar_utils.merge_events(base.events, user_events)

            semester_start, semester_end = base.semester_start_date, base.semester_end_date
            window = find_calendar_semester_window(merged, today, settings.SEMESTER_LOOKAHEAD_DAYS)
            if window:
                semester_start, semester_end = window[0].isoformat(), window[1].isoformat()

            year_start, year_end = academic_year_bounds(merged)

            return calendar_models.AcademicCalendarData(
                semester_start_date=semester_start,
                semester_end_date=semester_end,
                semester_name=base.semester_name,
                academic_year_start_date=year_start.isoformat() if year_start else semester_start,
                academic_year_end_date=year_end.isoformat() if year_end else semester_end,
                events=merged,
            )
        except Exception as e:
            log.error(f"Error building calendar data for user {user_id}: {e}", exc_info=True)
            raise

    async def get_upcoming_events(self, user_id: str, today: date) -> list[calendar_models.UpcomingEvent]:
        """Ongoing events plus those starting within the upcoming-events window."""
        calendar_data = await self.get_calendar_data(user_id, today)
        upcoming = calendar_utils.filter_upcoming_events(
            calendar_data.events, today, settings.UPCOMING_EVENTS_WINDOW_DAYS
        )
        return [
            calendar_models.UpcomingEvent(
                event=event,
                event_key=calendar_utils.event_key(event),
                emoji=event_emoji(event),
                days_until=calendar_utils.days_until(event.date, today),
                is_ongoing=is_ongoing,
            )
            for event, is_ongoing in upcoming
        ]

    async def get_reminder_events(self, user_id: str, today: date) -> list[calendar_models.UpcomingEvent]:
        """The soonest unfinished events the student set a reminder for."""
        calendar_data = await self.get_calendar_data(user_id, today)
        reminder_keys = await self.get_reminder_preferences(user_id)
        events = calendar_utils.filter_reminder_events(
            calendar_data.events, reminder_keys, today, settings.MAX_REMINDER_WIDGET_EVENTS
        )
        return [
            calendar_models.UpcomingEvent(
                event=event,
                event_key=calendar_utils.event_key(event),
                emoji=event_emoji(event),
                days_until=calendar_utils.days_until(event.date, today),
                is_ongoing=(calendar_utils.event_start(event) or today) < today,
            )
            for event in events
        ]

    # --- User Event Writes ---

    async def add_user_event(
        self, user_id: str, data: calendar_models.CalendarEventCreate
    ) -> calendar_models.CalendarEvent:
        log.info(f"User {user_id} adding calendar event '{data.description}'.")
        try:
            new_event = db_models.UserEvents(
                user_id=user_id,
                date=data.date.isoformat(),
                end_date=data.end_date.isoformat() if data.end_date else None,
                description=data.description,
                type=data.type.value,
                remind_me=data.remind_me,
            )
            self.db.add(new_event)
            await self.db.flush()

            event = self._format_user_event(new_event)
            if event.remind_me:
                await self._sync_reminder(user_id, old_key=None, new_key=calendar_utils.event_key(event), wanted=True)
            return event
        except Exception as e:
            log.error(f"Error in add_user_event for user {user_id}: {e}", exc_info=True)
            raise

    async def update_user_event(
        self, user_id: str, event_id: UUID, data: calendar_models.CalendarEventUpdate
    ) -> calendar_models.CalendarEvent:
        """
        Partially updates one of the caller's own events. The reminder
        preference follows the event: it is re-keyed when the date or
        description changes and mirrors the remind_me flag.
        """
        log.info(f"User {user_id} attempting to update calendar event {event_id}.")
        try:
            event_orm = await self._get_writable_event(event_id, user_id)
            old_key = calendar_utils.event_key(self._format_user_event(event_orm))

            update_data = data.model_dump(exclude_unset=True)
            if not update_data:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields provided to update.")

            for key, value in update_data.items():
                if value is None and key != "end_date":
                    continue
                if key in ("date", "end_date") and value is not None:
                    setattr(event_orm, key, value.isoformat())
                elif key == "type" and value is not None:
                    setattr(event_orm, key, value.value)
                else:
                    setattr(event_orm, key, value)

            if event_orm.end_date is not None and event_orm.end_date < event_orm.date:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="end_date cannot be before date."
                )

            self.db.add(event_orm)
            await self.db.flush()

            event = self._format_user_event(event_orm)
            await self._sync_reminder(
                user_id, old_key=old_key, new_key=calendar_utils.event_key(event), wanted=bool(event.remind_me)
            )
            return event
        except HTTPException as http_exc:
            raise http_exc
        except Exception as e:
            log.error(f"Error in update_user_event for event {event_id}: {e}", exc_info=True)
            raise

    async def delete_user_event(self, user_id: str, event_id: UUID) -> bool:
        """Deletes one of the caller's own events together with its reminder."""
        log.info(f"User {user_id} attempting to delete calendar event {event_id}.")
        try:
            event_orm = await self._get_writable_event(event_id, user_id)
            key = calendar_utils.event_key(self._format_user_event(event_orm))
            await self.db.delete(event_orm)
            await self.db.flush()
            await self._sync_reminder(user_id, old_key=key, new_key=key, wanted=False)
            return True
        except HTTPException as http_exc:
            raise http_exc
        except Exception as e:
            log.error(f"Error in delete_user_event for event {event_id}: {e}", exc_info=True)
            raise

    # --- Reminder Preferences ---

    async def get_reminder_preferences(self, user_id: str) -> list[str]:
        prefs_orm = await self.db.get(db_models.ReminderPreferences, user_id)
        if prefs_orm is None:
            return []
        return list(prefs_orm.event_keys or [])

    async def _save_reminder_preferences(self, user_id: str, event_keys: list[str]) -> list[str]:
        prefs_orm = await self.db.get(db_models.ReminderPreferences, user_id)
        if prefs_orm is None:
            prefs_orm = db_models.ReminderPreferences(user_id=user_id, event_keys=list(event_keys))
            self.db.add(prefs_orm)
        else:
            # Assign a new list so the JSON column is flagged as modified
            prefs_orm.event_keys = list(event_keys)
        await self.db.flush()
        return list(event_keys)

    async def _sync_reminder(self, user_id: str, old_key: Optional[str], new_key: str, wanted: bool):
        keys = await self.get_reminder_preferences(user_id)
        updated = [key for key in keys if key != old_key]
        if wanted and new_key not in updated:
            updated.append(new_key)
        elif not wanted:
            updated = [key for key in updated if key != new_key]
        if updated != keys:
            await self._save_reminder_preferences(user_id, updated)

    async def _set_remind_me_for_key(self, user_id: str, event_key: str, remind_me: bool):
        """Mirrors a reminder toggle onto the caller's own events carrying that key."""
        stmt = select(db_models.UserEvents).filter(
            db_models.UserEvents.user_id == user_id,
        )
        result = await self.db.execute(stmt)
        changed = False
        for event_orm in result.scalars().all():
            if calendar_utils.event_key(self._format_user_event(event_orm)) != event_key:
                continue
            if bool(event_orm.remind_me) != remind_me:
                event_orm.remind_me = remind_me
                changed = True
        if changed:
            await self.db.flush()

    async def toggle_reminder_preference(self, user_id: str, event_key: str) -> list[str]:
        """
        Adds the reminder if absent, removes it if present. When the key
        belongs to one of the caller's own events, its remind_me flag follows.
        """
        log.info(f"User {user_id} toggling reminder for '{event_key}'.")
        try:
            keys = await self.get_reminder_preferences(user_id)
            if event_key in keys:
                keys = [key for key in keys if key != event_key]
            else:
                keys = keys + [event_key]
            await self._set_remind_me_for_key(user_id, event_key, event_key in keys)
            return await self._save_reminder_preferences(user_id, keys)
        except Exception as e:
            log.error(f"Error in toggle_reminder_preference for user {user_id}: {e}", exc_info=True)
            raise

    async def cleanup_past_reminders(self, user_id: str, today: date) -> list[str]:
        """Drops reminders for events that have ended or no longer exist."""
        keys = await self.get_reminder_preferences(user_id)
        if not keys:
            return []
        calendar_data = await self.get_calendar_data(user_id, today)
        kept = calendar_utils.prune_reminder_keys(keys, calendar_data.events, today)
        if len(kept) < len(keys):
            log.info(f"Removing {len(keys) - len(kept)} past reminder(s) for user {user_id}.")
            await self._save_reminder_preferences(user_id, kept)
        return kept

    # --- Admin Configuration ---

    async def get_calendar_config(self) -> calendar_models.CalendarConfigRead:
        return self._format_config(await self._get_config_row())

    async def update_calendar_config(
        self, data: calendar_models.CalendarConfigUpdate
    ) -> calendar_models.CalendarConfigRead:
        """Replaces the provided fields of the institute-wide calendar."""
        log.info("Updating admin calendar configuration.")
        try:
            config_orm = await self._get_config_row()
            if config_orm is None:
                config_orm = db_models.CalendarConfig(id=CONFIG_ROW_ID, events=[])
                self.db.add(config_orm)

            update_data = data.model_dump(exclude_unset=True)
            for key, value in update_data.items():
                if key == "events":
                    config_orm.events = [self._serialize_system_event(event) for event in (data.events or [])]
                elif key in ("semester_start_date", "semester_end_date"):
                    setattr(config_orm, key, value.isoformat() if value else None)
                else:
                    setattr(config_orm, key, value)

            await self.db.flush()
            return self._format_config(config_orm)
        except Exception as e:
            log.error(f"Error in update_calendar_config: {e}", exc_info=True)
            raise
