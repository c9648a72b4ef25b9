'''
Timetable Service
'''
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.engine import get_db_session
from ..database import models as db_models
from ..models import timetable as timetable_models
from ..common.logger import log


class TimetableService:
    """
    Service for a student's generic weekly timetable, including the
    personal (custom task) entries they add on top of their classes.
    """
    def __init__(
        self,
        db: Annotated[AsyncSession, Depends(get_db_session)]
    ):
        self.db = db

    @staticmethod
    def _format_slot(slot_orm: db_models.TimetableSlots) -> timetable_models.TimetableSlot:
        return timetable_models.TimetableSlot(
            slot_id=str(slot_orm.id),
            day=slot_orm.day,
            start_time=slot_orm.start_time,
            end_time=slot_orm.end_time,
            course_code=slot_orm.course_code,
            course_name=slot_orm.course_name,
            instructor=slot_orm.instructor,
            location=slot_orm.location,
            is_custom_task=slot_orm.is_custom_task,
        )

    @staticmethod
    def _validate_times(start_time: str, end_time: str):
        if end_time <= start_time:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Slot must end after it starts ({start_time} - {end_time})."
            )

    async def get_timetable(self, user_id: str) -> list[timetable_models.TimetableSlot]:
        """The student's weekly slots in the order they were uploaded."""
        log.info(f"User {user_id} fetching weekly timetable.")
        stmt = select(db_models.TimetableSlots).filter(
            db_models.TimetableSlots.user_id == user_id
        ).order_by(db_models.TimetableSlots.position)
        result = await self.db.execute(stmt)
        return [self._format_slot(slot) for slot in result.scalars().all()]

    async def replace_timetable(
        self, user_id: str, slots: list[timetable_models.TimetableSlotCreate]
    ) -> list[timetable_models.TimetableSlot]:
        """Replaces the whole weekly timetable (custom tasks included)."""
        log.info(f"User {user_id} uploading a timetable of {len(slots)} slot(s).")
        try:
            for slot in slots:
                self._validate_times(slot.start_time, slot.end_time)

            await self.db.execute(
                delete(db_models.TimetableSlots).where(db_models.TimetableSlots.user_id == user_id)
            )
            for position, slot in enumerate(slots):
                self.db.add(db_models.TimetableSlots(
                    user_id=user_id,
                    day=slot.day.value,
                    start_time=slot.start_time,
                    end_time=slot.end_time,
                    course_code=slot.course_code,
                    course_name=slot.course_name,
                    instructor=slot.instructor,
                    location=slot.location,
                    is_custom_task=slot.is_custom_task,
                    position=position,
                ))
            await self.db.flush()
            return await self.get_timetable(user_id)
        except HTTPException as http_exc:
            raise http_exc
        except Exception as e:
            log.error(f"Error in replace_timetable for user {user_id}: {e}", exc_info=True)
            raise

    async def add_custom_task(
        self, user_id: str, data: timetable_models.CustomTaskCreate
    ) -> timetable_models.TimetableSlot:
        """Appends a personal entry to the weekly timetable."""
        log.info(f"User {user_id} adding custom task '{data.course_name}' on {data.day.value}.")
        self._validate_times(data.start_time, data.end_time)

        existing = await self.get_timetable(user_id)
        new_slot = db_models.TimetableSlots(
            user_id=user_id,
            day=data.day.value,
            start_time=data.start_time,
            end_time=data.end_time,
            course_code="",
            course_name=data.course_name,
            instructor="",
            location=data.location or "",
            is_custom_task=True,
            position=len(existing),
        )
        self.db.add(new_slot)
        await self.db.flush()
        return self._format_slot(new_slot)

    async def delete_custom_task(self, user_id: str, slot_id: UUID) -> bool:
        """Deletes one of the student's custom tasks. Regular classes are only replaced via upload."""
        log.info(f"User {user_id} attempting to delete custom task {slot_id}.")
        slot_orm = await self.db.get(db_models.TimetableSlots, slot_id)
        if slot_orm is None or slot_orm.user_id != user_id:
            log.warning(f"User {user_id} tried to delete missing or foreign slot {slot_id}.")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Timetable slot not found.")
        if not slot_orm.is_custom_task:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Only custom tasks can be deleted individually."
            )
        await self.db.delete(slot_orm)
        await self.db.flush()
        return True
