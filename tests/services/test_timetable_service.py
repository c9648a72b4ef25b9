import pytest
from uuid import UUID, uuid4
from fastapi import HTTPException

from src.student_dashboard_backend.services.timetable_service import TimetableService
from src.student_dashboard_backend.models import timetable as timetable_models

from tests.constants import TEST_STUDENT_ID, TEST_OTHER_STUDENT_ID


def slot(day, start, end, course_code, **extra) -> timetable_models.TimetableSlotCreate:
    return timetable_models.TimetableSlotCreate(
        day=day, start_time=start, end_time=end, course_code=course_code, course_name=f"Course {course_code}", **extra
    )


@pytest.mark.anyio
class TestTimetableService:

    async def test_empty_timetable(self, timetable_service: TimetableService):
        assert await timetable_service.get_timetable(TEST_STUDENT_ID) == []

    async def test_replace_timetable_keeps_upload_order(self, timetable_service: TimetableService):
        uploaded = await timetable_service.replace_timetable(TEST_STUDENT_ID, [
            slot("Tuesday", "11:00", "12:00", "MA201"),
            slot("Monday", "09:00", "10:00", "CS101", instructor="Dr. Rao", location="LHC-101"),
        ])

        assert [s.course_code for s in uploaded] == ["MA201", "CS101"]
        assert uploaded[1].instructor == "Dr. Rao"
        assert uploaded[1].day == "Monday"
        assert all(s.slot_id for s in uploaded)

    async def test_replace_timetable_replaces_everything(self, timetable_service: TimetableService):
        await timetable_service.replace_timetable(TEST_STUDENT_ID, [slot("Monday", "09:00", "10:00", "CS101")])
        await timetable_service.replace_timetable(TEST_STUDENT_ID, [slot("Friday", "14:00", "15:00", "HS100")])

        timetable = await timetable_service.get_timetable(TEST_STUDENT_ID)
        assert [s.course_code for s in timetable] == ["HS100"]

    async def test_timetables_are_per_student(self, timetable_service: TimetableService):
        await timetable_service.replace_timetable(TEST_STUDENT_ID, [slot("Monday", "09:00", "10:00", "CS101")])
        assert await timetable_service.get_timetable(TEST_OTHER_STUDENT_ID) == []

    async def test_slot_must_end_after_it_starts(self, timetable_service: TimetableService):
        with pytest.raises(HTTPException) as e:
            await timetable_service.replace_timetable(TEST_STUDENT_ID, [slot("Monday", "10:00", "09:00", "CS101")])
        assert e.value.status_code == 400

    async def test_add_and_delete_custom_task(self, timetable_service: TimetableService):
        await timetable_service.replace_timetable(TEST_STUDENT_ID, [slot("Monday", "09:00", "10:00", "CS101")])

        task = await timetable_service.add_custom_task(TEST_STUDENT_ID, timetable_models.CustomTaskCreate(
            day="Monday", start_time="18:00", end_time="19:00", course_name="Gym"
        ))
        assert task.is_custom_task
        assert task.course_code == ""

        timetable = await timetable_service.get_timetable(TEST_STUDENT_ID)
        assert [s.slot_id for s in timetable][-1] == task.slot_id

        assert await timetable_service.delete_custom_task(TEST_STUDENT_ID, UUID(task.slot_id)) is True
        timetable = await timetable_service.get_timetable(TEST_STUDENT_ID)
        assert [s.course_code for s in timetable] == ["CS101"]

    async def test_regular_classes_cannot_be_deleted_individually(self, timetable_service: TimetableService):
        uploaded = await timetable_service.replace_timetable(
            TEST_STUDENT_ID, [slot("Monday", "09:00", "10:00", "CS101")]
        )
        with pytest.raises(HTTPException) as e:
            await timetable_service.delete_custom_task(TEST_STUDENT_ID, UUID(uploaded[0].slot_id))
        assert e.value.status_code == 400

    async def test_cannot_delete_someone_elses_task(self, timetable_service: TimetableService):
        task = await timetable_service.add_custom_task(TEST_STUDENT_ID, timetable_models.CustomTaskCreate(
            day="Friday", start_time="18:00", end_time="19:00", course_name="Band practice"
        ))
        with pytest.raises(HTTPException) as e:
            await timetable_service.delete_custom_task(TEST_OTHER_STUDENT_ID, UUID(task.slot_id))
        assert e.value.status_code == 404

        with pytest.raises(HTTPException) as e:
            await timetable_service.delete_custom_task(TEST_STUDENT_ID, uuid4())
        assert e.value.status_code == 404
