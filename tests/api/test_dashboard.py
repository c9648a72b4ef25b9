"""
Tests for the Dashboard API endpoints.
"""
import pytest
from fastapi.testclient import TestClient

from src.student_dashboard_backend.services.security import JWTHandler
from tests.constants import TEST_STUDENT_ID


def auth_headers_for_user(user_id: str) -> dict[str, str]:
    """Helper to create auth headers for a given user id."""
    token = JWTHandler.create_access_token(subject=user_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def student_with_timetable(client: TestClient) -> dict[str, str]:
    headers = auth_headers_for_user(TEST_STUDENT_ID)
    payload = [
        {"day": "Monday", "start_time": "09:00", "end_time": "10:00", "course_code": "CS101"},
        {"day": "Wednesday", "start_time": "15:00", "end_time": "16:00", "course_code": "MA201"},
        {"day": "Wednesday", "start_time": "10:00", "end_time": "11:00", "course_code": "CS101"},
    ]
    response = client.put("/timetable/", json=payload, headers=headers)
    assert response.status_code == 200
    client.post(
        "/timetable/tasks",
        json={"day": "Monday", "start_time": "18:00", "end_time": "19:00", "course_name": "Gym"},
        headers=headers,
    )
    return headers


class TestDashboardScheduleAPI:

    def test_defaults_to_today(self, client: TestClient, student_with_timetable):
        response = client.get("/dashboard/schedule", headers=student_with_timetable)

        assert response.status_code == 200
        data = response.json()
        assert data["date"] == "2025-09-10"
        assert data["schedule"]["title"] == "Today's Schedule"
        assert data["schedule"]["branch"] == "default"
        assert [slot["start_time"] for slot in data["schedule"]["classes"]] == ["10:00", "15:00"]
        assert set(data["class_colors"]) == {slot["slot_id"] for slot in data["schedule"]["classes"]}

    def test_working_saturday(self, client: TestClient, student_with_timetable):
        response = client.get(
            "/dashboard/schedule", params={"target_date": "2025-09-13"}, headers=student_with_timetable
        )

        data = response.json()["schedule"]
        assert data["branch"] == "timetable_override"
        assert data["effective_day"] == "Wednesday"
        assert data["info_message"] == "📅 This day follows Wednesday's schedule as per the academic calendar."

    def test_holiday(self, client: TestClient, student_with_timetable):
        response = client.get(
            "/dashboard/schedule", params={"target_date": "2025-10-20"}, headers=student_with_timetable
        )

        data = response.json()["schedule"]
        assert data["is_holiday"] is True
        assert data["title"] == "It's a Holiday!"
        assert [slot["course_name"] for slot in data["classes"]] == ["Gym"]

    def test_exam_period(self, client: TestClient, student_with_timetable):
        response = client.get(
            "/dashboard/schedule", params={"target_date": "2025-09-22"}, headers=student_with_timetable
        )

        data = response.json()["schedule"]
        assert data["is_exam"] is True
        assert data["title"] == "Exam Period"

    def test_invalid_date(self, client: TestClient, student_with_timetable):
        response = client.get(
            "/dashboard/schedule", params={"target_date": "tomorrow"}, headers=student_with_timetable
        )
        assert response.status_code == 422


class TestDashboardSemesterAPI:

    def test_semester_progress(self, client: TestClient):
        response = client.get("/dashboard/semester", headers=auth_headers_for_user(TEST_STUDENT_ID))

        assert response.status_code == 200
        data = response.json()
        assert data["semester_name"] == "Monsoon Semester 2025-26"
        assert data["week_number"] == 7
        assert data["progress"] == pytest.approx(100 * 44 / 128)

    def test_requires_token(self, client: TestClient):
        assert client.get("/dashboard/semester").status_code == 401
