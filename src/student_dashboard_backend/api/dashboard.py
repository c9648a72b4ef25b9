'''
API endpoints for the dashboard widgets: the daily schedule card and
semester progress.
'''
from datetime import date
from typing import Annotated, Any
from fastapi import APIRouter, Depends, Query

from ..models import schedule as schedule_models
from ..common.clock import get_today
from ..services.security import verify_token_and_get_user_id
from ..services.dashboard_service import DashboardService


class DashboardAPI:
    """
    A class to encapsulate the dashboard endpoints.
    """
    def __init__(self):
        self.router = APIRouter(
            prefix="/dashboard",
            tags=["Dashboard"]
        )
        self._register_routes()

    def _register_routes(self):
        """Registers all the API routes for this class."""
        self.router.add_api_route(
            "/schedule",
            self.get_schedule,
            methods=["GET"],
            response_model=schedule_models.DailySchedule)

        self.router.add_api_route(
            "/semester",
            self.get_semester_progress,
            methods=["GET"],
            response_model=schedule_models.SemesterProgress)

    async def get_schedule(
        self,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        today: Annotated[date, Depends(get_today)],
        dashboard_service: Annotated[DashboardService, Depends(DashboardService)],
        target_date: Annotated[date | None, Query(description="Day to resolve; defaults to today")] = None
    ) -> Any:
        """
        Resolves what the caller's day looks like: exam, holiday,
        semester boundary, overridden timetable or the regular classes.
        """
        return await dashboard_service.get_schedule_for_date(user_id, target_date or today, today)

    async def get_semester_progress(
        self,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        today: Annotated[date, Depends(get_today)],
        dashboard_service: Annotated[DashboardService, Depends(DashboardService)]
    ) -> Any:
        return await dashboard_service.get_semester_progress(user_id, today)

# Instantiate the class and export its router
dashboard_api = DashboardAPI()
router = dashboard_api.router
