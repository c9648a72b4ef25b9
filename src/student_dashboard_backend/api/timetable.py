'''
API endpoints for the weekly Timetable and custom tasks.
'''
from typing import Annotated, Any
from uuid import UUID
from fastapi import APIRouter, Depends, status, Response

from ..models import timetable as timetable_models
from ..services.security import verify_token_and_get_user_id
from ..services.timetable_service import TimetableService


class TimetableAPI:
    """
    A class to encapsulate endpoints for the Timetable.
    """
    def __init__(self):
        self.router = APIRouter(
            prefix="/timetable",
            tags=["Timetable"]
        )
        self._register_routes()

    def _register_routes(self):
        """Registers all the API routes for this class."""
        self.router.add_api_route(
            "/",
            self.get_timetable,
            methods=["GET"],
            response_model=list[timetable_models.TimetableSlot])

        self.router.add_api_route(
            "/",
            self.replace_timetable,
            methods=["PUT"],
            response_model=list[timetable_models.TimetableSlot])

        self.router.add_api_route(
            "/tasks",
            self.add_custom_task,
            methods=["POST"],
            status_code=status.HTTP_201_CREATED,
            response_model=timetable_models.TimetableSlot)

        self.router.add_api_route(
            "/tasks/{slot_id}",
            self.delete_custom_task,
            methods=["DELETE"],
            status_code=status.HTTP_204_NO_CONTENT)

    async def get_timetable(
        self,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        timetable_service: Annotated[TimetableService, Depends(TimetableService)]
    ) -> list[Any]:
        """
        Retrieves the caller's generic weekly timetable.
        """
        return await timetable_service.get_timetable(user_id)

    async def replace_timetable(
        self,
        slots: list[timetable_models.TimetableSlotCreate],
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        timetable_service: Annotated[TimetableService, Depends(TimetableService)]
    ) -> list[Any]:
        """
        Uploads a new weekly timetable, replacing the previous one.
        """
        return await timetable_service.replace_timetable(user_id, slots)

    async def add_custom_task(
        self,
        task_data: timetable_models.CustomTaskCreate,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        timetable_service: Annotated[TimetableService, Depends(TimetableService)]
    ) -> Any:
        return await timetable_service.add_custom_task(user_id, task_data)

    async def delete_custom_task(
        self,
        slot_id: UUID,
        user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
        timetable_service: Annotated[TimetableService, Depends(TimetableService)]
    ):
        await timetable_service.delete_custom_task(user_id, slot_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

# Instantiate the class and export its router
timetable_api = TimetableAPI()
router = timetable_api.router
