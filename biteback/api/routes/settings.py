"""Notification settings routes"""

from fastapi import APIRouter, Depends, Request

from ...api.dependencies import get_current_user, get_unit_of_work
from ...api.responses import ok
from ...application.dtos.common import ApiResponse
from ...application.dtos.settings_dtos import NotificationSettingsDto, UpdateNotificationSettingsDto
from ...application.use_cases.notification_settings_use_cases import (
    GetNotificationSettingsUseCase,
    UpdateNotificationSettingsUseCase,
)
from ...domain.authorization import CurrentUser
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/notifications", response_model=ApiResponse[NotificationSettingsDto])
async def get_notification_settings(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetNotificationSettingsUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id))


@router.patch("/notifications", response_model=ApiResponse[NotificationSettingsDto])
async def update_notification_settings(
    payload: UpdateNotificationSettingsDto,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateNotificationSettingsUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, payload))
