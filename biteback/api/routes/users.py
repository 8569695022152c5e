"""Profile routes"""

from fastapi import APIRouter, Depends, Request

from ...api.dependencies import get_current_user, get_unit_of_work
from ...api.responses import ok
from ...application.dtos.common import ApiResponse, MessageResponse
from ...application.dtos.user_dtos import ChangePasswordDto, UpdateProfileDto, UserDto
from ...application.use_cases.change_password import ChangePasswordUseCase
from ...application.use_cases.get_user_profile import GetUserProfileUseCase
from ...application.use_cases.update_user_profile import UpdateUserProfileUseCase
from ...domain.authorization import CurrentUser
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("", response_model=ApiResponse[UserDto])
async def get_profile(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Get current user profile"""
    use_case = GetUserProfileUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id))


@router.patch("", response_model=ApiResponse[UserDto])
async def update_profile(
    payload: UpdateProfileDto,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Update current user profile"""
    use_case = UpdateUserProfileUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, payload))


@router.post("/change-password", response_model=ApiResponse[MessageResponse])
async def change_password(
    payload: ChangePasswordDto,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = ChangePasswordUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, payload))
