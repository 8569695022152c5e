"""Saved delivery location routes"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from ...api.dependencies import get_current_user, get_unit_of_work
from ...api.responses import ok
from ...application.dtos.common import ApiResponse, MessageResponse
from ...application.dtos.location_dtos import CreateLocationDto, LocationDto, UpdateLocationDto
from ...application.use_cases.location_use_cases import (
    CreateLocationUseCase,
    DeleteLocationUseCase,
    GetLocationUseCase,
    ListLocationsUseCase,
    SetDefaultLocationUseCase,
    UpdateLocationUseCase,
)
from ...domain.authorization import CurrentUser
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("", response_model=ApiResponse[List[LocationDto]])
async def list_locations(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListLocationsUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id))


@router.post("", response_model=ApiResponse[LocationDto], status_code=status.HTTP_201_CREATED)
async def create_location(
    payload: CreateLocationDto,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = CreateLocationUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, payload))


@router.get("/{location_id}", response_model=ApiResponse[LocationDto])
async def get_location(
    location_id: UUID,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetLocationUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, location_id))


@router.patch("/{location_id}", response_model=ApiResponse[LocationDto])
async def update_location(
    location_id: UUID,
    payload: UpdateLocationDto,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateLocationUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, location_id, payload))


@router.delete("/{location_id}", response_model=ApiResponse[MessageResponse])
async def delete_location(
    location_id: UUID,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = DeleteLocationUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, location_id))


@router.patch("/{location_id}/default", response_model=ApiResponse[LocationDto])
async def set_default_location(
    location_id: UUID,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = SetDefaultLocationUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, location_id))
