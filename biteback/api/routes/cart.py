"""Cart routes"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from ...api.dependencies import get_current_user, get_unit_of_work
from ...api.responses import ok
from ...application.dtos.cart_dtos import AddCartItemDto, CartDto, UpdateCartItemDto
from ...application.dtos.common import ApiResponse
from ...application.use_cases.cart_use_cases import (
    AddCartItemUseCase,
    ClearCartUseCase,
    GetCartUseCase,
    RemoveCartItemUseCase,
    UpdateCartItemUseCase,
)
from ...domain.authorization import CurrentUser
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("", response_model=ApiResponse[CartDto])
async def get_cart(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetCartUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id))


@router.post("/items", response_model=ApiResponse[CartDto], status_code=status.HTTP_201_CREATED)
async def add_cart_item(
    payload: AddCartItemDto,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = AddCartItemUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, payload))


@router.patch("/items/{item_id}", response_model=ApiResponse[CartDto])
async def update_cart_item(
    item_id: UUID,
    payload: UpdateCartItemDto,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateCartItemUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, item_id, payload))


@router.delete("/items/{item_id}", response_model=ApiResponse[CartDto])
async def remove_cart_item(
    item_id: UUID,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = RemoveCartItemUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, item_id))


@router.delete("", response_model=ApiResponse[CartDto])
async def clear_cart(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = ClearCartUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id))
