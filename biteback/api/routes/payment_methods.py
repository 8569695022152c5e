"""Saved payment method routes"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from ...api.dependencies import get_current_user, get_unit_of_work
from ...api.responses import ok
from ...application.dtos.common import ApiResponse, MessageResponse
from ...application.dtos.payment_dtos import AddPaymentMethodDto, PaymentMethodDto
from ...application.use_cases.payment_method_use_cases import (
    AddPaymentMethodUseCase,
    ListPaymentMethodsUseCase,
    RemovePaymentMethodUseCase,
    SetDefaultPaymentMethodUseCase,
)
from ...domain.authorization import CurrentUser
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("", response_model=ApiResponse[List[PaymentMethodDto]])
async def list_payment_methods(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListPaymentMethodsUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id))


@router.post("", response_model=ApiResponse[PaymentMethodDto], status_code=status.HTTP_201_CREATED)
async def add_payment_method(
    payload: AddPaymentMethodDto,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = AddPaymentMethodUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, payload))


@router.delete("/{payment_method_id}", response_model=ApiResponse[MessageResponse])
async def remove_payment_method(
    payment_method_id: UUID,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = RemovePaymentMethodUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, payment_method_id))


@router.patch("/{payment_method_id}/default", response_model=ApiResponse[PaymentMethodDto])
async def set_default_payment_method(
    payment_method_id: UUID,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = SetDefaultPaymentMethodUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user.id, payment_method_id))
