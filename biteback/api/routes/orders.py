"""Order routes"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from ...api.dependencies import get_current_user, get_payment_service, get_unit_of_work
from ...api.responses import ok
from ...application.dtos.common import ApiResponse, Paginated
from ...application.dtos.order_dtos import CheckoutDto, OrderDto, UpdateOrderStatusDto
from ...application.use_cases.checkout_order import CheckoutOrderUseCase
from ...application.use_cases.get_order import GetOrderUseCase
from ...application.use_cases.list_orders import ListOrdersUseCase
from ...application.use_cases.update_order_status import UpdateOrderStatusUseCase
from ...domain.authorization import CurrentUser
from ...domain.enums import OrderStatus
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.payment_service import MockPaymentService

router = APIRouter()


@router.post("/checkout", response_model=ApiResponse[OrderDto], status_code=status.HTTP_201_CREATED)
async def checkout(
    payload: CheckoutDto,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    payment_service: MockPaymentService = Depends(get_payment_service),
):
    """Place an order from the current cart"""
    use_case = CheckoutOrderUseCase(unit_of_work, payment_service)
    return ok(request, await use_case.execute(current_user.id, payload))


@router.get("", response_model=ApiResponse[Paginated[OrderDto]])
async def list_orders(
    request: Request,
    status_filter: Optional[OrderStatus] = Query(default=None, alias="status"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=50),
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """List orders visible to the current user"""
    use_case = ListOrdersUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user, page=page, limit=limit, status=status_filter))


@router.get("/{order_id}", response_model=ApiResponse[OrderDto])
async def get_order(
    order_id: UUID,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetOrderUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user, order_id))


@router.patch("/{order_id}/status", response_model=ApiResponse[OrderDto])
async def update_order_status(
    order_id: UUID,
    payload: UpdateOrderStatusDto,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateOrderStatusUseCase(unit_of_work)
    return ok(request, await use_case.execute(current_user, order_id, payload))
