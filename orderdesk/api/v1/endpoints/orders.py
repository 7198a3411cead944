"""Order endpoints for REST API."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from orderdesk.api.deps import get_current_requester, get_order_service, require_admin
from orderdesk.application.dtos.order_dto import (
    MAX_ID,
    CreateOrderRequest,
    OrderDTO,
    OrderListDTO,
    UpdateOrderStatusRequest,
)
from orderdesk.application.results import OrderErrorCode, OrderResult
from orderdesk.application.services.order_service import OrderApplicationService
from orderdesk.domain.value_objects import Requester

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])

_STATUS_BY_ERROR = {
    OrderErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    OrderErrorCode.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    OrderErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    OrderErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _unwrap(result: OrderResult[OrderDTO]) -> OrderDTO:
    """Return the value or raise the matching HTTPException."""
    if result.success:
        return result.value
    raise HTTPException(status_code=_STATUS_BY_ERROR[result.error.code], detail=result.error.message)


@router.post("", response_model=OrderDTO, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: CreateOrderRequest,
    requester: Requester = Depends(get_current_requester),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Create order for the authenticated user.

    Raises:
        HTTPException: 400 for empty orders, unknown products or insufficient stock
    """
    logger.debug(f"Order creation requested by user {requester.user_id}")
    return _unwrap(await service.create_order(request, requester.user_id))


@router.get("/admin/all", response_model=OrderListDTO)
async def list_all_orders(
    requester: Requester = Depends(require_admin),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderListDTO:
    """Admin: get all orders across all users."""
    logger.debug(f"Admin {requester.user_id} requesting all orders")
    return await service.find_all()


@router.get("", response_model=OrderListDTO)
async def list_my_orders(
    requester: Requester = Depends(get_current_requester),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderListDTO:
    """Get all orders placed by the authenticated user."""
    logger.debug(f"User {requester.user_id} requesting their orders")
    return await service.find_all(requester.user_id)


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: int = Path(..., gt=0, le=MAX_ID, description="Order ID"),
    requester: Requester = Depends(get_current_requester),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID (admins see any order, users only their own).

    Raises:
        HTTPException: 404 if the order does not exist, 403 if it belongs to someone else
    """
    logger.debug(
        f"Finding order {order_id} for user {requester.user_id} (role: {requester.role.value})"
    )
    return _unwrap(await service.find_one(order_id, requester.ownership_filter))


@router.patch("/{order_id}", response_model=OrderDTO)
async def update_order_status(
    request: UpdateOrderStatusRequest,
    order_id: int = Path(..., gt=0, le=MAX_ID, description="Order ID"),
    requester: Requester = Depends(require_admin),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Admin: overwrite an order's status (any status to any status).

    Raises:
        HTTPException: 404 if the order does not exist
    """
    logger.info(f"Admin {requester.user_id} setting order {order_id} to {request.status.value}")
    return _unwrap(await service.update_status(order_id, request.status))
