"""
Orders API Endpoints
Orders placed by stores to the central kitchen

Endpoints:
- POST   /api/orders       - Create an order with its line items
- GET    /api/orders/{id}  - Get one order
- GET    /api/orders       - List all orders
- DELETE /api/orders/{id}  - Delete an order and its line items

Errors are rendered by the exception handlers registered in kitchen_control.main.

Author: TM3
"""
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from kitchen_control.core.database import get_db
from kitchen_control.domain.api_response import ApiResponse
from kitchen_control.domain.order import OrderRequest, OrderResponse
from kitchen_control.repositories.order_repository import OrderRepository
from kitchen_control.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["Orders"])

# orders.order_id is a 32-bit INTEGER column
MIN_ORDER_ID = -(2 ** 31)
MAX_ORDER_ID = 2 ** 31 - 1

ERROR_RESPONSES = {400: {"model": ApiResponse, "description": "Bad request"}}


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Build the service for this request's database session"""
    return OrderService(OrderRepository(db))


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new order",
    description="Create a new order from a store, including its order details",
    responses={201: {"description": "Order created successfully"}, **ERROR_RESPONSES},
)
def create_order(request: OrderRequest, service: OrderService = Depends(get_order_service)):
    return service.create_order(request)


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Get an order by ID",
    responses=ERROR_RESPONSES,
)
def get_order_by_id(
    order_id: int = Path(..., ge=MIN_ORDER_ID, le=MAX_ORDER_ID, description="Order ID"),
    service: OrderService = Depends(get_order_service),
):
    return service.get_order_by_id(order_id)


@router.get("", response_model=List[OrderResponse], summary="List all orders")
def get_all_orders(service: OrderService = Depends(get_order_service)):
    return service.get_all_orders()


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an order",
    description="Delete an order and all of its order details",
    responses=ERROR_RESPONSES,
)
def delete_order(
    order_id: int = Path(..., ge=MIN_ORDER_ID, le=MAX_ORDER_ID, description="Order ID"),
    service: OrderService = Depends(get_order_service),
):
    service.delete_order(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
