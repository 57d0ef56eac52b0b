"""
Order Mapper - conversion between API transfer objects and database records

Field-by-field, no I/O. Inbound conversion never fills the fields the
service owns: order_id, delivery_id, plan_id, order_date, status on Order and
order_detail_id, order on OrderDetail.

Author: TM3
"""
from typing import List

from kitchen_control.domain.order import (
    OrderRequest,
    OrderDetailRequest,
    OrderResponse,
    OrderDetailResponse,
)
from kitchen_control.models.order import Order, OrderDetail


def to_record(request: OrderRequest) -> Order:
    """Build an unsaved Order (with its details) from a creation request"""
    return Order(
        store_id=request.store_id,
        order_details=[to_detail_record(line) for line in request.order_details],
    )


def to_detail_record(request_line: OrderDetailRequest) -> OrderDetail:
    """Build an unsaved OrderDetail from a request line"""
    return OrderDetail(
        product_id=request_line.product_id,
        quantity=request_line.quantity,
    )


def to_response(order: Order) -> OrderResponse:
    """Copy a persisted Order into its response shape"""
    return OrderResponse(
        order_id=order.order_id,
        store_id=order.store_id,
        order_date=order.order_date,
        status=order.status,
        order_details=to_detail_responses(order.order_details or []),
    )


def to_detail_response(detail: OrderDetail) -> OrderDetailResponse:
    return OrderDetailResponse(
        product_id=detail.product_id,
        quantity=detail.quantity,
    )


def to_detail_responses(details: List[OrderDetail]) -> List[OrderDetailResponse]:
    return [to_detail_response(detail) for detail in details]
