"""
Unit tests for order_mapper

Checks exact field correspondence and that system-assigned fields are left
unset on inbound conversion.

Author: TM3
"""
from datetime import datetime

from kitchen_control.domain.order import (
    OrderDetailRequest,
    OrderDetailResponse,
    OrderRequest,
    OrderResponse,
    OrderStatus,
)
from kitchen_control.mappers import order_mapper
from kitchen_control.models.order import Order, OrderDetail


def _persisted_order():
    """An Order shaped like one loaded from the database"""
    order = Order(
        order_id=42,
        store_id=7,
        delivery_id=3,
        plan_id=9,
        order_date=datetime(2025, 1, 2, 8, 0, 0),
        status=OrderStatus.WAITING,
    )
    order.order_details = [
        OrderDetail(order_detail_id=100, order_id=42, product_id=10, quantity=2.5),
        OrderDetail(order_detail_id=101, order_id=42, product_id=12, quantity=1.0),
    ]
    return order


class TestToRecord:
    """Test inbound conversion request -> records"""

    def test_copies_store_and_details(self, sample_order_request):
        """Test to_record copies store_id and maps every line in order"""
        order = order_mapper.to_record(sample_order_request)

        assert isinstance(order, Order)
        assert order.store_id == 5
        assert [(d.product_id, d.quantity) for d in order.order_details] == [(10, 2.5), (11, 4.0)]

    def test_leaves_system_fields_unset(self, sample_order_request):
        """Test to_record never fills id, delivery, plan, date or status"""
        order = order_mapper.to_record(sample_order_request)

        assert order.order_id is None
        assert order.delivery_id is None
        assert order.plan_id is None
        assert order.order_date is None
        assert order.status is None
        assert all(d.order_detail_id is None for d in order.order_details)
        # Parent link is left to the service
        assert all(d.order is None for d in order.order_details)
        assert all(d.order_id is None for d in order.order_details)

    def test_empty_details(self):
        """Test to_record with no lines gives an empty detail list"""
        order = order_mapper.to_record(OrderRequest(store_id=1))

        assert order.store_id == 1
        assert order.order_details == []

    def test_detail_record_leaves_id_and_parent_unset(self):
        """Test to_detail_record copies product/quantity only"""
        detail = order_mapper.to_detail_record(OrderDetailRequest(product_id=33, quantity=0.75))

        assert isinstance(detail, OrderDetail)
        assert detail.product_id == 33
        assert detail.quantity == 0.75
        assert detail.order_detail_id is None
        assert detail.order_id is None
        assert detail.order is None


class TestToResponse:
    """Test outbound conversion records -> response"""

    def test_copies_every_field(self):
        """Test to_response copies id, store, date, status and details"""
        response = order_mapper.to_response(_persisted_order())

        assert isinstance(response, OrderResponse)
        assert response.order_id == 42
        assert response.store_id == 7
        assert response.order_date == datetime(2025, 1, 2, 8, 0, 0)
        assert response.status == OrderStatus.WAITING
        assert response.order_details == [
            OrderDetailResponse(product_id=10, quantity=2.5),
            OrderDetailResponse(product_id=12, quantity=1.0),
        ]

    def test_detail_response(self):
        """Test to_detail_response copies product_id and quantity"""
        detail = OrderDetail(order_detail_id=5, product_id=8, quantity=3.25)

        assert order_mapper.to_detail_response(detail) == OrderDetailResponse(product_id=8, quantity=3.25)

    def test_is_idempotent(self):
        """Test translating the same record twice gives equal results"""
        order = _persisted_order()

        assert order_mapper.to_response(order) == order_mapper.to_response(order)

    def test_json_uses_camel_case(self):
        """Test response serializes with the API field names"""
        data = order_mapper.to_response(_persisted_order()).model_dump(by_alias=True, mode="json")

        assert set(data) == {"orderId", "storeId", "orderDate", "status", "orderDetails"}
        assert data["status"] == "WAITING"
        assert data["orderDate"] == "2025-01-02T08:00:00"
        assert data["orderDetails"][0] == {"productId": 10, "quantity": 2.5}


class TestRoundTrip:
    """Request -> record -> response keeps the requested content"""

    def test_preserves_store_and_details(self, sample_order_request, fixed_now):
        """Test store_id and detail lines survive the round trip"""
        order = order_mapper.to_record(sample_order_request)
        # System-assigned fields, as the service and database would set them
        order.order_id = 1
        order.order_date = fixed_now
        order.status = OrderStatus.WAITING

        response = order_mapper.to_response(order)

        assert response.store_id == sample_order_request.store_id
        assert [(d.product_id, d.quantity) for d in response.order_details] == [
            (line.product_id, line.quantity) for line in sample_order_request.order_details
        ]
