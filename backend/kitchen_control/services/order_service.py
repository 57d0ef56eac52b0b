"""
Order Service
Handles creation, lookup and deletion of store orders

Author: TM3
"""
import logging
from datetime import datetime
from typing import Callable, List

from kitchen_control.core.exceptions import OrderNotFoundError
from kitchen_control.domain.order import OrderRequest, OrderResponse, OrderStatus
from kitchen_control.mappers import order_mapper
from kitchen_control.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)

INITIAL_STATUS = OrderStatus.WAITING


class OrderService:
    """
    Service for store orders

    Handles:
    - Order creation (timestamp, initial status, line items)
    - Lookup by ID and listing
    - Deletion of an order with its line items
    """

    def __init__(self, repository: OrderRepository, clock: Callable[[], datetime] = datetime.now):
        self.repository = repository
        self.clock = clock

    def create_order(self, request: OrderRequest) -> OrderResponse:
        """
        Create an order with its line items in a single transaction

        Args:
            request: Store ID and requested (product, quantity) lines

        Returns:
            The persisted order, including its system-assigned ID
        """
        order = order_mapper.to_record(request)
        order.order_date = self.clock()
        order.status = INITIAL_STATUS

        for detail in order.order_details:
            detail.order = order

        saved = self.repository.insert(order)
        logger.info(
            f"Created order {saved.order_id} for store {saved.store_id} "
            f"with {len(saved.order_details)} line(s)"
        )
        return order_mapper.to_response(saved)

    def get_order_by_id(self, order_id: int) -> OrderResponse:
        """
        Get a single order

        Raises:
            OrderNotFoundError: if no order has this ID
        """
        order = self.repository.find_by_id(order_id)
        if order is None:
            logger.warning(f"Order {order_id} not found")
            raise OrderNotFoundError(order_id)
        return order_mapper.to_response(order)

    def get_all_orders(self) -> List[OrderResponse]:
        """Every order, oldest first"""
        return [order_mapper.to_response(order) for order in self.repository.find_all()]

    def delete_order(self, order_id: int) -> None:
        """
        Delete an order and its line items

        An unknown ID is accepted silently.
        """
        deleted = self.repository.delete_by_id(order_id)
        if deleted:
            logger.info(f"Deleted order {order_id}")
        else:
            logger.info(f"Delete requested for unknown order {order_id}, nothing to do")
