"""
Order Repository - Data Access Layer for Orders

Handles all database access for the Order aggregate (orders + order_details).
Each write is one transaction: committed as a whole or rolled back as a whole.

Author: TM3
"""
import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from kitchen_control.core.exceptions import StorageError
from kitchen_control.models.order import Order, OrderDetail

logger = logging.getLogger(__name__)


class OrderRepository:
    """
    Repository for Order data access

    All queries for orders are centralized here.
    Returns Order records with their details loaded.
    """

    def __init__(self, session: Session):
        self.session = session

    def insert(self, order: Order) -> Order:
        """
        Persist a new order together with its details

        Args:
            order: Unsaved Order whose details already point back to it

        Returns:
            The persisted Order, with order_id and detail ids assigned

        Raises:
            StorageError: if the database rejects the aggregate (nothing is saved)
        """
        store_id = order.store_id
        try:
            self.session.add(order)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Rolled back order insert for store {store_id}: {e}")
            raise StorageError(f"Could not save order: {e}") from e

        self.session.refresh(order)
        return order

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """
        Find order by ID with its details

        Args:
            order_id: Internal order ID

        Returns:
            Order or None if not found
        """
        try:
            stmt = (
                select(Order)
                .options(selectinload(Order.order_details))
                .where(Order.order_id == order_id)
            )
            return self.session.execute(stmt).scalar_one_or_none()
        except OverflowError:
            # The driver cannot bind an id this large, so no row can have it
            self.session.rollback()
            return None
        except SQLAlchemyError as e:
            logger.error(f"Error loading order {order_id}: {e}")
            raise StorageError(f"Could not load order {order_id}: {e}") from e

    def find_all(self) -> List[Order]:
        """
        Find every order with its details

        Returns:
            List of orders in ascending order_id (insertion) order
        """
        try:
            stmt = (
                select(Order)
                .options(selectinload(Order.order_details))
                .order_by(Order.order_id)
            )
            return list(self.session.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error loading orders: {e}")
            raise StorageError(f"Could not load orders: {e}") from e

    def delete_by_id(self, order_id: int) -> int:
        """
        Delete an order and all of its details in one transaction

        Deleting an ID that does not exist is not an error.

        Args:
            order_id: Internal order ID

        Returns:
            Number of orders deleted (0 or 1)
        """
        try:
            self.session.execute(
                delete(OrderDetail).where(OrderDetail.order_id == order_id)
            )
            result = self.session.execute(
                delete(Order).where(Order.order_id == order_id)
            )
            self.session.commit()
        except OverflowError:
            self.session.rollback()
            return 0
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Rolled back delete of order {order_id}: {e}")
            raise StorageError(f"Could not delete order {order_id}: {e}") from e

        # Drop stale instances from the identity map
        self.session.expire_all()
        return result.rowcount
