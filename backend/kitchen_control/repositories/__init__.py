"""
Repository Layer - Data Access

This layer handles all database queries and returns database records.
Repositories abstract away SQL details from business logic.

Author: TM3
"""
from kitchen_control.repositories.order_repository import OrderRepository

__all__ = [
    'OrderRepository',
]
