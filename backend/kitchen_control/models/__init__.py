"""
Modelos de base de datos
"""
from .order import Order, OrderDetail

__all__ = [
    "Order",
    "OrderDetail",
]
