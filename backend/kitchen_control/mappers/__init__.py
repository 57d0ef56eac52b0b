"""
Mapper Layer - API schemas <-> database records
"""
from kitchen_control.mappers import order_mapper

__all__ = ['order_mapper']
