"""
Domain Layer - API transfer objects

Request/response schemas exchanged at the HTTP boundary.

Author: TM3
"""
from kitchen_control.domain.order import (
    OrderStatus,
    OrderRequest,
    OrderDetailRequest,
    OrderResponse,
    OrderDetailResponse,
)
from kitchen_control.domain.api_response import ApiResponse

__all__ = [
    'OrderStatus',
    'OrderRequest',
    'OrderDetailRequest',
    'OrderResponse',
    'OrderDetailResponse',
    'ApiResponse',
]
