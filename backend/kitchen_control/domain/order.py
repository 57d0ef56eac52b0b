"""
Order Domain Models

Request and response shapes of the orders API. They are deliberately
narrower than the database records: a request line only carries the product
and the quantity, everything else is assigned by the service.

JSON field names are camelCase (storeId, orderDetails, ...); Python code
uses the snake_case attribute names.

Author: TM3
"""
from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    """
    Lifecycle status of an order

    Orders are created as WAITING. The other values are written by other
    parts of the kitchen workflow and only need to be readable here.
    """
    WAITING = "WAITING"
    PROCESSING = "PROCESSING"
    DONE = "DONE"


class OrderDetailRequest(BaseModel):
    """A requested line item: which product and how much of it"""

    product_id: int = Field(..., alias="productId", description="Product catalog ID")
    # inf/nan cannot be stored and read back as a JSON number
    quantity: float = Field(..., allow_inf_nan=False, description="Quantity requested")

    model_config = ConfigDict(populate_by_name=True)


class OrderRequest(BaseModel):
    """
    Schema for creating a new order

    Fields:
        store_id: Store placing the order
        order_details: Requested line items (may be empty)
    """

    store_id: int = Field(..., alias="storeId", description="Store ID")
    order_details: List[OrderDetailRequest] = Field(
        default_factory=list,
        alias="orderDetails",
        description="Requested line items",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "storeId": 5,
                "orderDetails": [{"productId": 10, "quantity": 2.5}],
            }
        },
    )


class OrderDetailResponse(BaseModel):
    """Line item of a persisted order"""

    product_id: int = Field(..., alias="productId", description="Product catalog ID")
    quantity: float = Field(..., description="Quantity requested")

    model_config = ConfigDict(populate_by_name=True)


class OrderResponse(BaseModel):
    """
    Order as returned by the API

    Fields:
        order_id: System-assigned order ID
        store_id: Store that placed the order
        order_date: Creation timestamp (ISO-8601 in JSON)
        status: Order status
        order_details: Line items, in the order they were requested
    """

    order_id: int = Field(..., alias="orderId", description="Order ID")
    store_id: int = Field(..., alias="storeId", description="Store ID")
    order_date: datetime = Field(..., alias="orderDate", description="Creation timestamp")
    status: OrderStatus = Field(..., description="Order status")
    order_details: List[OrderDetailResponse] = Field(
        default_factory=list,
        alias="orderDetails",
        description="Order line items",
    )

    model_config = ConfigDict(populate_by_name=True)
