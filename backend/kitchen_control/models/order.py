"""
Modelos relacionados con órdenes/pedidos de las tiendas
"""
from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, Integer
from sqlalchemy.orm import relationship

from kitchen_control.core.database import Base
from kitchen_control.domain.order import OrderStatus


class Order(Base):
    """
    Pedido de una tienda a la cocina central (aggregate root)
    """
    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Relaciones (se guardan como IDs simples)
    delivery_id = Column(Integer, nullable=True, index=True)
    store_id = Column(Integer, nullable=False, index=True)
    plan_id = Column(Integer, nullable=True, index=True)

    # Fechas
    order_date = Column(DateTime, nullable=False, index=True)

    # Estados
    status = Column(Enum(OrderStatus, native_enum=False, length=20), nullable=False, index=True)

    # Relationships
    # Not linked with OrderDetail.order: filling the collection never sets a
    # detail's parent, the service assigns it explicitly
    order_details = relationship(
        "OrderDetail",
        overlaps="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderDetail.order_detail_id",
    )

    def __repr__(self):
        return f"<Order id={self.order_id} store={self.store_id} status={self.status}>"


class OrderDetail(Base):
    """
    Línea de un pedido: producto y cantidad solicitada
    """
    __tablename__ = "order_details"

    order_detail_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    order_id = Column(
        Integer,
        ForeignKey("orders.order_id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    product_id = Column(Integer, nullable=False, index=True)
    quantity = Column(Float, nullable=False)

    # Relationships
    order = relationship("Order", overlaps="order_details")

    def __repr__(self):
        return f"<OrderDetail id={self.order_detail_id} product={self.product_id} qty={self.quantity}>"
